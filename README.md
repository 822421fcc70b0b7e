# bcprotocol

Configuration value types and small ZeroMQ helpers for protocol services.

## Installation

```
pip install bcprotocol
```

The package depends on `pyzmq`, which supplies CURVE key generation and the
messaging context.

## Modules

### `bcprotocol.settings`

`Settings` is a dataclass of socket and session tuning values, with these
defaults:

| field                | default |
|----------------------|---------|
| `send_high_water`    | 100     |
| `receive_high_water` | 100     |
| `message_size_limit` | 0       |
| `handshake_seconds`  | 30      |
| `ping_seconds`       | 0       |
| `inactivity_seconds` | 0       |
| `reconnect_seconds`  | 1       |
| `send_milliseconds`  | 0       |

### `bcprotocol.authority`

`Authority` is an `{ip address, port}` pair.

- `Authority()` is the null address `::` with port 0.
- `Authority("1.2.240.1:8333")` or `Authority("[2001:db8::2]:8333")` parses
  text; the port is optional and defaults to 0. Only the first
  whitespace-separated word of the text is read.
- `Authority(host, port)` takes a host as `1.2.240.1`, `2001:db8::2` or
  `[2001:db8::2]` and a port.

IPv4 addresses are held in their IPv4-mapped IPv6 form. The `ip` property is
an `ipaddress.IPv6Address`, `port` an `int`. `to_hostname()` gives
`1.2.240.1` or `[2001:db8::2]`; `to_string()` (and `str()`) add `:port`
unless the port is 0. An authority is truthy when its port is non-zero.
Authorities compare equal when address and port match, and are hashable.

Malformed text, or a port above 65535, raises `ParseError`, a subclass of
`ValueError` whose `value` attribute holds the rejected text.

### `bcprotocol.endpoint`

`Endpoint` is a frozen dataclass with `scheme` (default `""`), `host`
(default `"localhost"`) and `port` (default 0); a port outside 0–65535
raises `ValueError`.

- `Endpoint.parse(uri)` reads `[scheme://]host[:port]`, where the scheme is
  one of `tcp`, `udp`, `http`, `https` or `inproc`. Bad text raises
  `ParseError`.
- `Endpoint.from_authority(authority)` builds an endpoint with no scheme from
  an `Authority`.
- `to_string()` / `str()` omit an empty scheme and a zero port.
- `to_local()` returns a copy with a `*` host replaced by `localhost`.
- An endpoint is truthy when it has a scheme.

### `bcprotocol.sodium`

`encode_z85(data)` and `decode_z85(text)` implement ZeroMQ's Z85 encoding.
Input to `encode_z85` must be a multiple of four bytes and input to
`decode_z85` a multiple of five characters; otherwise, or on an invalid
character, they raise `ValueError`.

`Sodium` is a 32-byte key. `Sodium()` is the null (all-zero) key,
`Sodium(text)` decodes 40 characters of Z85 (raising `ParseError` if the
text is not a valid 32-byte key) and `Sodium(raw)` takes 32 raw bytes
(raising `ValueError` for any other length). `to_string()` / `str()` give the
Z85 text, `bytes()` the raw key. A key is truthy unless it is null; keys
compare equal by value and are hashable.

### `bcprotocol.certificate`

`Certificate` holds a CURVE key pair as `public_key` and `private_key`
properties, both `Sodium`.

- `Certificate()` generates a pair whose Z85 text contains no `#`, so that
  the keys can be written to settings files.
- `Certificate(private_key)` derives the public key from a given private key;
  with a null private key it generates a pair from the full key space.
- `Certificate.derive(private_key)` returns the public key, or `None`.
- `Certificate.create(setting)` returns a new `(public, private)` pair, or
  `None`; when `setting` is true it retries (up to 255 times) until neither
  key contains `#`.

A certificate is truthy when it has a public key.

### `bcprotocol.context`

`Context(started=True)` owns a `zmq.Context` that can be started and stopped
repeatedly under a lock. `start()` returns `False` if already started;
`stop()` terminates the context, blocking until its sockets are closed, and
returns `True` if it was already stopped or terminated cleanly. `handle` is
the underlying `zmq.Context` or `None`. The object is truthy while started
and stops itself when used as a context manager.

## Examples

```python
from bcprotocol.authority import Authority
from bcprotocol.endpoint import Endpoint

peer = Authority("1.2.240.1:8333")
print(peer.port)           # 8333
print(peer.to_hostname())  # 1.2.240.1
print(peer)                # 1.2.240.1:8333

print(Authority("2001:db8::2", 8333))  # [2001:db8::2]:8333

service = Endpoint.parse("tcp://*:9000")
print(service.to_local())  # tcp://localhost:9000
```

```python
from bcprotocol.sodium import decode_z85, encode_z85

print(encode_z85(bytes.fromhex("864FD26FB559F75B")))  # HelloWorld
print(decode_z85("HelloWorld").hex())                 # 864fd26fb559f75b
```

```python
from bcprotocol.certificate import Certificate
from bcprotocol.context import Context

server = Certificate()
print(server.public_key)  # 40 characters of Z85 text

with Context() as context:
    assert context
    sock = context.handle.socket(1)  # any pyzmq socket type
    sock.close()
```

## What the package does not do

It provides value types, key pairs and a context holder only. It has no
socket wrapper, message framing, poller, worker or authenticator: sockets
are created and driven with pyzmq directly through `Context.handle`, and
CURVE keys from a `Certificate` are applied to them by the caller. There is
no command-line program and no server.

## Running the tests

```
pip install -e ".[test]"
pytest
```