"""An {ip address, port} pair with its textual form."""

from __future__ import annotations

import ipaddress
import re
from typing import Optional

_AUTHORITY = re.compile(r"(([0-9.]+)|\[([0-9a-f:.]+)\])(:([0-9]{1,5}))?\Z")
_MAX_PORT = 0xFFFF
_NULL_IP = ipaddress.IPv6Address(0)


class ParseError(ValueError):
    """Raised when a configuration value cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(value)
        self.value = value


def first_token(text: str) -> str:
    """Return the first whitespace-delimited word of text, or ''."""
    parts = text.split()
    return parts[0] if parts else ""


def parse_port(text: str, original: str) -> int:
    """Parse an optional decimal port, raising ParseError if out of range."""
    if not text:
        return 0
    port = int(text)
    if port > _MAX_PORT:
        raise ParseError(original)
    return port


def _to_host_name(host: str) -> str:
    if ":" not in host or host.startswith("["):
        return host
    return f"[{host}]"


def _to_text(host: str, port: int) -> str:
    text = _to_host_name(host)
    if port:
        text += f":{port}"
    return text


def _format_ipv6(ip: ipaddress.IPv6Address) -> str:
    mapped = ip.ipv4_mapped
    if mapped is not None:
        return f"::ffff:{mapped}"
    packed = ip.packed
    if packed[:12] == bytes(12) and packed[12:14] != b"\x00\x00":
        return f"::{ipaddress.IPv4Address(packed[12:])}"
    return ip.compressed


class Authority:
    """An IPv4 or IPv6 address with a TCP port (zero when unset)."""

    __slots__ = ("_ip", "_port")

    def __init__(self, value: Optional[str] = None, port: Optional[int] = None) -> None:
        """Build from 'host:port' text, from a host and a port, or empty.

        The single-argument form accepts [2001:db8::2]:port or 1.2.240.1:port,
        the port being optional. The two-argument form accepts a host as
        [2001:db8::2], 2001:db8::2 or 1.2.240.1.
        """
        self._ip = _NULL_IP
        self._port = 0
        if value is None:
            return
        text = value if port is None else _to_text(value, port)
        self._parse(text)

    def _parse(self, text: str) -> None:
        token = first_token(text)
        match = _AUTHORITY.match(token)
        if match is None:
            raise ParseError(token)

        ip_text = match.group(3) or f"::ffff:{match.group(2)}"
        try:
            ip = ipaddress.IPv6Address(ip_text)
        except ValueError:
            raise ParseError(token) from None

        self._port = parse_port(match.group(5) or "", token)
        self._ip = ip

    @property
    def ip(self) -> ipaddress.IPv6Address:
        """The address, with IPv4 held in its IPv6-mapped form."""
        return self._ip

    @property
    def port(self) -> int:
        """The TCP port, zero if not given."""
        return self._port

    def to_hostname(self) -> str:
        """The host as 1.2.240.1 or [2001:db8::2]."""
        mapped = self._ip.ipv4_mapped
        if mapped is not None:
            return str(mapped)
        return f"[{_format_ipv6(self._ip)}]"

    def to_string(self) -> str:
        """The authority as host[:port], omitting a zero port."""
        return _to_text(self.to_hostname(), self._port)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Authority({self.to_string()!r})"

    def __bool__(self) -> bool:
        return self._port != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Authority):
            return NotImplemented
        return self._ip == other._ip and self._port == other._port

    def __hash__(self) -> int:
        return hash(self.to_string())