"""A network endpoint in [scheme://]host[:port] form."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .authority import Authority, ParseError, first_token, parse_port

_ENDPOINT = re.compile(
    r"((tcp|udp|http|https|inproc)://)?(\[([0-9a-f:.]+)\]|([^:]+))(:([0-9]{1,5}))?\Z"
)


@dataclass(frozen=True)
class Endpoint:
    """A {scheme, host, port} triple; empty scheme and zero port are unset."""

    scheme: str = ""
    host: str = "localhost"
    port: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")

    @classmethod
    def parse(cls, uri: str) -> Endpoint:
        """Parse [scheme://]host[:port], raising ParseError if malformed."""
        token = first_token(uri)
        match = _ENDPOINT.match(token)
        if match is None:
            raise ParseError(token)
        port = parse_port(match.group(7) or "", token)
        return cls(match.group(2) or "", match.group(3), port)

    @classmethod
    def from_authority(cls, authority: Authority) -> Endpoint:
        """The endpoint with the authority's host and port and no scheme."""
        return cls.parse(authority.to_string())

    def to_string(self) -> str:
        """The endpoint as text, omitting an empty scheme and a zero port."""
        text = f"{self.scheme}://" if self.scheme else ""
        text += self.host
        if self.port:
            text += f":{self.port}"
        return text

    def __str__(self) -> str:
        return self.to_string()

    def to_local(self) -> Endpoint:
        """A copy with a host of '*' replaced by 'localhost'."""
        host = "localhost" if self.host == "*" else self.host
        return Endpoint(self.scheme, host, self.port)

    def __bool__(self) -> bool:
        return bool(self.scheme)