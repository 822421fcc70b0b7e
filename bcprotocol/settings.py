"""Tunable parameters shared by the messaging components."""

from dataclasses import dataclass


@dataclass
class Settings:
    """Socket and session limits, with the library defaults."""

    send_high_water: int = 100
    receive_high_water: int = 100
    message_size_limit: int = 0
    handshake_seconds: int = 30
    ping_seconds: int = 0
    inactivity_seconds: int = 0
    reconnect_seconds: int = 1
    send_milliseconds: int = 0