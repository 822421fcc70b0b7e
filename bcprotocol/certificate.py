"""CURVE key pairs for authenticated, encrypted messaging."""

from __future__ import annotations

from typing import Optional, Tuple

import zmq

from .sodium import Sodium

_MAX_ATTEMPTS = 255


def _ok_setting(key: str) -> bool:
    # Keys containing '#' cannot be stored in settings files.
    return "#" not in key


class Certificate:
    """A public/private CURVE key pair; false if generation failed."""

    __slots__ = ("_public", "_private")

    def __init__(self, private_key: Optional[Sodium] = None) -> None:
        """Generate a key pair, or derive the public key of private_key.

        With no argument the keys are restricted to those whose Z85 text
        has no '#'. A null private key yields a pair from the full key space.
        """
        self._public = Sodium()
        self._private = Sodium()

        if private_key is None or not private_key:
            pair = self.create(private_key is None)
            if pair is not None:
                self._public, self._private = pair
            return

        public = self.derive(private_key)
        if public is not None:
            self._public = public
            self._private = private_key

    @staticmethod
    def derive(private_key: Sodium) -> Optional[Sodium]:
        """The public key of private_key, or None if it cannot be derived."""
        if not private_key:
            return None
        try:
            encoded = zmq.curve_public(private_key.to_string().encode("ascii"))
        except zmq.ZMQError:
            return None
        public = Sodium(encoded.decode("ascii"))
        return public if public else None

    @staticmethod
    def create(setting: bool) -> Optional[Tuple[Sodium, Sodium]]:
        """A new (public, private) pair, or None if generation failed.

        When setting is true, pairs whose Z85 text contains '#' are retried.
        """
        for _ in range(_MAX_ATTEMPTS):
            try:
                public_text, private_text = (
                    key.decode("ascii") for key in zmq.curve_keypair()
                )
            except zmq.ZMQError:
                return None

            if not setting or (_ok_setting(public_text) and _ok_setting(private_text)):
                public = Sodium(public_text)
                return (public, Sodium(private_text)) if public else None
        return None

    @property
    def public_key(self) -> Sodium:
        """The public key, null if unset."""
        return self._public

    @property
    def private_key(self) -> Sodium:
        """The private key, null if unset."""
        return self._private

    def __bool__(self) -> bool:
        return bool(self._public)