"""Opaque 32-byte seeds that drive board generation."""

from __future__ import annotations

import base64
import binascii
import re
import secrets
from dataclasses import dataclass

SEED_SIZE = 32

_SEED_TEXT = re.compile(r"[A-Za-z0-9_-]*={0,2}")


@dataclass(frozen=True)
class Seed:
    """A fixed-size random seed.

    The text form is URL-safe base64 with padding. Unpadded text is also
    accepted by :meth:`decode`.
    """

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != SEED_SIZE:
            raise ValueError(
                f"Seed must be exactly {SEED_SIZE} bytes, got {len(self.value)}."
            )

    # -- construction ---------------------------------------------------------

    @classmethod
    def random(cls) -> Seed:
        return cls(secrets.token_bytes(SEED_SIZE))

    @classmethod
    def from_bytes(cls, value: bytes) -> Seed:
        return cls(bytes(value))

    @classmethod
    def decode(cls, text: str) -> Seed:
        """Parse the base64 text produced by :meth:`encode`.

        Any character outside the URL-safe alphabet is rejected.
        """
        text = text.strip()
        if not _SEED_TEXT.fullmatch(text):
            raise ValueError(f"Invalid seed text: {text!r}")
        text += "=" * (-len(text) % 4)
        try:
            raw = base64.b64decode(text, altchars=b"-_", validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Invalid seed text: {text!r}") from exc
        return cls(raw)

    @classmethod
    def coerce(cls, seed: Seed | bytes | bytearray | str) -> Seed:
        """Accept a :class:`Seed`, raw bytes or encoded text."""
        if isinstance(seed, Seed):
            return seed
        if isinstance(seed, str):
            return cls.decode(seed)
        if isinstance(seed, (bytes, bytearray)):
            return cls.from_bytes(seed)
        raise TypeError(f"Cannot build a seed from {type(seed).__name__}.")

    # -- encoding -------------------------------------------------------------

    def encode(self) -> str:
        return base64.urlsafe_b64encode(self.value).decode("ascii")

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.encode()
