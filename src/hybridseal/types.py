"""Type definitions for hybridseal."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_KEY_SIZE_MARGIN_BITS,
    DEFAULT_MAX_SYMMETRIC_KEY_BITS,
)
from .crypto.constants import ENVELOPE_HEADER_SIZE
from .crypto.keywrap import KeyWrapPadding


@dataclass(frozen=True)
class SealConfig:
    """Configuration shared by the seal and open operations.

    Both ends of an exchange must use the same ``key_wrap_padding``; the
    envelope does not record it.

    Attributes:
        max_symmetric_key_bits: Upper bound for the one-time AES key.
        key_size_margin_bits: The one-time key is at most RSA bits minus this.
        chunk_size: Bytes read from the source per streaming step.
        key_wrap_padding: RSA padding used for key wrap and unwrap.
    """

    max_symmetric_key_bits: int = DEFAULT_MAX_SYMMETRIC_KEY_BITS
    key_size_margin_bits: int = DEFAULT_KEY_SIZE_MARGIN_BITS
    chunk_size: int = DEFAULT_CHUNK_SIZE
    key_wrap_padding: KeyWrapPadding = KeyWrapPadding.OAEP_SHA256

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.max_symmetric_key_bits <= 0:
            raise ValueError(
                f"max_symmetric_key_bits must be positive, got {self.max_symmetric_key_bits}"
            )
        if self.key_size_margin_bits < 0:
            raise ValueError(
                f"key_size_margin_bits cannot be negative, got {self.key_size_margin_bits}"
            )
        # Accept plain strings such as "pkcs1v15"
        object.__setattr__(self, "key_wrap_padding", KeyWrapPadding(self.key_wrap_padding))


@dataclass(frozen=True)
class EnvelopeHeader:
    """Fixed-size prefix of an envelope.

    Attributes:
        wrapped_key_length: Byte length of the wrapped one-time key.
        iv_length: Byte length of the IV.
    """

    wrapped_key_length: int
    iv_length: int

    @property
    def size(self) -> int:
        return ENVELOPE_HEADER_SIZE

    @property
    def body_offset(self) -> int:
        """Offset of the first ciphertext byte."""
        return ENVELOPE_HEADER_SIZE + self.wrapped_key_length + self.iv_length


@dataclass(frozen=True)
class EnvelopeParts:
    """Parsed view of an envelope.

    Attributes:
        wrapped_key: The RSA-wrapped one-time key.
        iv: The AES-CBC initialization vector.
        ciphertext: The padded AES-CBC ciphertext.
    """

    wrapped_key: bytes
    iv: bytes
    ciphertext: bytes

    @property
    def header(self) -> EnvelopeHeader:
        return EnvelopeHeader(
            wrapped_key_length=len(self.wrapped_key),
            iv_length=len(self.iv),
        )
