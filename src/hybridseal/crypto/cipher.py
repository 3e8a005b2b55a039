"""AES-CBC streaming cipher for hybridseal.

The one-time key and IV are generated per seal. Data is processed in
fixed-size chunks so memory use does not depend on payload size; PKCS#7
padding is applied once, after the last chunk.
"""

from __future__ import annotations

import io
import os
from typing import BinaryIO

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_KEY_SIZE_MARGIN_BITS,
    DEFAULT_MAX_SYMMETRIC_KEY_BITS,
)
from ..errors import DecryptionError, PaddingError
from .constants import AES_BLOCK_SIZE, AES_BLOCK_SIZE_BITS, AES_KEY_SIZES_BITS


def symmetric_key_bits(
    asymmetric_key_bits: int,
    max_bits: int = DEFAULT_MAX_SYMMETRIC_KEY_BITS,
    margin_bits: int = DEFAULT_KEY_SIZE_MARGIN_BITS,
) -> int:
    """Pick the one-time AES key size for an RSA key of the given size.

    The bound is ``min(asymmetric_key_bits - margin_bits, max_bits)``,
    rounded down to the nearest valid AES key size.

    Args:
        asymmetric_key_bits: RSA modulus size in bits.
        max_bits: Upper bound for the symmetric key.
        margin_bits: Bits subtracted from the RSA size.

    Returns:
        128, 192 or 256.

    Raises:
        ValueError: If the bound is below the smallest AES key size.
    """
    bound = min(asymmetric_key_bits - margin_bits, max_bits)
    for size in AES_KEY_SIZES_BITS:
        if size <= bound:
            return size
    raise ValueError(
        f"Cannot derive an AES key size from a {asymmetric_key_bits}-bit key "
        f"(bound {bound} bits, minimum {AES_KEY_SIZES_BITS[-1]})"
    )


def generate_one_time_key(key_bits: int) -> bytes:
    if key_bits not in AES_KEY_SIZES_BITS:
        raise ValueError(f"Invalid AES key size: {key_bits} bits")
    return os.urandom(key_bits // 8)


def generate_iv() -> bytes:
    return os.urandom(AES_BLOCK_SIZE)


def _cipher(key: bytes, iv: bytes) -> Cipher:
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def _write(sink: BinaryIO, data: bytes) -> int:
    if data:
        sink.write(data)
    return len(data)


def encrypt_stream(
    key: bytes,
    iv: bytes,
    source: BinaryIO,
    sink: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Encrypt ``source`` into ``sink`` with AES-CBC and PKCS#7 padding.

    Reads until ``source`` is exhausted. The sink is only written to,
    never seeked.

    Args:
        key: One-time AES key (16, 24 or 32 bytes).
        iv: 16-byte IV.
        source: Readable binary stream with the plaintext.
        sink: Writable binary stream receiving the ciphertext.
        chunk_size: Bytes read per step.

    Returns:
        Number of ciphertext bytes written.

    Raises:
        ValueError: If the key or IV has an invalid size.
    """
    encryptor = _cipher(key, iv).encryptor()
    padder = padding.PKCS7(AES_BLOCK_SIZE_BITS).padder()

    written = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        written += _write(sink, encryptor.update(padder.update(chunk)))

    written += _write(sink, encryptor.update(padder.finalize()) + encryptor.finalize())
    return written


def decrypt_stream(
    key: bytes,
    iv: bytes,
    source: BinaryIO,
    sink: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Decrypt ``source`` into ``sink`` and strip the PKCS#7 padding.

    On failure the sink may hold partial plaintext; callers must discard it.

    Args:
        key: One-time AES key.
        iv: 16-byte IV.
        source: Readable binary stream with the ciphertext.
        sink: Writable binary stream receiving the plaintext.
        chunk_size: Bytes read per step.

    Returns:
        Number of plaintext bytes written.

    Raises:
        DecryptionError: If the key or IV has an invalid size.
        PaddingError: If the ciphertext is truncated or the padding is invalid.
    """
    try:
        decryptor = _cipher(key, iv).decryptor()
    except ValueError as e:
        raise DecryptionError(f"Invalid cipher parameters: {e}") from e
    unpadder = padding.PKCS7(AES_BLOCK_SIZE_BITS).unpadder()

    written = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        written += _write(sink, unpadder.update(decryptor.update(chunk)))

    try:
        tail = unpadder.update(decryptor.finalize()) + unpadder.finalize()
    except ValueError as e:
        raise PaddingError(f"Invalid padding: {e}") from e
    written += _write(sink, tail)
    return written


def encrypt_bytes(key: bytes, iv: bytes, data: bytes) -> bytes:
    sink = io.BytesIO()
    encrypt_stream(key, iv, io.BytesIO(data), sink)
    return sink.getvalue()


def decrypt_bytes(key: bytes, iv: bytes, data: bytes) -> bytes:
    sink = io.BytesIO()
    decrypt_stream(key, iv, io.BytesIO(data), sink)
    return sink.getvalue()
