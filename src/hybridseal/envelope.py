"""Envelope encoding, sealing and opening.

Envelope layout (all lengths little-endian u32):

    offset 0              wrapped key length (K)
    offset 4              IV length (V)
    offset 8              K bytes of RSA-wrapped one-time key
    offset 8 + K          V bytes of AES-CBC IV
    offset 8 + K + V      padded AES-CBC ciphertext, to the end of the buffer
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from cryptography.hazmat.primitives.asymmetric import rsa

from .crypto.cipher import (
    decrypt_stream,
    encrypt_stream,
    generate_iv,
    generate_one_time_key,
    symmetric_key_bits,
)
from .crypto.constants import (
    AES_BLOCK_SIZE,
    ENVELOPE_HEADER,
    ENVELOPE_HEADER_SIZE,
    MAX_WRAPPED_KEY_SIZE,
)
from .crypto.keypair import key_size_bits
from .crypto.keywrap import max_wrap_payload, unwrap, wrap
from .errors import DecryptionError, MalformedEnvelopeError
from .types import EnvelopeHeader, EnvelopeParts, SealConfig

logger = logging.getLogger("hybridseal")


def encode_header(wrapped_key_length: int, iv_length: int) -> bytes:
    return ENVELOPE_HEADER.pack(wrapped_key_length, iv_length)


def decode_header(buffer: bytes) -> EnvelopeHeader:
    """Read both 4-byte length fields from the start of ``buffer``.

    Raises:
        MalformedEnvelopeError: If ``buffer`` is shorter than the header.
    """
    if len(buffer) < ENVELOPE_HEADER_SIZE:
        raise MalformedEnvelopeError(
            f"Envelope too short: {len(buffer)} bytes, header needs {ENVELOPE_HEADER_SIZE}"
        )
    wrapped_key_length, iv_length = ENVELOPE_HEADER.unpack_from(buffer, 0)
    return EnvelopeHeader(wrapped_key_length=wrapped_key_length, iv_length=iv_length)


def _validate_header(header: EnvelopeHeader) -> None:
    if header.wrapped_key_length == 0:
        raise MalformedEnvelopeError("Envelope has an empty wrapped key")
    if header.wrapped_key_length > MAX_WRAPPED_KEY_SIZE:
        raise MalformedEnvelopeError(
            f"Wrapped key length {header.wrapped_key_length} exceeds {MAX_WRAPPED_KEY_SIZE}"
        )
    if header.iv_length != AES_BLOCK_SIZE:
        raise MalformedEnvelopeError(
            f"Invalid IV length: {header.iv_length}, expected {AES_BLOCK_SIZE}"
        )


def parse_envelope(envelope: bytes) -> EnvelopeParts:
    """Split an envelope into wrapped key, IV and ciphertext.

    Only structure is checked here; no cryptographic operation runs.

    Args:
        envelope: The serialized envelope.

    Returns:
        The parsed parts.

    Raises:
        MalformedEnvelopeError: If the buffer is too short or the length
            fields do not fit in it.
    """
    envelope = bytes(envelope)
    header = decode_header(envelope)

    available = len(envelope) - header.size
    if header.wrapped_key_length + header.iv_length > available:
        raise MalformedEnvelopeError(
            f"Length fields ({header.wrapped_key_length} + {header.iv_length}) "
            f"exceed the {available} bytes after the header"
        )
    _validate_header(header)

    iv_offset = header.size + header.wrapped_key_length
    return EnvelopeParts(
        wrapped_key=envelope[header.size : iv_offset],
        iv=envelope[iv_offset : header.body_offset],
        ciphertext=envelope[header.body_offset :],
    )


def _read_exact(source: BinaryIO, size: int, field_name: str) -> bytes:
    buffer = bytearray()
    while len(buffer) < size:
        chunk = source.read(size - len(buffer))
        if not chunk:
            raise MalformedEnvelopeError(
                f"Envelope ended inside the {field_name} ({len(buffer)} of {size} bytes)"
            )
        buffer += chunk
    return bytes(buffer)


def seal_stream(
    public_key: rsa.RSAPublicKey,
    source: BinaryIO,
    sink: BinaryIO,
    config: SealConfig | None = None,
) -> int:
    """Seal everything read from ``source`` into an envelope written to ``sink``.

    A fresh one-time key and IV are generated for every call.

    Args:
        public_key: The recipient's RSA public key.
        source: Readable binary stream with the plaintext.
        sink: Writable binary stream receiving the envelope.
        config: Seal configuration; defaults to ``SealConfig()``.

    Returns:
        Number of envelope bytes written.

    Raises:
        CapabilityMismatchError: If ``public_key`` is not an RSA public key.
        ValueError: If the key is too small to carry a one-time AES key.
    """
    config = config if config is not None else SealConfig()

    rsa_bits = key_size_bits(public_key)
    # The one-time key must also fit in a single wrap under the chosen padding
    wrap_capacity_bits = max(max_wrap_payload(public_key, config.key_wrap_padding), 0) * 8
    key_bits = symmetric_key_bits(
        rsa_bits,
        max_bits=min(config.max_symmetric_key_bits, wrap_capacity_bits),
        margin_bits=config.key_size_margin_bits,
    )
    one_time_key = generate_one_time_key(key_bits)
    iv = generate_iv()
    wrapped_key = wrap(public_key, one_time_key, config.key_wrap_padding)

    prefix = encode_header(len(wrapped_key), len(iv)) + wrapped_key + iv
    sink.write(prefix)
    written = len(prefix) + encrypt_stream(one_time_key, iv, source, sink, config.chunk_size)

    logger.debug(
        "Sealed envelope: %d bytes (AES-%d, wrapped key %d bytes)",
        written,
        key_bits,
        len(wrapped_key),
    )
    return written


def _open_body(
    private_key: rsa.RSAPrivateKey,
    wrapped_key: bytes,
    iv: bytes,
    source: BinaryIO,
    sink: BinaryIO,
    config: SealConfig,
) -> int:
    try:
        one_time_key = unwrap(private_key, wrapped_key, config.key_wrap_padding)
        return decrypt_stream(one_time_key, iv, source, sink, config.chunk_size)
    except DecryptionError:
        logger.debug("Failed to open envelope", exc_info=True)
        # Wrong key and corrupted data are reported identically
        raise DecryptionError("Decryption failed") from None


def open_stream(
    private_key: rsa.RSAPrivateKey,
    source: BinaryIO,
    sink: BinaryIO,
    config: SealConfig | None = None,
) -> int:
    """Open an envelope read from ``source`` and write the plaintext to ``sink``.

    On error the sink may hold partial plaintext which must be discarded.

    Args:
        private_key: The recipient's RSA private key.
        source: Readable binary stream positioned at the envelope start.
        sink: Writable binary stream receiving the plaintext.
        config: Seal configuration used when sealing.

    Returns:
        Number of plaintext bytes written.

    Raises:
        MalformedEnvelopeError: If the stream ends before the declared fields.
        CapabilityMismatchError: If ``private_key`` is not an RSA private key.
        DecryptionError: If the key does not match or the data is corrupted.
    """
    config = config if config is not None else SealConfig()

    header = decode_header(_read_exact(source, ENVELOPE_HEADER_SIZE, "header"))
    _validate_header(header)
    wrapped_key = _read_exact(source, header.wrapped_key_length, "wrapped key")
    iv = _read_exact(source, header.iv_length, "IV")

    written = _open_body(private_key, wrapped_key, iv, source, sink, config)
    logger.debug("Opened envelope: %d plaintext bytes", written)
    return written


def seal(public_key: rsa.RSAPublicKey, plaintext: bytes, config: SealConfig | None = None) -> bytes:
    """Seal ``plaintext`` for the holder of the matching private key.

    Args:
        public_key: The recipient's RSA public key.
        plaintext: The payload; may be empty.
        config: Seal configuration; defaults to ``SealConfig()``.

    Returns:
        The envelope bytes.

    Raises:
        CapabilityMismatchError: If ``public_key`` is not an RSA public key.
    """
    sink = io.BytesIO()
    seal_stream(public_key, io.BytesIO(plaintext), sink, config)
    return sink.getvalue()


def open(private_key: rsa.RSAPrivateKey, envelope: bytes, config: SealConfig | None = None) -> bytes:
    """Open an envelope produced by :func:`seal`.

    Args:
        private_key: The recipient's RSA private key.
        envelope: The envelope bytes.
        config: Seal configuration used when sealing.

    Returns:
        The original plaintext.

    Raises:
        MalformedEnvelopeError: If the envelope structure is invalid.
        CapabilityMismatchError: If ``private_key`` is not an RSA private key.
        DecryptionError: If the key does not match or the data is corrupted.
    """
    config = config if config is not None else SealConfig()
    parts = parse_envelope(envelope)

    sink = io.BytesIO()
    written = _open_body(
        private_key, parts.wrapped_key, parts.iv, io.BytesIO(parts.ciphertext), sink, config
    )
    logger.debug("Opened envelope: %d plaintext bytes", written)
    return sink.getvalue()
