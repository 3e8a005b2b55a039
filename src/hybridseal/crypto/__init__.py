"""Cryptographic primitives for hybridseal."""

from .cipher import (
    decrypt_bytes,
    decrypt_stream,
    encrypt_bytes,
    encrypt_stream,
    generate_iv,
    generate_one_time_key,
    symmetric_key_bits,
)
from .constants import AES_BLOCK_SIZE, ENVELOPE_HEADER_SIZE
from .keypair import Keypair, generate_keypair, key_size_bits
from .keywrap import KeyWrapPadding, max_wrap_payload, unwrap, wrap
from .signature import sign, verify, verify_signature, verify_signature_safe

__all__ = [
    "AES_BLOCK_SIZE",
    "ENVELOPE_HEADER_SIZE",
    "KeyWrapPadding",
    "Keypair",
    "decrypt_bytes",
    "decrypt_stream",
    "encrypt_bytes",
    "encrypt_stream",
    "generate_iv",
    "generate_keypair",
    "generate_one_time_key",
    "key_size_bits",
    "max_wrap_payload",
    "sign",
    "symmetric_key_bits",
    "unwrap",
    "verify",
    "verify_signature",
    "verify_signature_safe",
    "wrap",
]
