"""Cryptographic constants for hybridseal."""

import struct

# AES block and IV size in bytes
AES_BLOCK_SIZE = 16
AES_BLOCK_SIZE_BITS = AES_BLOCK_SIZE * 8

# Valid AES key sizes, largest first
AES_KEY_SIZES_BITS = (256, 192, 128)

# Envelope header: u32 wrapped key length, u32 IV length (little-endian)
ENVELOPE_HEADER = struct.Struct("<II")
ENVELOPE_HEADER_SIZE = ENVELOPE_HEADER.size

# Largest accepted wrapped key (a 16384-bit RSA modulus)
MAX_WRAPPED_KEY_SIZE = 2048

# PKCS#1 v1.5 encryption overhead in bytes
PKCS1V15_OVERHEAD = 11
