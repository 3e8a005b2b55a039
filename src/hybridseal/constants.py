"""Default configuration constants for hybridseal."""

# Upper bound for the one-time AES key, in bits
DEFAULT_MAX_SYMMETRIC_KEY_BITS = 256

# The one-time key is at most (RSA key bits - margin)
DEFAULT_KEY_SIZE_MARGIN_BITS = 10

# Bytes read per streaming step (one AES block)
DEFAULT_CHUNK_SIZE = 16

# RSA modulus size used by generate_keypair()
DEFAULT_RSA_KEY_SIZE = 2048
DEFAULT_RSA_PUBLIC_EXPONENT = 65537
