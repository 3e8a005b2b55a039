"""RSA keypair generation for hybridseal."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import rsa

from ..constants import DEFAULT_RSA_KEY_SIZE, DEFAULT_RSA_PUBLIC_EXPONENT
from ..errors import CapabilityMismatchError


@dataclass(frozen=True)
class Keypair:
    """RSA keypair for sealing and opening.

    Attributes:
        private_key: The RSA private key (open, sign).
        public_key: The RSA public key (seal, verify).
        key_size: Modulus size in bits.
    """

    private_key: rsa.RSAPrivateKey
    public_key: rsa.RSAPublicKey
    key_size: int


def generate_keypair(key_size: int = DEFAULT_RSA_KEY_SIZE) -> Keypair:
    """Generate a new RSA keypair.

    Args:
        key_size: Modulus size in bits.

    Returns:
        A new Keypair instance.
    """
    private_key = rsa.generate_private_key(
        public_exponent=DEFAULT_RSA_PUBLIC_EXPONENT,
        key_size=key_size,
    )
    return Keypair(
        private_key=private_key,
        public_key=private_key.public_key(),
        key_size=private_key.key_size,
    )


def key_size_bits(key: rsa.RSAPublicKey | rsa.RSAPrivateKey) -> int:
    """Return the modulus size of an RSA public or private key.

    Raises:
        CapabilityMismatchError: If ``key`` is not an RSA key.
    """
    if not isinstance(key, (rsa.RSAPublicKey, rsa.RSAPrivateKey)):
        raise CapabilityMismatchError(f"Expected an RSA key, got {type(key).__name__}")
    return key.key_size
