"""RSA key wrap and unwrap of the one-time AES key."""

from __future__ import annotations

from enum import Enum

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.asymmetric.padding import AsymmetricPadding

from ..errors import CapabilityMismatchError, DecryptionError
from .constants import PKCS1V15_OVERHEAD


class KeyWrapPadding(str, Enum):
    """RSA padding schemes used to wrap the one-time key."""

    OAEP_SHA256 = "oaep-sha256"
    PKCS1V15 = "pkcs1v15"


def _asymmetric_padding(scheme: KeyWrapPadding | str) -> AsymmetricPadding:
    if KeyWrapPadding(scheme) is KeyWrapPadding.PKCS1V15:
        return padding.PKCS1v15()
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def max_wrap_payload(
    public_key: rsa.RSAPublicKey,
    scheme: KeyWrapPadding | str = KeyWrapPadding.OAEP_SHA256,
) -> int:
    """Return the largest payload one RSA block can carry under ``scheme``.

    Args:
        public_key: The RSA public key.
        scheme: The key wrap padding.

    Returns:
        Capacity in bytes.
    """
    modulus_bytes = (public_key.key_size + 7) // 8
    if KeyWrapPadding(scheme) is KeyWrapPadding.PKCS1V15:
        return modulus_bytes - PKCS1V15_OVERHEAD
    return modulus_bytes - 2 * hashes.SHA256.digest_size - 2


def wrap(
    public_key: rsa.RSAPublicKey,
    one_time_key: bytes,
    scheme: KeyWrapPadding | str = KeyWrapPadding.OAEP_SHA256,
) -> bytes:
    """Encrypt the one-time key under an RSA public key.

    The output length equals the modulus size in bytes, so it differs
    between key sizes.

    Args:
        public_key: The recipient's RSA public key.
        one_time_key: The key to wrap.
        scheme: The key wrap padding.

    Returns:
        The wrapped key bytes.

    Raises:
        CapabilityMismatchError: If ``public_key`` is not an RSA public key.
        ValueError: If ``one_time_key`` exceeds the padding capacity.
    """
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise CapabilityMismatchError(
            f"Key wrap requires an RSA public key, got {type(public_key).__name__}"
        )

    limit = max_wrap_payload(public_key, scheme)
    if len(one_time_key) > limit:
        raise ValueError(
            f"Payload of {len(one_time_key)} bytes exceeds the {limit}-byte capacity "
            f"of a {public_key.key_size}-bit key"
        )
    return public_key.encrypt(one_time_key, _asymmetric_padding(scheme))


def unwrap(
    private_key: rsa.RSAPrivateKey,
    wrapped_key: bytes,
    scheme: KeyWrapPadding | str = KeyWrapPadding.OAEP_SHA256,
) -> bytes:
    """Recover the one-time key with the matching RSA private key.

    Args:
        private_key: The recipient's RSA private key.
        wrapped_key: Output of :func:`wrap`.
        scheme: The key wrap padding used by :func:`wrap`.

    Returns:
        The one-time key.

    Raises:
        CapabilityMismatchError: If ``private_key`` is not an RSA private key.
        DecryptionError: If the key does not match or the data is corrupted.
    """
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise CapabilityMismatchError(
            f"Key unwrap requires an RSA private key, got {type(private_key).__name__}"
        )

    try:
        return private_key.decrypt(wrapped_key, _asymmetric_padding(scheme))
    except (ValueError, TypeError) as e:
        raise DecryptionError("Key unwrap failed") from e
