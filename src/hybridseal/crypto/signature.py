"""RSA PKCS#1 v1.5 / SHA-256 signatures for hybridseal."""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..errors import CapabilityMismatchError, SignatureVerificationError


def sign(private_key: rsa.RSAPrivateKey, data: bytes) -> bytes:
    """Sign ``data`` with an RSA private key.

    Args:
        private_key: The signer's RSA private key.
        data: The payload to sign.

    Returns:
        The signature bytes.

    Raises:
        CapabilityMismatchError: If ``private_key`` is not an RSA private key.
    """
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise CapabilityMismatchError(
            f"Signing requires an RSA private key, got {type(private_key).__name__}"
        )
    return private_key.sign(data, padding.PKCS1v15(), hashes.SHA256())


def verify_signature(public_key: rsa.RSAPublicKey, data: bytes, signature: bytes) -> None:
    """Verify a signature produced by :func:`sign`.

    Args:
        public_key: The signer's RSA public key.
        data: The signed payload.
        signature: The signature to check.

    Raises:
        CapabilityMismatchError: If ``public_key`` is not an RSA public key.
        SignatureVerificationError: If the signature does not match.
    """
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise CapabilityMismatchError(
            f"Verification requires an RSA public key, got {type(public_key).__name__}"
        )

    try:
        public_key.verify(signature, data, padding.PKCS1v15(), hashes.SHA256())
    except InvalidSignature as e:
        raise SignatureVerificationError("Signature does not match the data") from e


def verify_signature_safe(public_key: rsa.RSAPublicKey, data: bytes, signature: bytes) -> bool:
    """Verify a signature without raising on mismatch.

    Args:
        public_key: The signer's RSA public key.
        data: The signed payload.
        signature: The signature to check.

    Returns:
        True if the signature is valid, False otherwise.
    """
    try:
        verify_signature(public_key, data, signature)
        return True
    except SignatureVerificationError:
        return False


verify = verify_signature_safe
