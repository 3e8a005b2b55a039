"""Capability-restricted actors over RSA key material.

A :class:`Sealer` holds a public key and can seal and verify. An
:class:`Opener` holds a private key and can open and sign. Both expose
the same :class:`Actor` surface; calls a variant cannot serve raise
instead of silently proceeding.

Example:
    ```python
    from hybridseal import Opener, generate_keypair

    keypair = generate_keypair()
    opener = Opener(keypair.private_key)
    sealer = opener.sealer()

    envelope = sealer.seal(b"hello world")
    assert opener.open(envelope) == b"hello world"
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import rsa

from . import envelope
from .crypto.keywrap import unwrap, wrap
from .crypto.signature import sign, verify_signature_safe
from .errors import CapabilityMismatchError, UnsupportedOperationError
from .types import SealConfig


class Actor(ABC):
    """Uniform capability surface shared by sealers and openers."""

    __slots__ = ()

    @property
    @abstractmethod
    def key_size(self) -> int:
        """RSA modulus size in bits."""
        pass  # pragma: no cover

    @abstractmethod
    def seal(self, data: bytes) -> bytes:
        pass  # pragma: no cover

    @abstractmethod
    def open(self, data: bytes) -> bytes:
        pass  # pragma: no cover

    @abstractmethod
    def sign(self, data: bytes) -> bytes:
        pass  # pragma: no cover

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> bool:
        pass  # pragma: no cover


class Sealer(Actor):
    """Actor holding an RSA public key.

    Args:
        public_key: The recipient's RSA public key.
        config: Seal configuration; defaults to ``SealConfig()``.

    Raises:
        CapabilityMismatchError: If ``public_key`` is not an RSA public key.
    """

    __slots__ = ("_public_key", "_config")

    def __init__(self, public_key: rsa.RSAPublicKey, config: SealConfig | None = None) -> None:
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise CapabilityMismatchError(
                f"Sealer requires an RSA public key, got {type(public_key).__name__}"
            )
        self._public_key = public_key
        self._config = config if config is not None else SealConfig()

    @classmethod
    def from_certificate(
        cls, certificate: x509.Certificate, config: SealConfig | None = None
    ) -> Sealer:
        """Build a sealer from a parsed certificate's embedded public key.

        Raises:
            CapabilityMismatchError: If the certificate does not carry an RSA key.
        """
        public_key = certificate.public_key()
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise CapabilityMismatchError("Certificate missing RSA public key")
        return cls(public_key, config)

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self._public_key

    @property
    def config(self) -> SealConfig:
        return self._config

    @property
    def key_size(self) -> int:
        return self._public_key.key_size

    def seal(self, data: bytes) -> bytes:
        return envelope.seal(self._public_key, data, self._config)

    def open(self, data: bytes) -> bytes:
        raise UnsupportedOperationError(
            "A public key cannot open envelopes; use the matching private key"
        )

    def sign(self, data: bytes) -> bytes:
        raise CapabilityMismatchError("A public key cannot sign data")

    def verify(self, data: bytes, signature: bytes) -> bool:
        return verify_signature_safe(self._public_key, data, signature)

    def encrypt_direct(self, data: bytes) -> bytes:
        """Encrypt a short payload with a single RSA operation, without an envelope.

        Raises:
            ValueError: If ``data`` exceeds one RSA block under the configured padding.
        """
        return wrap(self._public_key, data, self._config.key_wrap_padding)

    def __repr__(self) -> str:
        return f"Sealer(key_size={self.key_size})"


class Opener(Actor):
    """Actor holding an RSA private key.

    Args:
        private_key: The recipient's RSA private key.
        config: Seal configuration; defaults to ``SealConfig()``.

    Raises:
        CapabilityMismatchError: If ``private_key`` is not an RSA private key.
    """

    __slots__ = ("_private_key", "_config")

    def __init__(self, private_key: rsa.RSAPrivateKey, config: SealConfig | None = None) -> None:
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise CapabilityMismatchError(
                f"Opener requires an RSA private key, got {type(private_key).__name__}"
            )
        self._private_key = private_key
        self._config = config if config is not None else SealConfig()

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self._private_key.public_key()

    @property
    def config(self) -> SealConfig:
        return self._config

    @property
    def key_size(self) -> int:
        return self._private_key.key_size

    def sealer(self) -> Sealer:
        """Return a sealer for the matching public key."""
        return Sealer(self.public_key, self._config)

    def seal(self, data: bytes) -> bytes:
        raise UnsupportedOperationError(
            "A private key must not be used to seal; use the corresponding public key"
        )

    def open(self, data: bytes) -> bytes:
        return envelope.open(self._private_key, data, self._config)

    def sign(self, data: bytes) -> bytes:
        return sign(self._private_key, data)

    def verify(self, data: bytes, signature: bytes) -> bool:
        return verify_signature_safe(self.public_key, data, signature)

    def decrypt_direct(self, data: bytes) -> bytes:
        """Reverse :meth:`Sealer.encrypt_direct`.

        Raises:
            DecryptionError: If the key does not match or the data is corrupted.
        """
        return unwrap(self._private_key, data, self._config.key_wrap_padding)

    def __repr__(self) -> str:
        return f"Opener(key_size={self.key_size})"
