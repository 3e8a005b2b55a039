"""Error hierarchy for hybridseal."""

from __future__ import annotations


class HybridSealError(Exception):
    """Base exception for all hybridseal errors."""

    pass


class MalformedEnvelopeError(HybridSealError):
    """Envelope structure is invalid (too short, or length fields overrun the buffer)."""

    pass


class CapabilityMismatchError(HybridSealError):
    """Operation attempted with a key variant that cannot perform it.

    For example wrapping with a private key, or signing with a public key.
    """

    pass


class DecryptionError(HybridSealError):
    """Cryptographic decryption failure.

    Deliberately generic: a wrong key and corrupted data are reported the
    same way.
    """

    pass


class PaddingError(DecryptionError):
    """Invalid final-block padding during symmetric decryption."""

    pass


class UnsupportedOperationError(HybridSealError):
    """Operation is valid in shape but disallowed for this actor."""

    pass


class SignatureVerificationError(HybridSealError):
    """Signature does not match the data under the given public key."""

    pass
