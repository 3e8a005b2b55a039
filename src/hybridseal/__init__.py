"""hybridseal: hybrid RSA + AES envelope encryption.

Payloads are encrypted with a one-time AES-CBC key; the key is wrapped
with the recipient's RSA public key and packed, together with the IV and
ciphertext, into a single length-prefixed envelope.

Example:
    ```python
    from hybridseal import generate_keypair, open, seal, sign, verify

    keypair = generate_keypair(2048)

    envelope = seal(keypair.public_key, b"hello world")
    assert open(keypair.private_key, envelope) == b"hello world"

    signature = sign(keypair.private_key, b"hello world")
    assert verify(keypair.public_key, b"hello world", signature)
    ```

``open`` is importable by name but left out of ``__all__`` so that
``from hybridseal import *`` does not replace the built-in ``open``.
"""

from .actors import Actor, Opener, Sealer
from .constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_KEY_SIZE_MARGIN_BITS,
    DEFAULT_MAX_SYMMETRIC_KEY_BITS,
    DEFAULT_RSA_KEY_SIZE,
)
from .crypto import Keypair, generate_keypair, sign, verify, verify_signature
from .envelope import (
    decode_header,
    encode_header,
    open,
    open_stream,
    parse_envelope,
    seal,
    seal_stream,
)
from .errors import (
    CapabilityMismatchError,
    DecryptionError,
    HybridSealError,
    MalformedEnvelopeError,
    PaddingError,
    SignatureVerificationError,
    UnsupportedOperationError,
)
from .types import EnvelopeHeader, EnvelopeParts, KeyWrapPadding, SealConfig

__version__ = "0.1.0"

__all__ = [
    # Core operations
    "seal",
    "sign",
    "verify",
    "verify_signature",
    "seal_stream",
    "open_stream",
    # Envelope codec
    "encode_header",
    "decode_header",
    "parse_envelope",
    # Actors
    "Actor",
    "Sealer",
    "Opener",
    # Keys
    "Keypair",
    "generate_keypair",
    # Constants
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_KEY_SIZE_MARGIN_BITS",
    "DEFAULT_MAX_SYMMETRIC_KEY_BITS",
    "DEFAULT_RSA_KEY_SIZE",
    # Configuration and data types
    "SealConfig",
    "KeyWrapPadding",
    "EnvelopeHeader",
    "EnvelopeParts",
    # Errors
    "HybridSealError",
    "MalformedEnvelopeError",
    "CapabilityMismatchError",
    "DecryptionError",
    "PaddingError",
    "UnsupportedOperationError",
    "SignatureVerificationError",
    # Version
    "__version__",
]
