"""
symcrypt - owner-bound symmetric encryption.

Encrypt a secret "for" an owner and decrypt it again only when the same owner
is supplied. The owner is bound to the ciphertext as AEAD associated data
(XChaCha20-Poly1305), so decrypting for anyone else fails.

Usage:
    from symcrypt import Owner, Plaintext, generate_random_key, new_client

    client = new_client(generate_random_key())
    ciphertext = client.encrypt(Plaintext("token"), Owner("user_1"))
    client.decrypt(ciphertext, Owner("user_1"))  # Plaintext(*****)
"""

from symcrypt.domain import (
    AuthenticationFailedError,
    Ciphertext,
    CiphertextFormatError,
    Client,
    ErrorCode,
    HexKey,
    InvalidCiphertextEncodingError,
    InvalidKeyEncodingError,
    InvalidKeyError,
    InvalidKeyLengthError,
    MalformedCiphertextError,
    Owner,
    Plaintext,
    RandomSource,
    RandomSourceError,
    SymcryptError,
)
from symcrypt.infrastructure import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    SystemRandomSource,
    XChaCha20Poly1305Client,
    ciphertext_length,
    generate_random_key,
    new_client,
)

__version__ = "0.1.0"
__all__ = [
    # Value objects
    "Ciphertext",
    "HexKey",
    "Owner",
    "Plaintext",
    # Client
    "Client",
    "XChaCha20Poly1305Client",
    "new_client",
    "generate_random_key",
    "ciphertext_length",
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    # Randomness
    "RandomSource",
    "SystemRandomSource",
    # Errors
    "ErrorCode",
    "SymcryptError",
    "RandomSourceError",
    "InvalidKeyError",
    "InvalidKeyEncodingError",
    "InvalidKeyLengthError",
    "CiphertextFormatError",
    "InvalidCiphertextEncodingError",
    "MalformedCiphertextError",
    "AuthenticationFailedError",
]
