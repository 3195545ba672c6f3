"""Symcrypt domain: value objects, exceptions and interfaces."""

from symcrypt.domain.exceptions import (
    AuthenticationFailedError,
    CiphertextFormatError,
    ErrorCode,
    InvalidCiphertextEncodingError,
    InvalidKeyEncodingError,
    InvalidKeyError,
    InvalidKeyLengthError,
    MalformedCiphertextError,
    RandomSourceError,
    SymcryptError,
)
from symcrypt.domain.ports import RandomSource
from symcrypt.domain.services import Client
from symcrypt.domain.value_objects import Ciphertext, HexKey, Owner, Plaintext

__all__ = [
    # Value objects
    "Ciphertext",
    "HexKey",
    "Owner",
    "Plaintext",
    # Interfaces
    "Client",
    "RandomSource",
    # Error codes
    "ErrorCode",
    # Exceptions
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
