"""Symcrypt exceptions and error codes.

Every failure of the encryption core is raised as a SymcryptError subclass
carrying a stable ErrorCode. All cryptographic verification failures are
collapsed into AuthenticationFailedError so callers cannot tell a wrong key
from a wrong owner or from tampered bytes.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for callers.

    These codes are part of the public contract. Should not be changed.
    """

    # Entropy
    RANDOM_SOURCE_FAILED = "RANDOM_SOURCE_FAILED"

    # Key errors (raised at client construction)
    INVALID_KEY_ENCODING = "INVALID_KEY_ENCODING"
    INVALID_KEY_LENGTH = "INVALID_KEY_LENGTH"

    # Ciphertext format errors (raised before any cryptographic check)
    INVALID_CIPHERTEXT_ENCODING = "INVALID_CIPHERTEXT_ENCODING"
    MALFORMED_CIPHERTEXT = "MALFORMED_CIPHERTEXT"

    # Cryptographic verification
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"

    # General
    INTERNAL_ERROR = "INTERNAL_ERROR"


class SymcryptError(Exception):
    """Base exception for all symcrypt errors.

    Attributes
    ----------
    message
        Human-readable error message. Never contains key material,
        plaintext or ciphertext bytes.
    code
        Stable error code for programmatic handling
    details
        Optional additional context (sizes, never secrets)
    """

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class RandomSourceError(SymcryptError):
    """Raised when the secure random source cannot supply the requested bytes.

    Fatal: callers should not retry or substitute a weaker source.
    """

    default_code = ErrorCode.RANDOM_SOURCE_FAILED


class InvalidKeyError(SymcryptError):
    """Raised when a caller-supplied key is malformed."""


class InvalidKeyEncodingError(InvalidKeyError):
    """Raised when the key is not valid hex."""

    default_code = ErrorCode.INVALID_KEY_ENCODING


class InvalidKeyLengthError(InvalidKeyError):
    """Raised when the decoded key does not have the cipher's key size."""

    default_code = ErrorCode.INVALID_KEY_LENGTH


class CiphertextFormatError(SymcryptError):
    """Raised when a ciphertext is rejected before cryptographic verification."""


class InvalidCiphertextEncodingError(CiphertextFormatError):
    """Raised when the ciphertext is not valid hex."""

    default_code = ErrorCode.INVALID_CIPHERTEXT_ENCODING


class MalformedCiphertextError(CiphertextFormatError):
    """Raised when the decoded ciphertext is shorter than a nonce."""

    default_code = ErrorCode.MALFORMED_CIPHERTEXT


class AuthenticationFailedError(SymcryptError):
    """Raised when a ciphertext fails authentication.

    Wrong key, wrong owner and corrupted data all end up here with the
    same message.
    """

    default_code = ErrorCode.AUTHENTICATION_FAILED

    MESSAGE = (
        "Decryption failed: authentication failed "
        "(wrong key, wrong owner, or tampered data)"
    )

    def __init__(
        self,
        message: str = MESSAGE,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
