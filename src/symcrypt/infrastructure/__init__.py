"""Symcrypt infrastructure: libsodium-backed implementations."""

from symcrypt.infrastructure.random_source import SystemRandomSource, read_random
from symcrypt.infrastructure.xchacha_client import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    XChaCha20Poly1305Client,
    ciphertext_length,
    generate_random_key,
    new_client,
)

__all__ = [
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "SystemRandomSource",
    "XChaCha20Poly1305Client",
    "ciphertext_length",
    "generate_random_key",
    "new_client",
    "read_random",
]
