"""XChaCha20-Poly1305 client implementation.

Ciphertexts are laid out as ``nonce(24) || encrypted_plaintext || tag(16)``
and hex-encoded. The owner is passed to the cipher as associated data: it is
authenticated but neither encrypted nor stored in the ciphertext, so it has
to be supplied again on every decrypt.
"""

import binascii

from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_ABYTES,
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_encrypt,
    crypto_aead_xchacha20poly1305_ietf_KEYBYTES,
    crypto_aead_xchacha20poly1305_ietf_NPUBBYTES,
)
from nacl.exceptions import CryptoError

from symcrypt.domain.exceptions import (
    AuthenticationFailedError,
    InvalidCiphertextEncodingError,
    InvalidKeyEncodingError,
    InvalidKeyLengthError,
    MalformedCiphertextError,
)
from symcrypt.domain.ports import RandomSource
from symcrypt.domain.services import Client
from symcrypt.domain.value_objects import Ciphertext, HexKey, Owner, Plaintext
from symcrypt.infrastructure.random_source import SystemRandomSource, read_random

KEY_SIZE = crypto_aead_xchacha20poly1305_ietf_KEYBYTES  # 32
NONCE_SIZE = crypto_aead_xchacha20poly1305_ietf_NPUBBYTES  # 24
TAG_SIZE = crypto_aead_xchacha20poly1305_ietf_ABYTES  # 16

_default_random_source = SystemRandomSource()


def _decode_key(hex_key: HexKey) -> bytes:
    # Error messages must never echo the key
    try:
        key = binascii.unhexlify(hex_key.value)
    except ValueError as e:
        msg = "Invalid key: not a valid hex string"
        raise InvalidKeyEncodingError(msg) from e

    if len(key) != KEY_SIZE:
        msg = f"Invalid key: expected {KEY_SIZE} bytes, got {len(key)}"
        raise InvalidKeyLengthError(
            msg,
            details={"expected": KEY_SIZE, "received": len(key)},
        )
    return key


class XChaCha20Poly1305Client(Client):
    """Owner-bound encryption with XChaCha20-Poly1305 (libsodium, IETF variant).

    The 24-byte nonce is drawn at random for every call, which is safe
    without any counter state. The client holds nothing but the key and the
    random source, so one instance can be shared freely between threads.
    """

    __slots__ = ("_key", "_random_source")

    def __init__(
        self,
        hex_key: HexKey,
        random_source: RandomSource | None = None,
    ):
        object.__setattr__(self, "_key", _decode_key(hex_key))
        object.__setattr__(
            self,
            "_random_source",
            random_source if random_source is not None else _default_random_source,
        )

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key=*****)"

    def encrypt(self, plaintext: Plaintext, owner: Owner) -> Ciphertext:
        nonce = read_random(self._random_source, NONCE_SIZE)
        sealed = crypto_aead_xchacha20poly1305_ietf_encrypt(
            plaintext.to_bytes(),
            owner.to_bytes(),
            nonce,
            self._key,
        )
        return Ciphertext((nonce + sealed).hex())

    def decrypt(self, ciphertext: Ciphertext, owner: Owner) -> Plaintext:
        try:
            raw = binascii.unhexlify(ciphertext.value)
        except ValueError as e:
            msg = "Invalid ciphertext: not a valid hex string"
            raise InvalidCiphertextEncodingError(msg) from e

        if len(raw) < NONCE_SIZE:
            msg = f"Malformed ciphertext: shorter than the {NONCE_SIZE}-byte nonce"
            raise MalformedCiphertextError(
                msg,
                details={"minimum": NONCE_SIZE, "received": len(raw)},
            )

        nonce, sealed = raw[:NONCE_SIZE], raw[NONCE_SIZE:]

        # Too short to hold a tag: cannot authenticate
        if len(sealed) < TAG_SIZE:
            raise AuthenticationFailedError()

        try:
            opened = crypto_aead_xchacha20poly1305_ietf_decrypt(
                sealed,
                owner.to_bytes(),
                nonce,
                self._key,
            )
        except CryptoError as e:
            raise AuthenticationFailedError() from e
        return Plaintext.from_bytes(opened)

    @staticmethod
    def generate_key(random_source: RandomSource | None = None) -> HexKey:
        return generate_random_key(random_source)


def new_client(
    hex_key: HexKey,
    random_source: RandomSource | None = None,
) -> Client:
    """Build a Client bound to ``hex_key`` for its whole lifetime.

    Raises
    ------
    InvalidKeyEncodingError
        If the key is not valid hex
    InvalidKeyLengthError
        If the key does not decode to exactly KEY_SIZE bytes
    """
    return XChaCha20Poly1305Client(hex_key, random_source)


def generate_random_key(random_source: RandomSource | None = None) -> HexKey:
    """Generate a hex-encoded key from a cryptographically secure source.

    The caller is responsible for storing and transporting the key securely.

    Raises
    ------
    RandomSourceError
        If the random source cannot supply the key bytes
    """
    source = random_source if random_source is not None else _default_random_source
    return HexKey(read_random(source, KEY_SIZE).hex())


def ciphertext_length(plaintext_length: int) -> int:
    """Number of hex characters ``encrypt`` produces for a plaintext of
    ``plaintext_length`` bytes."""
    if plaintext_length < 0:
        msg = "plaintext_length must not be negative"
        raise ValueError(msg)
    return 2 * (NONCE_SIZE + plaintext_length + TAG_SIZE)
