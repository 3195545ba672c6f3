"""Client interface for owner-bound authenticated encryption."""

from abc import ABC, abstractmethod

from symcrypt.domain.value_objects import Ciphertext, Owner, Plaintext


class Client(ABC):
    """Encrypts and decrypts secrets that belong to an owner.

    A Plaintext encrypted for one Owner can only be decrypted again for that
    same Owner. Implementations are immutable once built and safe to share
    between threads.
    """

    __slots__ = ()

    @abstractmethod
    def encrypt(self, plaintext: Plaintext, owner: Owner) -> Ciphertext:
        """
        Encrypt a Plaintext secret for a given Owner.

        Parameters
        ----------
        plaintext
            The secret to protect (may be empty)
        owner
            Identity bound to the result as associated data (may be empty)

        Returns
        -------
        Hex-encoded ciphertext; different on every call

        Raises
        ------
        RandomSourceError
            If no nonce could be generated
        """

    @abstractmethod
    def decrypt(self, ciphertext: Ciphertext, owner: Owner) -> Plaintext:
        """
        Decrypt a Ciphertext secret for a specific Owner.

        Parameters
        ----------
        ciphertext
            A value produced by ``encrypt``
        owner
            The owner the value was encrypted for

        Returns
        -------
        The original plaintext

        Raises
        ------
        InvalidCiphertextEncodingError
            If the ciphertext is not valid hex
        MalformedCiphertextError
            If the ciphertext is too short to hold a nonce
        AuthenticationFailedError
            If the key, the owner or the data does not match
        """
