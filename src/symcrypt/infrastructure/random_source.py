"""Secure random source backed by libsodium."""

import nacl.utils

from symcrypt.domain.exceptions import RandomSourceError
from symcrypt.domain.ports import RandomSource


class SystemRandomSource:
    """Cryptographically secure random source (libsodium ``randombytes``)."""

    def random_bytes(self, size: int) -> bytes:
        try:
            return nacl.utils.random(size)
        except Exception as e:
            msg = f"Secure random source failed: {e}"
            raise RandomSourceError(msg, details={"requested": size}) from e


def read_random(source: RandomSource, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``source``.

    Any failure, including a short read, is raised as RandomSourceError.
    There is no fallback to another source.
    """
    try:
        data = source.random_bytes(size)
    except RandomSourceError:
        raise
    except Exception as e:
        msg = f"Random source failed: {e}"
        raise RandomSourceError(msg, details={"requested": size}) from e

    if not isinstance(data, bytes) or len(data) != size:
        msg = "Random source did not supply the requested number of bytes"
        raise RandomSourceError(
            msg,
            details={
                "requested": size,
                "received": len(data) if isinstance(data, bytes) else None,
            },
        )
    return data
