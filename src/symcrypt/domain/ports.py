"""Random source port. Interface for the entropy used by the core."""

from typing import Protocol


class RandomSource(Protocol):
    """Port for a source of random bytes.

    Production code always uses a cryptographically secure implementation;
    tests may substitute a deterministic one.
    """

    def random_bytes(self, size: int) -> bytes:
        """Return exactly ``size`` random bytes.

        Raises
        ------
        RandomSourceError
            If the source cannot supply the requested bytes
        """
        ...
