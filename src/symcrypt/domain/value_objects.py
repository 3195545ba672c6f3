"""Nominal value objects for the encryption boundary.

Plaintext, Ciphertext, Owner and HexKey all wrap a single text value but are
distinct types: a type checker rejects a Plaintext where an Owner is expected,
and two values of different types never compare equal, even when they hold
the same text.

Bytes are mapped to text with UTF-8 and the ``surrogateescape`` error
handler, so any byte sequence survives ``from_bytes()`` -> ``to_bytes()``
unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"

MASK = "*****"

_T = TypeVar("_T", bound="_TextValue")


@dataclass(frozen=True, repr=False)
class _TextValue:
    """Immutable wrapper around one text value."""

    value: str

    # Secret values never show up in str()/repr() or pydantic dumps
    secret: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = f"{type(self).__name__} value must be a string"
            raise TypeError(msg)
        try:
            self.value.encode(TEXT_ENCODING, TEXT_ERRORS)
        except UnicodeEncodeError as e:
            msg = f"{type(self).__name__} value cannot be encoded to bytes"
            raise ValueError(msg) from e

    @classmethod
    def from_bytes(cls: type[_T], data: bytes) -> _T:
        """Build the value from raw bytes."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            msg = f"{cls.__name__}.from_bytes() expects bytes"
            raise TypeError(msg)
        return cls(bytes(data).decode(TEXT_ENCODING, TEXT_ERRORS))

    def to_bytes(self) -> bytes:
        """Unwrap to the raw bytes handed to the cipher."""
        return self.value.encode(TEXT_ENCODING, TEXT_ERRORS)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return MASK if self.secret else self.value

    def __repr__(self) -> str:
        shown = MASK if self.secret else repr(self.value)
        return f"{type(self).__name__}({shown})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """
        Make the value object usable as a Pydantic v2 field type.

        Accepts a plain string or an existing instance. Secret types are
        always serialized masked.
        """
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                info_arg=False,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def _pydantic_validate(cls: type[_T], value: Any) -> _T:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            msg = f"{cls.__name__} value must be a string"
            raise ValueError(msg)
        return cls(value)


class Plaintext(_TextValue):
    """The secret value to protect. Empty plaintext is valid."""

    secret = True


class Ciphertext(_TextValue):
    """Hex-encoded ``nonce || sealed`` produced by a Client.

    Carries no owner information; the owner must be supplied again on
    every decrypt.
    """


class Owner(_TextValue):
    """Identity bound into a ciphertext as associated data.

    Not secret and never encrypted. The empty owner is a valid identity,
    distinct from every non-empty one.
    """


class HexKey(_TextValue):
    """A hex-encoded symmetric key (64 hex characters for 32 bytes).

    Only checked when a client is built from it.
    """

    secret = True
