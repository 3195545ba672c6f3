"""Unit tests for the Plaintext, Ciphertext, Owner and HexKey value objects."""

import dataclasses

import pytest
from pydantic import BaseModel, ValidationError

from symcrypt.domain.value_objects import Ciphertext, HexKey, Owner, Plaintext


class TestValueObjectCreation:
    """Test construction and validation."""

    @pytest.mark.parametrize("cls", [Plaintext, Ciphertext, Owner, HexKey])
    def test_create_with_string(self, cls):
        """Test construction from a string."""
        assert cls("abc").value == "abc"

    @pytest.mark.parametrize("cls", [Plaintext, Ciphertext, Owner, HexKey])
    def test_empty_string_is_valid(self, cls):
        """Empty values are valid for every type."""
        assert cls("").value == ""
        assert len(cls("")) == 0

    @pytest.mark.parametrize("cls", [Plaintext, Ciphertext, Owner, HexKey])
    def test_reject_non_string(self, cls):
        """Test that non-string values are rejected."""
        with pytest.raises(TypeError, match="must be a string"):
            cls(123)  # type: ignore[arg-type]

    def test_reject_bytes_in_constructor(self):
        """Bytes must go through from_bytes()."""
        with pytest.raises(TypeError):
            Plaintext(b"raw")  # type: ignore[arg-type]

    def test_reject_unencodable_surrogate(self):
        """Test that unencodable strings are rejected."""
        with pytest.raises(ValueError, match="cannot be encoded"):
            Owner("\ud800")

    def test_immutable(self):
        """Test that values cannot be reassigned."""
        owner = Owner("user_1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            owner.value = "user_2"  # type: ignore[misc]


class TestValueObjectBytes:
    """Test conversion to and from raw bytes."""

    def test_from_bytes_utf8(self):
        """Test building from UTF-8 bytes."""
        assert Plaintext.from_bytes("Passwörd".encode()) == Plaintext("Passwörd")

    def test_to_bytes_utf8(self):
        """Test unwrapping to UTF-8 bytes."""
        assert Owner("userid_000111").to_bytes() == b"userid_000111"
        assert Plaintext("é").to_bytes() == b"\xc3\xa9"

    def test_invalid_utf8_bytes_survive(self):
        """Arbitrary bytes round-trip exactly, even when not valid UTF-8."""
        raw = bytes(range(256))
        assert Plaintext.from_bytes(raw).to_bytes() == raw

    def test_from_bytes_accepts_bytearray(self):
        """Test that bytearray input is accepted."""
        assert Owner.from_bytes(bytearray(b"abc")) == Owner("abc")

    def test_from_bytes_rejects_str(self):
        """Test that from_bytes() rejects text."""
        with pytest.raises(TypeError, match="expects bytes"):
            Owner.from_bytes("abc")  # type: ignore[arg-type]


class TestValueObjectEquality:
    """Test that the types stay distinct."""

    def test_same_type_same_value_equal(self):
        """Test equality and hashing of equal values."""
        assert Owner("a") == Owner("a")
        assert hash(Owner("a")) == hash(Owner("a"))

    def test_same_type_different_value_not_equal(self):
        """Test that different values are unequal."""
        assert Owner("a") != Owner("b")

    def test_different_types_never_equal(self):
        """Test that the same text in different types is unequal."""
        assert Plaintext("a") != Owner("a")
        assert Owner("a") != Ciphertext("a")
        assert Ciphertext("a") != Plaintext("a")
        assert HexKey("a") != Plaintext("a")

    def test_not_equal_to_raw_string(self):
        """Test that wrappers never equal raw strings."""
        assert Owner("a") != "a"

    def test_empty_owner_distinct_from_non_empty(self):
        """Test that the empty owner is its own identity."""
        assert Owner("") != Owner("x")

    def test_usable_in_sets(self):
        """Test use as set members."""
        assert len({Owner("a"), Owner("a"), Owner("b")}) == 2


class TestValueObjectMasking:
    """Test that secret types hide their value."""

    def test_plaintext_masked(self):
        """Test that plaintext is masked in str and repr."""
        secret = Plaintext("ascx_mysecretaccesstoken")
        assert str(secret) == "*****"
        assert repr(secret) == "Plaintext(*****)"
        assert "mysecret" not in f"{secret}"

    def test_hex_key_masked(self):
        """Test that keys are masked in str and repr."""
        key = HexKey("00" * 32)
        assert str(key) == "*****"
        assert repr(key) == "HexKey(*****)"

    def test_owner_visible(self):
        """Test that owners are shown."""
        owner = Owner("userid_000111")
        assert str(owner) == "userid_000111"
        assert repr(owner) == "Owner('userid_000111')"

    def test_ciphertext_visible(self):
        """Test that ciphertexts are shown."""
        assert str(Ciphertext("abcd")) == "abcd"


class _Record(BaseModel):
    owner: Owner
    secret: Plaintext
    ciphertext: Ciphertext | None = None


class TestValueObjectPydantic:
    """Test Pydantic v2 integration."""

    def test_validate_from_strings(self):
        """Test pydantic validation from strings."""
        record = _Record(owner="user_1", secret="token")
        assert record.owner == Owner("user_1")
        assert record.secret == Plaintext("token")

    def test_validate_from_instances(self):
        """Test that existing instances pass through."""
        owner = Owner("user_1")
        record = _Record(owner=owner, secret=Plaintext("token"))
        assert record.owner is owner

    def test_reject_non_string(self):
        """Test that non-strings fail pydantic validation."""
        with pytest.raises(ValidationError):
            _Record(owner=42, secret="token")

    def test_serialization_masks_secrets(self):
        """Test that dumps mask secret fields."""
        record = _Record(owner="user_1", secret="token", ciphertext="abcd")
        dumped = record.model_dump()
        assert dumped == {"owner": "user_1", "secret": "*****", "ciphertext": "abcd"}
        assert "token" not in record.model_dump_json()
