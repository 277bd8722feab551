"""Tests for ulidkit.core.result module."""

import pytest

from ulidkit.core.errors import InvalidCharError, InvalidLengthError
from ulidkit.core.result import Err, Ok, partition_results
from ulidkit.core.ulid import Ulid


class TestOk:
    """Test Ok class."""

    def test_create_ok(self):
        result = Ok(42)
        assert result.value == 42
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap(self):
        assert Ok("hello").unwrap() == "hello"

    def test_map_chaining(self):
        result = Ok(5).map(lambda x: x * 2).map(lambda x: x + 1)
        assert result == Ok(11)

    def test_repr(self):
        assert repr(Ok(42)) == "Ok(42)"

    def test_equality_and_hash(self):
        assert Ok(1) == Ok(1)
        assert Ok(1) != Ok(2)
        assert hash(Ok(1)) == hash(Ok(1))

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]


class TestErr:
    """Test Err class."""

    def test_create_err(self):
        result = Err(InvalidLengthError())
        assert result.is_err() is True
        assert result.is_ok() is False

    def test_unwrap_raises(self):
        with pytest.raises(InvalidLengthError):
            Err(InvalidLengthError()).unwrap()

    def test_map_passes_error_through(self):
        error = InvalidLengthError()
        result = Err(error).map(lambda x: x * 2)
        assert result.is_err()
        assert result.error is error

    def test_repr(self):
        assert repr(Err(ValueError("bad"))) == "Err(ValueError('bad'))"

    def test_pattern_matching(self):
        match Ulid.parse("IIIIIIIIIIIIIIIIIIIIIIIIIU"):
            case Ok(_):
                pytest.fail("expected Err")
            case Err(InvalidCharError() as error):
                assert error.position == 25


class TestPartitionResults:
    """Test partition_results()."""

    def test_splits_in_order(self):
        texts = ["01CAT3X5Y5G9A62FH1FA6T9GVR", "short", "00000000000000000000000000", "0" * 25 + "U"]
        accepted, rejected = partition_results((text, Ulid.parse(text)) for text in texts)
        assert [str(ulid) for ulid in accepted] == [texts[0], texts[2]]
        assert rejected == [("short", InvalidLengthError()), (texts[3], InvalidCharError("U", 25))]

    def test_empty(self):
        assert partition_results([]) == ([], [])

    def test_all_accepted(self):
        accepted, rejected = partition_results([("a", Ok(1)), ("b", Ok(2))])
        assert accepted == [1, 2]
        assert rejected == []
