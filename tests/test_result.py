"""Tests for the Ok/Err result values."""

from __future__ import annotations

import pytest

from klaw_assert import Err, Ok


class TestOk:
    """Tests for Ok."""

    def test_predicates(self):
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]

    def test_repr(self):
        assert repr(Ok('a')) == "Ok('a')"

    def test_match(self):
        match Ok(5):
            case Ok(value):
                assert value == 5
            case _:
                pytest.fail('Ok did not match')


class TestErr:
    """Tests for Err."""

    def test_predicates(self):
        error = ValueError('x')
        assert Err(error).is_err()
        assert not Err(error).is_ok()

    def test_equality_by_error(self):
        error = ValueError('x')
        assert Err(error) == Err(error)
        assert Err(error) != Ok(error)

    def test_match(self):
        error = KeyError('k')
        match Err(error):
            case Err(caught):
                assert caught is error
            case _:
                pytest.fail('Err did not match')

    def test_repr(self):
        assert repr(Err(ValueError('x'))) == "Err(ValueError('x'))"
