"""Tests for the chaining wrapper."""

import pytest

from fluent_assert import should
from fluent_assert.exceptions import (
    MissingErrorMessageError,
    ShouldBeEqualAssertionError,
    ShouldBeLessThanAssertionError,
    ShouldNotBeNullAssertionError,
)


def test_chain_returns_wrapper():
    result = should(7).not_be_null().be_greater_than(0).be_less_than(10)
    assert result.value == 7


def test_chain_stops_at_first_failure():
    with pytest.raises(ShouldBeLessThanAssertionError):
        should(12).be_greater_than(0).be_less_than(10).be_equal_to(99)


def test_string_chain():
    should("hello world").start_with("hello").end_with("world").contain("o w")


def test_collection_chain():
    should([3, 1, 2]).be_equal_to([1, 2, 3]).contain_all([2]).not_be_empty()


def test_null_subject():
    should(None).be_null()
    with pytest.raises(ShouldNotBeNullAssertionError):
        should(None).not_be_null()


def test_custom_message_passes_through():
    with pytest.raises(ShouldBeEqualAssertionError) as exc_info:
        should(1).be_equal_to(2, lambda: "custom")
    assert str(exc_info.value) == "custom"


def test_none_message_is_usage_error():
    with pytest.raises(MissingErrorMessageError):
        should(1).be_equal_to(1, None)


def test_throw_an_exception_switches_subject():
    class WrapperError(Exception):
        def cause(self):
            raise KeyError("root cause")

    nested = should(WrapperError()).throw_an_exception(lambda e: e.cause())
    nested.be_of_type(KeyError)
