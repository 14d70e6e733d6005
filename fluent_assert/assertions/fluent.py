"""Chaining wrapper over the assertion engine.

    should(result).not_be_null().be_greater_than(0).be_less_than(10)

Each method delegates to the engine function of the same name and returns
the wrapper, so further assertions run against the same subject.
"""

from typing import Any, Callable, Generic, TypeVar

from . import engine
from .engine import _DEFAULT, ErrorMessage

T = TypeVar("T")


class Should(Generic[T]):
    """Fluent assertions bound to a single subject value."""

    def __init__(self, value: T):
        self.value = value

    def __repr__(self) -> str:
        return f"Should({self.value!r})"

    def be_equal_to(self, expected: T, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_be_equal_to(self.value, expected, error_message)
        return self

    def not_be_equal_to(self, expected: T, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_not_be_equal_to(self.value, expected, error_message)
        return self

    def be_true(self, error_message: ErrorMessage = _DEFAULT) -> None:
        engine.should_be_true(self.value, error_message)

    def be_false(self, error_message: ErrorMessage = _DEFAULT) -> None:
        engine.should_be_false(self.value, error_message)

    def be_null(self, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_be_null(self.value, error_message)
        return self

    def not_be_null(self, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_not_be_null(self.value, error_message)
        return self

    def be_empty(self, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_be_empty(self.value, error_message)
        return self

    def not_be_empty(self, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_not_be_empty(self.value, error_message)
        return self

    def not_be_null_or_empty(self, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_not_be_null_or_empty(self.value, error_message)
        return self

    def be_greater_than(self, other: T, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_be_greater_than(self.value, other, error_message)
        return self

    def be_greater_than_or_equal_to(
        self, other: T, error_message: ErrorMessage = _DEFAULT
    ) -> "Should[T]":
        engine.should_be_greater_than_or_equal_to(self.value, other, error_message)
        return self

    def be_less_than(self, other: T, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_be_less_than(self.value, other, error_message)
        return self

    def be_less_than_or_equal_to(
        self, other: T, error_message: ErrorMessage = _DEFAULT
    ) -> "Should[T]":
        engine.should_be_less_than_or_equal_to(self.value, other, error_message)
        return self

    def be_in_range_inclusive(
        self, low: T, high: T, error_message: ErrorMessage = _DEFAULT
    ) -> "Should[T]":
        engine.should_be_in_range_inclusive(self.value, low, high, error_message)
        return self

    def contain(self, substring: str, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_contain(self.value, substring, error_message)
        return self

    def not_contain(self, substring: str, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_not_contain(self.value, substring, error_message)
        return self

    def start_with(self, prefix: str, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_start_with(self.value, prefix, error_message)
        return self

    def not_start_with(self, prefix: str, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_not_start_with(self.value, prefix, error_message)
        return self

    def end_with(self, suffix: str, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_end_with(self.value, suffix, error_message)
        return self

    def not_end_with(self, suffix: str, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_not_end_with(self.value, suffix, error_message)
        return self

    def be_of_type(self, expected_type: type, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_be_of_type(self.value, expected_type, error_message)
        return self

    def be_same_instance_as(self, other: Any, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_be_same_instance_as(self.value, other, error_message)
        return self

    def not_be_same_instance_as(
        self, other: Any, error_message: ErrorMessage = _DEFAULT
    ) -> "Should[T]":
        engine.should_not_be_same_instance_as(self.value, other, error_message)
        return self

    def contain_all_in_order(self, expected, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_contain_all_in_order(self.value, expected, error_message)
        return self

    def contain_all(self, expected, error_message: ErrorMessage = _DEFAULT) -> "Should[T]":
        engine.should_contain_all(self.value, expected, error_message)
        return self

    def throw_an_exception(self, method_to_call: Callable[[T], Any]) -> "Should[BaseException]":
        """Switch the subject to the exception raised by ``method_to_call``."""
        return Should(engine.should_throw_an_exception(self.value, method_to_call))


def should(value: T) -> Should[T]:
    return Should(value)
