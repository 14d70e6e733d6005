"""Assertions module - fluent verification primitives."""

from .engine import (
    ErrorMessage,
    are_equal,
    compare,
    find_missing_item,
    is_sequence,
    should_be_empty,
    should_be_equal_to,
    should_be_false,
    should_be_greater_than,
    should_be_greater_than_or_equal_to,
    should_be_in_range_inclusive,
    should_be_less_than,
    should_be_less_than_or_equal_to,
    should_be_null,
    should_be_of_type,
    should_be_same_instance_as,
    should_be_true,
    should_contain,
    should_contain_all,
    should_contain_all_in_order,
    should_end_with,
    should_not_be_empty,
    should_not_be_equal_to,
    should_not_be_null,
    should_not_be_null_or_empty,
    should_not_be_same_instance_as,
    should_not_contain,
    should_not_end_with,
    should_not_start_with,
    should_start_with,
    should_throw,
    should_throw_an_exception,
)
from .fluent import Should, should

__all__ = [
    "ErrorMessage",
    "are_equal",
    "compare",
    "find_missing_item",
    "is_sequence",
    "should_be_empty",
    "should_be_equal_to",
    "should_be_false",
    "should_be_greater_than",
    "should_be_greater_than_or_equal_to",
    "should_be_in_range_inclusive",
    "should_be_less_than",
    "should_be_less_than_or_equal_to",
    "should_be_null",
    "should_be_of_type",
    "should_be_same_instance_as",
    "should_be_true",
    "should_contain",
    "should_contain_all",
    "should_contain_all_in_order",
    "should_end_with",
    "should_not_be_empty",
    "should_not_be_equal_to",
    "should_not_be_null",
    "should_not_be_null_or_empty",
    "should_not_be_same_instance_as",
    "should_not_contain",
    "should_not_end_with",
    "should_not_start_with",
    "should_start_with",
    "should_throw",
    "should_throw_an_exception",
    "Should",
    "should",
]
