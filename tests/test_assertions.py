"""Tests for the assertion engine."""

import pytest

from fluent_assert.assertions import (
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
from fluent_assert.exceptions import (
    FluentAssertionError,
    MissingErrorMessageError,
    ShouldBeEqualAssertionError,
    ShouldBeFalseAssertionError,
    ShouldBeGreaterThanAssertionError,
    ShouldBeGreaterThanOrEqualToAssertionError,
    ShouldBeLessThanAssertionError,
    ShouldBeLessThanOrEqualToAssertionError,
    ShouldBeNullAssertionError,
    ShouldBeTrueAssertionError,
    ShouldNotBeEqualAssertionError,
    ShouldNotBeNullAssertionError,
    ShouldThrowExceptionAssertionError,
)


class SpecificError(ValueError):
    pass


class OtherError(Exception):
    pass


def _raise(exception):
    def action():
        raise exception
    return action


# --- equality ---


def test_equal_to_self_returns_subject():
    item = object()
    assert should_be_equal_to(item, item) is item


def test_equal_values():
    should_be_equal_to(5, 5)
    should_be_equal_to("", "")
    should_be_equal_to({"a": 1}, {"a": 1})


def test_not_equal_values_fail_with_default_message():
    with pytest.raises(ShouldBeEqualAssertionError) as exc_info:
        should_be_equal_to(1, 2)
    assert str(exc_info.value) == "  Expected: 2\n  But was:  1\n"


def test_equal_to_none():
    should_be_equal_to(None, None)
    with pytest.raises(ShouldBeEqualAssertionError):
        should_be_equal_to(1, None)
    with pytest.raises(ShouldBeEqualAssertionError):
        should_be_equal_to(None, 1)


def test_sequences_compare_as_multisets():
    should_be_equal_to([1, 2, 3], [3, 1, 2])
    should_be_equal_to((1, 1, 2), [1, 2, 1])
    should_be_equal_to((x for x in [1, 2]), [2, 1])


def test_sequence_count_mismatch():
    with pytest.raises(ShouldBeEqualAssertionError) as exc_info:
        should_be_equal_to([1, 2], [1, 2, 3])
    assert str(exc_info.value) == "  Expected 3 items but contained 2"


def test_sequence_repetition_must_match():
    with pytest.raises(ShouldBeEqualAssertionError) as exc_info:
        should_be_equal_to([1, 1, 2], [1, 2, 2])
    assert str(exc_info.value) == "  Expected list to contain: 2"


def test_sequence_custom_message_replaces_default():
    with pytest.raises(ShouldBeEqualAssertionError) as exc_info:
        should_be_equal_to([1], [2], "lists differ")
    assert str(exc_info.value) == "lists differ"


def test_mappings_compare_by_value_not_keys():
    with pytest.raises(ShouldBeEqualAssertionError):
        should_be_equal_to({"a": 1}, {"a": 2})


def test_not_equal():
    assert should_not_be_equal_to("abc", "abd") == "abc"
    should_not_be_equal_to(1, None)
    should_not_be_equal_to(None, 1)


def test_not_equal_fails_for_equal_values():
    with pytest.raises(ShouldNotBeEqualAssertionError) as exc_info:
        should_not_be_equal_to(3, 3)
    assert "not 3" in str(exc_info.value)
    with pytest.raises(ShouldNotBeEqualAssertionError):
        should_not_be_equal_to(None, None)
    with pytest.raises(ShouldNotBeEqualAssertionError):
        should_not_be_equal_to([1, 2], [2, 1])


# --- messages ---


def test_custom_string_message():
    with pytest.raises(ShouldBeEqualAssertionError) as exc_info:
        should_be_equal_to(1, 2, "totals differ")
    assert str(exc_info.value) == "totals differ"


def test_message_supplier_only_called_on_failure():
    calls = []

    def supplier():
        calls.append(1)
        return "lazy"

    should_be_equal_to(1, 1, supplier)
    assert calls == []

    with pytest.raises(ShouldBeEqualAssertionError) as exc_info:
        should_be_equal_to(1, 2, supplier)
    assert str(exc_info.value) == "lazy"
    assert calls == [1]


def test_missing_message_is_usage_error():
    with pytest.raises(MissingErrorMessageError) as exc_info:
        should_be_equal_to(1, 1, None)
    assert not isinstance(exc_info.value, AssertionError)
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize(
    "call",
    [
        lambda: should_be_true(True, None),
        lambda: should_be_false(False, None),
        lambda: should_be_null(None, None),
        lambda: should_not_be_null(1, None),
        lambda: should_be_greater_than(2, 1, None),
        lambda: should_be_less_than(1, 2, None),
        lambda: should_not_be_equal_to(1, 2, None),
        lambda: should_contain_all([1], [1], None),
        lambda: should_throw(ValueError, _raise(ValueError()), None),
    ],
)
def test_missing_message_raised_even_when_assertion_passes(call):
    with pytest.raises(MissingErrorMessageError):
        call()


def test_failures_are_assertion_errors():
    with pytest.raises(AssertionError):
        should_be_true(False)
    assert issubclass(ShouldBeEqualAssertionError, FluentAssertionError)


# --- booleans ---


def test_true_and_false():
    should_be_true(True)
    should_be_false(False)


def test_true_fails_with_default_message():
    with pytest.raises(ShouldBeTrueAssertionError) as exc_info:
        should_be_true(False)
    assert str(exc_info.value) == "  Expected: True\n  But was:  False\n"


def test_false_fails():
    with pytest.raises(ShouldBeFalseAssertionError):
        should_be_false(True, "should be off")


# --- null-ness ---


def test_null():
    assert should_be_null(None) is None
    with pytest.raises(ShouldBeNullAssertionError) as exc_info:
        should_be_null("x")
    assert str(exc_info.value) == '  Expected: null\n  But was:  "x"\n'


def test_not_null():
    assert should_not_be_null(0) == 0
    with pytest.raises(ShouldNotBeNullAssertionError):
        should_not_be_null(None)


def test_empty():
    should_be_empty([])
    with pytest.raises(ShouldBeEqualAssertionError):
        should_be_empty([1])
    with pytest.raises(ShouldNotBeNullAssertionError):
        should_be_empty(None)


def test_empty_counts_unsized_iterables():
    should_be_empty(iter([]))
    should_be_empty(x for x in ())
    with pytest.raises(ShouldBeEqualAssertionError):
        should_be_empty(iter([1, 2]))


def test_not_null_or_empty():
    assert should_not_be_null_or_empty("a") == "a"
    with pytest.raises(ShouldNotBeNullAssertionError):
        should_not_be_null_or_empty(None)
    with pytest.raises(ShouldBeGreaterThanAssertionError):
        should_not_be_null_or_empty("")


# --- ordering ---


def test_greater_than_is_strict():
    assert should_be_greater_than(6, 5) == 6
    with pytest.raises(ShouldBeGreaterThanAssertionError) as exc_info:
        should_be_greater_than(5, 5)
    assert str(exc_info.value) == "  Expected: greater than 5\n  But was:  5\n"


def test_greater_than_or_equal():
    should_be_greater_than_or_equal_to(5, 5)
    with pytest.raises(ShouldBeGreaterThanOrEqualToAssertionError):
        should_be_greater_than_or_equal_to(4, 5)


def test_less_than_is_strict():
    should_be_less_than(4, 5)
    with pytest.raises(ShouldBeLessThanAssertionError):
        should_be_less_than(5, 5)


def test_less_than_or_equal():
    should_be_less_than_or_equal_to(5, 5)
    with pytest.raises(ShouldBeLessThanOrEqualToAssertionError):
        should_be_less_than_or_equal_to(6, 5)


def test_ordering_against_null_ranks_subject_above():
    assert should_be_greater_than(5, None) == 5
    should_be_greater_than_or_equal_to(5, None)
    with pytest.raises(ShouldBeLessThanAssertionError) as exc_info:
        should_be_less_than(5, None)
    assert "less than null" in str(exc_info.value)
    with pytest.raises(ShouldBeLessThanOrEqualToAssertionError):
        should_be_less_than_or_equal_to(5, None)


def test_ordering_rejects_null_subject():
    with pytest.raises(ShouldNotBeNullAssertionError):
        should_be_greater_than(None, 1)
    with pytest.raises(ShouldNotBeNullAssertionError):
        should_be_less_than_or_equal_to(None, 1)


def test_partial_order_strict_requires_greater():
    should_be_greater_than({1, 2}, {1})
    with pytest.raises(ShouldBeGreaterThanAssertionError):
        should_be_greater_than({1}, {2})
    with pytest.raises(ShouldBeLessThanAssertionError):
        should_be_less_than({1}, {2})


def test_partial_order_non_strict_fails_only_on_opposite():
    should_be_greater_than_or_equal_to({1}, {2})
    should_be_less_than_or_equal_to({1}, {2})
    with pytest.raises(ShouldBeGreaterThanOrEqualToAssertionError):
        should_be_greater_than_or_equal_to({1}, {1, 2})


def test_in_range_inclusive():
    assert should_be_in_range_inclusive(3, 1, 5) == 3
    should_be_in_range_inclusive(1, 1, 5)
    should_be_in_range_inclusive(5, 1, 5)
    with pytest.raises(ShouldBeGreaterThanOrEqualToAssertionError):
        should_be_in_range_inclusive(3, 4, 5)
    with pytest.raises(ShouldBeLessThanOrEqualToAssertionError):
        should_be_in_range_inclusive(6, 1, 5)


# --- strings ---


def test_string_predicates_pass():
    text = "hello world"
    assert should_contain(text, "lo w") is text
    should_not_contain(text, "xyz")
    should_start_with(text, "hello")
    should_not_start_with(text, "world")
    should_end_with(text, "world")
    should_not_end_with(text, "hello")
    should_not_be_empty(text)


def test_string_predicates_fail():
    with pytest.raises(ShouldBeTrueAssertionError):
        should_contain("abc", "z")
    with pytest.raises(ShouldBeFalseAssertionError):
        should_not_contain("abc", "b")
    with pytest.raises(ShouldBeTrueAssertionError):
        should_start_with("abc", "b", "wrong prefix")
    with pytest.raises(ShouldBeFalseAssertionError):
        should_not_end_with("abc", "c")
    with pytest.raises(ShouldBeGreaterThanAssertionError):
        should_not_be_empty("")


# --- type and identity ---


def test_of_type():
    assert should_be_of_type(1, int) == 1
    should_be_of_type(SpecificError(), ValueError)


def test_of_type_failure_names_types():
    with pytest.raises(ShouldBeTrueAssertionError) as exc_info:
        should_be_of_type(1, str)
    assert str(exc_info.value) == "  Expected: <str>\n  But was:  <int>\n"


def test_same_instance():
    a = []
    assert should_be_same_instance_as(a, a) is a
    should_not_be_same_instance_as(a, [])
    with pytest.raises(ShouldBeTrueAssertionError):
        should_be_same_instance_as([], [])
    with pytest.raises(ShouldBeFalseAssertionError):
        should_not_be_same_instance_as(a, a)


# --- collections ---


def test_contain_all_in_order():
    items = [1, 2, 3]
    assert should_contain_all_in_order(items, [1, 2, 3]) is items


def test_contain_all_in_order_rejects_permutation():
    should_be_equal_to([1, 2, 3], [3, 2, 1])
    with pytest.raises(ShouldBeEqualAssertionError) as exc_info:
        should_contain_all_in_order([1, 2, 3], [3, 2, 1])
    assert str(exc_info.value).startswith("  at offset 0\n")


def test_contain_all_in_order_length_mismatch():
    with pytest.raises(ShouldBeEqualAssertionError):
        should_contain_all_in_order([1, 2], [1, 2, 3])


def test_contain_all_allows_extra_items():
    items = [1, 2, 3, 4]
    assert should_contain_all(items, [4, 2]) is items


def test_contain_all_reports_first_missing():
    with pytest.raises(ShouldBeTrueAssertionError) as exc_info:
        should_contain_all([1, 2], [2, 3, 5])
    assert str(exc_info.value) == "Collection does not contain '3'"


# --- should_throw ---


def test_throw_expected_type():
    should_throw(SpecificError, _raise(SpecificError("x")))


def test_throw_other_type_names_both():
    with pytest.raises(ShouldThrowExceptionAssertionError) as exc_info:
        should_throw(SpecificError, _raise(OtherError("bad input")))
    message = str(exc_info.value)
    assert "Should have thrown SpecificError" in message
    assert "But threw OtherError: bad input" in message


def test_throw_requires_exact_type():
    with pytest.raises(ShouldThrowExceptionAssertionError):
        should_throw(ValueError, _raise(SpecificError()))


def test_throw_without_exception_fails():
    with pytest.raises(ShouldThrowExceptionAssertionError) as exc_info:
        should_throw(SpecificError, lambda: None)
    assert str(exc_info.value) == "  Should have thrown SpecificError\n"


def test_throw_custom_message():
    with pytest.raises(ShouldThrowExceptionAssertionError) as exc_info:
        should_throw(SpecificError, lambda: None, "expected a failure")
    assert str(exc_info.value) == "expected a failure"


def test_throw_reraises_nested_assertion_failure():
    with pytest.raises(ShouldBeTrueAssertionError):
        should_throw(SpecificError, lambda: should_be_true(False))


def test_throw_can_expect_assertion_failure():
    should_throw(ShouldBeTrueAssertionError, lambda: should_be_true(False))


# --- should_throw_an_exception ---


class OuterError(Exception):
    def inner(self):
        raise KeyError("inner")

    def quiet(self):
        return None


def test_throw_an_exception_returns_raised_exception():
    result = should_throw_an_exception(OuterError(), lambda e: e.inner())
    assert isinstance(result, KeyError)


def test_throw_an_exception_without_exception_fails():
    with pytest.raises(ShouldThrowExceptionAssertionError) as exc_info:
        should_throw_an_exception(OuterError(), lambda e: e.quiet())
    assert "OuterError" in str(exc_info.value)


def test_throw_an_exception_reraises_assertion_failure():
    with pytest.raises(ShouldBeFalseAssertionError):
        should_throw_an_exception(OuterError(), lambda e: should_be_false(True))
