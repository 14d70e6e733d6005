"""Assertion engine: verification primitives over arbitrary values.

Every operation takes an optional ``error_message`` which is either a string
or a zero-argument callable. The callable is only invoked when the assertion
fails. Passing ``None`` explicitly is a usage error.

Operations return their subject so calls can be nested or chained; the
boolean assertions return nothing.
"""

from collections.abc import Iterable, Mapping, Sized
from typing import Any, Callable, Optional, TypeVar, Union

from ..exceptions import (
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
from ..messages import build_for, to_displayable_string

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)

ErrorMessage = Union[str, Callable[[], str]]

_DEFAULT: Any = object()

GREATER = 1
EQUAL = 0
LESS = -1


def _message_supplier(
    error_message: Any,
    default: Callable[[], str],
) -> Callable[[], str]:
    """Normalize an ``error_message`` argument to a zero-argument callable."""
    if error_message is None:
        raise MissingErrorMessageError("error_message")
    if error_message is _DEFAULT:
        return default
    if callable(error_message):
        return error_message
    return lambda: error_message


def is_sequence(value: Any) -> bool:
    """Whether a value is compared by multiset membership.

    Strings, bytes and mappings are iterable but compare by value.
    """
    return isinstance(value, Iterable) and not isinstance(
        value, (str, bytes, bytearray, Mapping)
    )


def find_missing_item(items: Iterable, expected: Iterable) -> tuple[bool, Any]:
    """Find the first expected item with no remaining match in ``items``.

    Each match is consumed, so repeated expected items need repeated
    occurrences in ``items``.

    Returns:
        ``(True, item)`` for the first unmatched item, ``(False, None)`` if
        every expected item was found.
    """
    remaining = list(items)
    for item in expected:
        for index, candidate in enumerate(remaining):
            if candidate == item:
                del remaining[index]
                break
        else:
            return True, item
    return False, None


def _is_multiset_equal(item: Any, expected: Any) -> bool:
    item_list, expected_list = list(item), list(expected)
    if len(item_list) != len(expected_list):
        return False
    missing, _ = find_missing_item(item_list, expected_list)
    return not missing


def are_equal(item: Any, expected: Any) -> bool:
    """Equality as used by ``should_be_equal_to``, without raising."""
    if item is expected:
        return True
    if item is None or expected is None:
        return False
    if is_sequence(item) and is_sequence(expected):
        return _is_multiset_equal(item, expected)
    return item == expected


def compare(item: Any, other: Any) -> Optional[int]:
    """Three-way comparison.

    Returns:
        ``GREATER``, ``LESS`` or ``EQUAL``; None when the values are
        incomparable under a partial order (e.g. disjoint sets).
    """
    # Any present value ranks above null.
    if other is None:
        return GREATER
    if item > other:
        return GREATER
    if item < other:
        return LESS
    if item == other:
        return EQUAL
    return None


# --- equality ---


def should_be_equal_to(item: T, expected: T, error_message: ErrorMessage = _DEFAULT) -> T:
    get_message = _message_supplier(
        error_message,
        lambda: ShouldBeEqualAssertionError.create_message(item, expected),
    )

    if item is expected:
        return item
    if item is None and expected is None:
        return item
    if item is None or expected is None:
        raise ShouldBeEqualAssertionError(get_message())

    if is_sequence(item) and is_sequence(expected):
        custom = error_message is not _DEFAULT
        item_list = list(item)
        expected_list = list(expected)
        should_be_equal_to(
            len(item_list),
            len(expected_list),
            get_message if custom else (
                lambda: f"  Expected {len(expected_list)} items but contained {len(item_list)}"
            ),
        )
        missing, missing_item = find_missing_item(item_list, expected_list)
        if missing:
            raise ShouldBeEqualAssertionError(
                get_message() if custom
                else f"  Expected list to contain: {to_displayable_string(missing_item)}"
            )
    elif not item == expected:
        raise ShouldBeEqualAssertionError(get_message())

    return item


def should_not_be_equal_to(item: T, expected: T, error_message: ErrorMessage = _DEFAULT) -> T:
    get_message = _message_supplier(
        error_message,
        lambda: ShouldNotBeEqualAssertionError.create_message(item, expected),
    )
    if are_equal(item, expected):
        raise ShouldNotBeEqualAssertionError(get_message())
    return item


# --- booleans ---


def should_be_true(item: bool, error_message: ErrorMessage = _DEFAULT) -> None:
    get_message = _message_supplier(error_message, ShouldBeTrueAssertionError.create_message)
    if not item:
        raise ShouldBeTrueAssertionError(get_message())


def should_be_false(item: bool, error_message: ErrorMessage = _DEFAULT) -> None:
    get_message = _message_supplier(error_message, ShouldBeFalseAssertionError.create_message)
    if item:
        raise ShouldBeFalseAssertionError(get_message())


# --- null-ness ---


def should_be_null(item: T, error_message: ErrorMessage = _DEFAULT) -> T:
    get_message = _message_supplier(
        error_message,
        lambda: ShouldBeNullAssertionError.create_message(to_displayable_string(item)),
    )
    if item is not None:
        raise ShouldBeNullAssertionError(get_message())
    return item


def should_not_be_null(item: T, error_message: ErrorMessage = _DEFAULT) -> T:
    get_message = _message_supplier(error_message, ShouldNotBeNullAssertionError.create_message)
    if item is None:
        raise ShouldNotBeNullAssertionError(get_message())
    return item


def should_be_empty(item, error_message: ErrorMessage = _DEFAULT):
    """Subject must be present and have no items.

    Unsized iterables are consumed to count them.
    """
    should_not_be_null(item, error_message)
    size = len(item) if isinstance(item, Sized) else sum(1 for _ in item)
    should_be_equal_to(size, 0, error_message)
    return item


def should_not_be_empty(item: str, error_message: ErrorMessage = _DEFAULT) -> str:
    should_be_greater_than(len(item), 0, error_message)
    return item


def should_not_be_null_or_empty(item: str, error_message: ErrorMessage = _DEFAULT) -> str:
    should_not_be_null(item, error_message)
    should_not_be_empty(item, error_message)
    return item


# --- ordering ---


def _ordering_message(error_cls, item: Any, other: Any) -> Callable[[], str]:
    return lambda: error_cls.create_message(
        to_displayable_string(other), to_displayable_string(item)
    )


def should_be_greater_than(item: T, other: T, error_message: ErrorMessage = _DEFAULT) -> T:
    get_message = _message_supplier(
        error_message, _ordering_message(ShouldBeGreaterThanAssertionError, item, other)
    )
    should_not_be_null(item)
    if compare(item, other) != GREATER:
        raise ShouldBeGreaterThanAssertionError(get_message())
    return item


def should_be_greater_than_or_equal_to(
    item: T, other: T, error_message: ErrorMessage = _DEFAULT
) -> T:
    get_message = _message_supplier(
        error_message,
        _ordering_message(ShouldBeGreaterThanOrEqualToAssertionError, item, other),
    )
    should_not_be_null(item)
    if compare(item, other) == LESS:
        raise ShouldBeGreaterThanOrEqualToAssertionError(get_message())
    return item


def should_be_less_than(item: T, other: T, error_message: ErrorMessage = _DEFAULT) -> T:
    get_message = _message_supplier(
        error_message, _ordering_message(ShouldBeLessThanAssertionError, item, other)
    )
    should_not_be_null(item)
    if compare(item, other) != LESS:
        raise ShouldBeLessThanAssertionError(get_message())
    return item


def should_be_less_than_or_equal_to(
    item: T, other: T, error_message: ErrorMessage = _DEFAULT
) -> T:
    get_message = _message_supplier(
        error_message,
        _ordering_message(ShouldBeLessThanOrEqualToAssertionError, item, other),
    )
    should_not_be_null(item)
    if compare(item, other) == GREATER:
        raise ShouldBeLessThanOrEqualToAssertionError(get_message())
    return item


def should_be_in_range_inclusive(
    item: T, low: T, high: T, error_message: ErrorMessage = _DEFAULT
) -> T:
    should_be_greater_than_or_equal_to(item, low, error_message)
    should_be_less_than_or_equal_to(item, high, error_message)
    return item


# --- strings ---


def should_contain(item: str, expected_substring: str, error_message: ErrorMessage = _DEFAULT) -> str:
    should_be_true(expected_substring in item, error_message)
    return item


def should_not_contain(item: str, expected_substring: str, error_message: ErrorMessage = _DEFAULT) -> str:
    should_be_false(expected_substring in item, error_message)
    return item


def should_start_with(item: str, expected: str, error_message: ErrorMessage = _DEFAULT) -> str:
    should_be_true(item.startswith(expected), error_message)
    return item


def should_not_start_with(item: str, expected: str, error_message: ErrorMessage = _DEFAULT) -> str:
    should_be_false(item.startswith(expected), error_message)
    return item


def should_end_with(item: str, expected: str, error_message: ErrorMessage = _DEFAULT) -> str:
    should_be_true(item.endswith(expected), error_message)
    return item


def should_not_end_with(item: str, expected: str, error_message: ErrorMessage = _DEFAULT) -> str:
    should_be_false(item.endswith(expected), error_message)
    return item


# --- type and identity ---


def _type_message(item: Any, expected_type: type) -> Callable[[], str]:
    return lambda: build_for(
        to_displayable_string(expected_type),
        to_displayable_string(type(item)),
    )


def _offset_message(index: int, actual: Any, wanted: Any) -> Callable[[], str]:
    return lambda: (
        f"  at offset {index}\n"
        + ShouldBeEqualAssertionError.create_message(actual, wanted)
    )


def should_be_of_type(item: Any, expected_type: type, error_message: ErrorMessage = _DEFAULT) -> Any:
    if error_message is _DEFAULT:
        error_message = _type_message(item, expected_type)
    should_be_true(isinstance(item, expected_type), error_message)
    return item


def should_be_same_instance_as(item: T, other: T, error_message: ErrorMessage = _DEFAULT) -> T:
    should_be_true(item is other, error_message)
    return item


def should_not_be_same_instance_as(item: T, other: T, error_message: ErrorMessage = _DEFAULT) -> T:
    should_be_false(item is other, error_message)
    return item


# --- collections ---


def should_contain_all_in_order(items, expected, error_message: ErrorMessage = _DEFAULT):
    """Positional equality: same length and equal items at every offset."""
    _message_supplier(error_message, str)
    item_list = list(items)
    expected_list = list(expected)
    should_be_equal_to(len(item_list), len(expected_list), error_message)
    for index, (actual, wanted) in enumerate(zip(item_list, expected_list)):
        if error_message is _DEFAULT:
            message = _offset_message(index, actual, wanted)
        else:
            message = error_message
        should_be_equal_to(actual, wanted, message)
    return items


def should_contain_all(items, expected, error_message: ErrorMessage = _DEFAULT):
    """Every expected item is present in ``items``; extra items are allowed."""
    missing, missing_item = find_missing_item(items, expected)
    get_message = _message_supplier(
        error_message,
        lambda: f"Collection does not contain '{missing_item}'",
    )
    if missing:
        raise ShouldBeTrueAssertionError(get_message())
    return items


# --- exceptions ---


def should_throw(
    exception_type: type[E],
    action: Callable[[], Any],
    error_message: ErrorMessage = _DEFAULT,
) -> None:
    """Run ``action`` and require it to raise exactly ``exception_type``.

    Assertion failures raised inside the action propagate unchanged.
    """
    custom = error_message is not _DEFAULT
    get_message = _message_supplier(error_message, str)

    try:
        action()
    except BaseException as exception:
        if type(exception) is exception_type:
            return
        if isinstance(exception, FluentAssertionError):
            raise
        if not isinstance(exception, Exception):
            raise
        if custom:
            raise ShouldThrowExceptionAssertionError(get_message()) from exception
        raise ShouldThrowExceptionAssertionError.for_type(
            exception_type, exception
        ) from exception

    if custom:
        raise ShouldThrowExceptionAssertionError(get_message())
    raise ShouldThrowExceptionAssertionError.for_type(exception_type)


def should_throw_an_exception(
    item: E,
    method_to_call: Callable[[E], Any],
) -> BaseException:
    """Call ``method_to_call(item)`` and return the exception it raises.

    Used to assert on exceptions produced by an existing exception value,
    such as a nested cause accessor.
    """
    try:
        method_to_call(item)
    except FluentAssertionError:
        raise
    except Exception as exception:
        return exception
    raise ShouldThrowExceptionAssertionError.for_type(type(item))
