"""Exception taxonomy shared by the assertion engine and the scenario runner.

Assertion failures derive from ``FluentAssertionError`` (an ``AssertionError``
so test frameworks report them as failures). Usage errors in the calling
test code derive from ``ValueError`` and are never assertion outcomes.
"""

from typing import Any, Optional

from .messages import (
    build_for,
    first_difference,
    to_displayable_string,
)


class FluentAssertionError(AssertionError):
    """Base class for every assertion failure."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ShouldBeEqualAssertionError(FluentAssertionError):
    @staticmethod
    def create_message(item: Any, expected: Any) -> str:
        if isinstance(item, str) and isinstance(expected, str):
            index = first_difference(item, expected)
            return build_for(
                to_displayable_string(expected, index),
                to_displayable_string(item, index),
            )
        return build_for(to_displayable_string(expected), to_displayable_string(item))


class ShouldNotBeEqualAssertionError(FluentAssertionError):
    @staticmethod
    def create_message(item: Any, expected: Any) -> str:
        return build_for(
            "not " + to_displayable_string(expected),
            to_displayable_string(item),
        )


class ShouldBeTrueAssertionError(FluentAssertionError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(self.create_message() if message is None else message)

    @staticmethod
    def create_message() -> str:
        return build_for("True", "False")


class ShouldBeFalseAssertionError(FluentAssertionError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(self.create_message() if message is None else message)

    @staticmethod
    def create_message() -> str:
        return build_for("False", "True")


class ShouldBeNullAssertionError(FluentAssertionError):
    @staticmethod
    def create_message(actual: str) -> str:
        return build_for("null", actual)


class ShouldNotBeNullAssertionError(FluentAssertionError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(self.create_message() if message is None else message)

    @staticmethod
    def create_message() -> str:
        return build_for("not null", "null")


class ShouldBeGreaterThanAssertionError(FluentAssertionError):
    @staticmethod
    def create_message(expected: str, actual: str) -> str:
        return build_for("greater than " + expected, actual)


class ShouldBeGreaterThanOrEqualToAssertionError(FluentAssertionError):
    @staticmethod
    def create_message(expected: str, actual: str) -> str:
        return build_for("greater than or equal to " + expected, actual)


class ShouldBeLessThanAssertionError(FluentAssertionError):
    @staticmethod
    def create_message(expected: str, actual: str) -> str:
        return build_for("less than " + expected, actual)


class ShouldBeLessThanOrEqualToAssertionError(FluentAssertionError):
    @staticmethod
    def create_message(expected: str, actual: str) -> str:
        return build_for("less than or equal to " + expected, actual)


class ShouldThrowExceptionAssertionError(FluentAssertionError):
    """An action did not raise the exception it was expected to raise."""

    @staticmethod
    def create_message(
        exception_type: type,
        actual_exception: Optional[BaseException] = None,
    ) -> str:
        message = f"  Should have thrown {exception_type.__name__}\n"
        if actual_exception is not None:
            message += (
                f"  But threw {type(actual_exception).__name__}: {actual_exception}\n"
            )
        return message

    @classmethod
    def for_type(
        cls,
        exception_type: type,
        actual_exception: Optional[BaseException] = None,
    ) -> "ShouldThrowExceptionAssertionError":
        return cls(cls.create_message(exception_type, actual_exception))


class ExpectedExceptionNotThrownError(ShouldThrowExceptionAssertionError):
    """A scenario expected its action step to raise, but it returned normally."""


class WrongExceptionTypeError(FluentAssertionError):
    """The action step raised, but not the configured exception type."""

    def __init__(self, expected_type: type, actual_type: type):
        super().__init__(
            f"Expected exception of type {expected_type.__name__} "
            f"but caught type {actual_type.__name__}"
        )
        self.expected_type = expected_type
        self.actual_type = actual_type


class WrongExceptionMessageError(FluentAssertionError):
    """The action step raised the right type with the wrong message."""

    def __init__(self, expected_message: str, actual_message: str):
        super().__init__(
            f"Expected exception message '{expected_message}' "
            f"but had '{actual_message}'"
        )
        self.expected_message = expected_message
        self.actual_message = actual_message


class MissingErrorMessageError(ValueError):
    """An error message argument was explicitly passed as None."""

    def __init__(self, argument: str = "error_message"):
        super().__init__(
            f"{argument}: the message or method used to get the error message cannot be None"
        )
        self.argument = argument


class ScenarioDefinitionError(ValueError):
    """A scenario's step list is structurally invalid and was not run."""

    def __init__(self, validation_result):
        super().__init__(f"Invalid scenario: {validation_result}")
        self.validation_result = validation_result
