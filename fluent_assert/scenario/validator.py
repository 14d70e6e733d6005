"""Scenario validator.

Checks a step list before execution so that malformed scenarios fail as
usage errors instead of as misleading assertion failures.
"""

from typing import Optional, Sequence

from .schema import (
    PHASE_ORDER,
    ExceptionConfiguration,
    StepType,
    TestStep,
    ValidationError,
    ValidationResult,
)


def validate_steps(
    steps: Sequence[TestStep],
    exception_configuration: Optional[ExceptionConfiguration] = None,
) -> ValidationResult:
    """Validate an ordered step list.

    Checks:
    - Exactly one action step
    - Steps appear in arrange, dependency, action, assertion order
    - Every step has a description and a callable action
    - The expected exception type, if any, is an Exception subclass

    Args:
        steps: Steps in the order they will execute.
        exception_configuration: Exception expectations for the action step.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    _validate_action_count(steps, errors)
    _validate_order(steps, errors)
    _validate_steps(steps, errors)

    if exception_configuration is not None:
        _validate_exception_configuration(exception_configuration, errors, warnings)

    # Warn if no assertions
    if not any(step.step_type == StepType.ASSERTION for step in steps):
        expects_exception = (
            exception_configuration is not None and exception_configuration.expect_exception
        )
        if not expects_exception:
            warnings.append(ValidationError(
                path="steps",
                message="No assertion steps defined. Scenario will pass without verification.",
            ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _validate_action_count(
    steps: Sequence[TestStep],
    errors: list[ValidationError],
) -> None:
    count = sum(1 for step in steps if step.step_type == StepType.ACTION)
    if count != 1:
        errors.append(ValidationError(
            path="steps",
            message=f"Scenario requires exactly one action step, got {count}.",
        ))


def _validate_order(
    steps: Sequence[TestStep],
    errors: list[ValidationError],
) -> None:
    """Phases must not go backwards."""
    highest = 0
    for i, step in enumerate(steps):
        phase = PHASE_ORDER.index(step.step_type)
        if phase < highest:
            errors.append(ValidationError(
                path=f"steps[{i}]",
                message=(
                    f"'{step.step_type.value}' step cannot follow a "
                    f"'{PHASE_ORDER[highest].value}' step."
                ),
            ))
        highest = max(highest, phase)


def _validate_steps(
    steps: Sequence[TestStep],
    errors: list[ValidationError],
) -> None:
    for i, step in enumerate(steps):
        path = f"steps[{i}]"

        if not step.description:
            errors.append(ValidationError(
                path=f"{path}.description",
                message=f"'{step.step_type.value}' step requires a description.",
            ))

        if not callable(step.action):
            errors.append(ValidationError(
                path=f"{path}.action",
                message=f"'{step.step_type.value}' step action must be callable.",
            ))


def _validate_exception_configuration(
    configuration: ExceptionConfiguration,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    expected_type = configuration.expected_exception_type
    if expected_type is not None and not (
        isinstance(expected_type, type) and issubclass(expected_type, Exception)
    ):
        errors.append(ValidationError(
            path="exception.type",
            message=f"Expected exception type must be an exception class, got {expected_type!r}.",
        ))

    if expected_type is None and configuration.expect_exception_message:
        warnings.append(ValidationError(
            path="exception.message",
            message="Expected exception message is ignored without an expected exception type.",
        ))
