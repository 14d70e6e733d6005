"""Scenario data models.

Defines the step types a scenario is built from and the per-scenario
exception configuration consulted around the action step.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Optional, Union

from ..config import DEFAULT_FAILURE_SUFFIX, DEFAULT_SUCCESS_SUFFIX
from ..exceptions import ExpectedExceptionNotThrownError


class StepType(str, Enum):
    """Scenario step kinds, in execution order."""
    ARRANGE = "arrange"
    DEPENDENCY = "dependency"
    ACTION = "action"
    ASSERTION = "assertion"


PHASE_ORDER = [StepType.ARRANGE, StepType.DEPENDENCY, StepType.ACTION, StepType.ASSERTION]


@dataclass
class ScenarioAction:
    """A described callable supplied by the scenario author."""
    description: str
    action: Callable[[], Any]

    @classmethod
    def coerce(cls, value: Union["ScenarioAction", tuple]) -> "ScenarioAction":
        """Accept either a ScenarioAction or a ``(description, action)`` pair."""
        if isinstance(value, ScenarioAction):
            return value
        description, action = value
        return cls(description=description, action=action)


@dataclass
class TestStep:
    """A single executable scenario step."""
    __test__ = False

    step_type: ClassVar[StepType]
    prefix: ClassVar[str] = ""

    description: str
    action: Callable[[], Any]
    success_suffix: str = DEFAULT_SUCCESS_SUFFIX
    failure_suffix: str = DEFAULT_FAILURE_SUFFIX

    @property
    def title(self) -> str:
        """Description as written to the transcript."""
        return f"{self.prefix}{self.description}"


@dataclass
class ArrangeStep(TestStep):
    """Sets up a parameter the action depends on."""
    step_type: ClassVar[StepType] = StepType.ARRANGE
    prefix: ClassVar[str] = "With "


@dataclass
class DependencyStep(TestStep):
    """Verifies a precondition before the action runs."""
    step_type: ClassVar[StepType] = StepType.DEPENDENCY
    prefix: ClassVar[str] = "Expect "


@dataclass
class ActionStep(TestStep):
    """The behavior under test. Exactly one per scenario."""
    step_type: ClassVar[StepType] = StepType.ACTION
    prefix: ClassVar[str] = "When "


@dataclass
class AssertionStep(TestStep):
    """Verifies an outcome after the action ran."""
    step_type: ClassVar[StepType] = StepType.ASSERTION
    prefix: ClassVar[str] = "Should "


@dataclass
class ExceptionConfiguration:
    """Whether, and which, exception the action step must raise."""
    expected_exception_type: Optional[type] = None
    expected_exception_message: Optional[str] = None
    caught: bool = False

    @property
    def expect_exception(self) -> bool:
        return self.expected_exception_type is not None

    @property
    def expect_exception_message(self) -> bool:
        return self.expected_exception_message is not None

    def caught_expected_exception(self) -> None:
        self.caught = True

    def reset(self) -> None:
        self.caught = False

    def verify(self) -> None:
        """Raise if an exception was expected but the action never raised it.

        Raises:
            ExpectedExceptionNotThrownError: When expected and not caught.
        """
        if self.expect_exception and not self.caught:
            raise ExpectedExceptionNotThrownError(
                ExpectedExceptionNotThrownError.create_message(self.expected_exception_type)
            )


@dataclass
class ValidationError:
    """One problem found in a step list, located by ``path``."""
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Errors and warnings collected by ``validate_steps``."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            return "Valid"
        return "; ".join(str(e) for e in self.errors)
