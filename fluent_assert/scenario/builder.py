"""Fluent scenario builder.

    (Scenario("adding two numbers")
        .given("a = 2", lambda: values.update(a=2))
        .given("b = 3", lambda: values.update(b=3))
        .when("adding", lambda: values.update(total=values["a"] + values["b"]))
        .should("total 5", lambda: should_be_equal_to(values["total"], 5))
        .verify())
"""

from typing import Any, Callable, Optional

from ..config import RunnerConfig
from ..runner.executor import ScenarioRunner
from .schema import (
    ActionStep,
    ArrangeStep,
    AssertionStep,
    DependencyStep,
    ExceptionConfiguration,
    TestStep,
)


class Scenario:
    """Collects steps for one behavior and verifies them in phase order.

    Steps may be declared in any order; ``verify`` always runs arrange,
    dependency, action, then assertion steps.
    """

    def __init__(self, description: str = "", config: Optional[RunnerConfig] = None):
        self.description = description
        self.config = config or RunnerConfig()
        self.exception_configuration = ExceptionConfiguration()
        self._arrange: list[TestStep] = []
        self._dependencies: list[TestStep] = []
        self._actions: list[TestStep] = []
        self._assertions: list[TestStep] = []
        self._runner = ScenarioRunner(self.config)

    def _step(self, step_cls, description: str, action: Callable[[], Any]) -> TestStep:
        return step_cls(
            description,
            action,
            success_suffix=self.config.success_suffix,
            failure_suffix=self.config.failure_suffix,
        )

    def given(self, description: str, action: Callable[[], Any]) -> "Scenario":
        """Add an arrange step."""
        self._arrange.append(self._step(ArrangeStep, description, action))
        return self

    def expect(self, description: str, check: Callable[[], Any]) -> "Scenario":
        """Add a dependency check run before the action."""
        self._dependencies.append(self._step(DependencyStep, description, check))
        return self

    def when(self, description: str, action: Callable[[], Any]) -> "Scenario":
        """Set the action under test."""
        self._actions.append(self._step(ActionStep, description, action))
        return self

    def should(self, description: str, check: Callable[[], Any]) -> "Scenario":
        """Add an assertion step run after the action."""
        self._assertions.append(self._step(AssertionStep, description, check))
        return self

    def should_throw(
        self,
        exception_type: type,
        message: Optional[str] = None,
    ) -> "Scenario":
        """Require the action to raise exactly ``exception_type``."""
        self.exception_configuration.expected_exception_type = exception_type
        self.exception_configuration.expected_exception_message = message
        return self

    @property
    def steps(self) -> list[TestStep]:
        return self._arrange + self._dependencies + self._actions + self._assertions

    @property
    def last_transcript(self) -> Optional[str]:
        return self._runner.last_transcript

    def verify(self) -> None:
        """Run the scenario.

        Raises:
            ScenarioDefinitionError: The step list is invalid.
            ExpectedExceptionNotThrownError: An exception was expected but the
                action returned normally.
        """
        self._runner.run(self.steps, self.exception_configuration)
        self.exception_configuration.verify()
