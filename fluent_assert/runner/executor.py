"""Scenario executor - runs an ordered list of steps.

Execution order is fixed:
1. Arrange steps
2. Dependency steps
3. The action step
4. Assertion steps

The first failing step stops the run. Its transcript is written to the
configured diagnostic stream and the failure propagates to the caller.
"""

import logging
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from ..config import DEFAULT_FAILURE_SUFFIX, DEFAULT_SUCCESS_SUFFIX, RunnerConfig
from ..exceptions import (
    FluentAssertionError,
    ScenarioDefinitionError,
    WrongExceptionMessageError,
    WrongExceptionTypeError,
)
from ..scenario.schema import (
    ActionStep,
    ArrangeStep,
    AssertionStep,
    DependencyStep,
    ExceptionConfiguration,
    ScenarioAction,
    StepType,
    TestStep,
)
from ..scenario.validator import validate_steps
from .transcript import Transcript

logger = logging.getLogger(__name__)

ActionLike = Union[ScenarioAction, tuple]


class StepExecutor:
    """Runs single steps against one scenario's transcript."""

    def __init__(
        self,
        transcript: Transcript,
        exception_configuration: ExceptionConfiguration,
        config: RunnerConfig,
    ):
        self.transcript = transcript
        self.exception_configuration = exception_configuration
        self.config = config

    def verify(self, step: TestStep) -> None:
        """Run a step and record its outcome.

        Raises:
            Exception: Whatever the step raised, unchanged, unless it is the
                action step and an exception is expected. Assertion failures
                of this library always pass through unchanged.
            WrongExceptionTypeError: The action raised an unexpected type.
            WrongExceptionMessageError: The action raised the expected type
                with a different message.
        """
        self.transcript.append(step.title)
        logger.debug("Running %s step: %s", step.step_type.value, step.description)

        try:
            step.action()
        except Exception as e:
            expects_exception = (
                step.step_type == StepType.ACTION
                and self.exception_configuration.expect_exception
            )
            if not expects_exception:
                self._fail(step)
                raise

            self._check_expected_exception(step, e)
            self.exception_configuration.caught_expected_exception()
            logger.debug("Caught expected %s", type(e).__name__)

        self.transcript.append_line(step.success_suffix)

    def _check_expected_exception(self, step: TestStep, e: Exception) -> None:
        configuration = self.exception_configuration
        expected_type = configuration.expected_exception_type

        if type(e) is not expected_type:
            self._fail(step)
            if isinstance(e, FluentAssertionError):
                raise e
            raise WrongExceptionTypeError(expected_type, type(e)) from e

        if configuration.expect_exception_message:
            if str(e) != configuration.expected_exception_message:
                self._fail(step)
                raise WrongExceptionMessageError(
                    configuration.expected_exception_message, str(e)
                ) from e

    def _fail(self, step: TestStep) -> None:
        self.transcript.append_line(step.failure_suffix)
        logger.info("Scenario failed at %s step: %s", step.step_type.value, step.description)
        if self.config.emit_transcript:
            print(self.transcript.text, file=self.config.stream)


class ScenarioRunner:
    """Runs scenarios with a shared configuration.

    Each run gets a fresh transcript; nothing carries over between runs.
    """

    def __init__(self, config: Optional[RunnerConfig] = None):
        self.config = config or RunnerConfig()
        self.last_transcript: Optional[str] = None

    def run(
        self,
        steps: Sequence[TestStep],
        exception_configuration: Optional[ExceptionConfiguration] = None,
    ) -> None:
        """Execute steps in order.

        An expected exception that never occurred is not reported here;
        call ``exception_configuration.verify()`` afterwards.

        Raises:
            ScenarioDefinitionError: If validation is enabled and fails.
        """
        exception_configuration = exception_configuration or ExceptionConfiguration()

        if self.config.validate:
            validation = validate_steps(steps, exception_configuration)
            if not validation.valid:
                raise ScenarioDefinitionError(validation)
            for warning in validation.warnings:
                logger.warning("%s", warning)

        exception_configuration.reset()
        transcript = Transcript()
        executor = StepExecutor(transcript, exception_configuration, self.config)
        self.last_transcript = None

        try:
            for step in steps:
                executor.verify(step)
        except Exception:
            self.last_transcript = transcript.text
            raise

        logger.debug("Scenario passed (%d steps)", len(steps))

    def verify(
        self,
        action_description: str,
        arrange_actions: Iterable[ActionLike],
        action: Callable[[], Any],
        dependency_actions: Iterable[ActionLike],
        assertions: Iterable[ActionLike],
        exception_configuration: Optional[ExceptionConfiguration] = None,
    ) -> None:
        """Build the step list from described actions and run it."""
        steps = build_steps(
            action_description,
            arrange_actions,
            action,
            dependency_actions,
            assertions,
            success_suffix=self.config.success_suffix,
            failure_suffix=self.config.failure_suffix,
        )
        self.run(steps, exception_configuration)


def build_steps(
    action_description: str,
    arrange_actions: Iterable[ActionLike],
    action: Callable[[], Any],
    dependency_actions: Iterable[ActionLike],
    assertions: Iterable[ActionLike],
    success_suffix: str = DEFAULT_SUCCESS_SUFFIX,
    failure_suffix: str = DEFAULT_FAILURE_SUFFIX,
) -> list[TestStep]:
    """Assemble steps in execution order."""
    suffixes = {"success_suffix": success_suffix, "failure_suffix": failure_suffix}

    steps: list[TestStep] = [
        ArrangeStep(a.description, a.action, **suffixes)
        for a in map(ScenarioAction.coerce, arrange_actions)
    ]
    steps.extend(
        DependencyStep(d.description, d.action, **suffixes)
        for d in map(ScenarioAction.coerce, dependency_actions)
    )
    steps.append(ActionStep(action_description, action, **suffixes))
    steps.extend(
        AssertionStep(a.description, a.action, **suffixes)
        for a in map(ScenarioAction.coerce, assertions)
    )
    return steps


def verify_scenario(
    action_description: str,
    arrange_actions: Iterable[ActionLike],
    action: Callable[[], Any],
    dependency_actions: Iterable[ActionLike],
    assertions: Iterable[ActionLike],
    exception_configuration: Optional[ExceptionConfiguration] = None,
    config: Optional[RunnerConfig] = None,
) -> None:
    """Run a scenario once with a throwaway runner."""
    ScenarioRunner(config).verify(
        action_description,
        arrange_actions,
        action,
        dependency_actions,
        assertions,
        exception_configuration,
    )
