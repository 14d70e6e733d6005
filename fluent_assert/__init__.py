"""Fluent assertions and ordered scenario verification for tests."""

from .exceptions import (
    ExpectedExceptionNotThrownError,
    FluentAssertionError,
    MissingErrorMessageError,
    ScenarioDefinitionError,
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
    WrongExceptionMessageError,
    WrongExceptionTypeError,
)
from .assertions import *  # noqa: F401,F403
from .assertions import __all__ as _assertions_all
from .config import RunnerConfig, load_config, parse_config_data
from .scenario import (
    ExceptionConfiguration,
    ScenarioAction,
    StepType,
    validate_steps,
)
from .runner import ScenarioRunner, verify_scenario
from .scenario.builder import Scenario

__version__ = "0.1.0"

__all__ = [
    "ExpectedExceptionNotThrownError",
    "FluentAssertionError",
    "MissingErrorMessageError",
    "ScenarioDefinitionError",
    "ShouldBeEqualAssertionError",
    "ShouldBeFalseAssertionError",
    "ShouldBeGreaterThanAssertionError",
    "ShouldBeGreaterThanOrEqualToAssertionError",
    "ShouldBeLessThanAssertionError",
    "ShouldBeLessThanOrEqualToAssertionError",
    "ShouldBeNullAssertionError",
    "ShouldBeTrueAssertionError",
    "ShouldNotBeEqualAssertionError",
    "ShouldNotBeNullAssertionError",
    "ShouldThrowExceptionAssertionError",
    "WrongExceptionMessageError",
    "WrongExceptionTypeError",
    "RunnerConfig",
    "load_config",
    "parse_config_data",
    "ExceptionConfiguration",
    "ScenarioAction",
    "StepType",
    "validate_steps",
    "ScenarioRunner",
    "verify_scenario",
    "Scenario",
    *_assertions_all,
]
