"""Scenario module - step models and validation.

The fluent builder lives in ``scenario.builder`` and depends on the runner.
"""

from .schema import (
    ActionStep,
    ArrangeStep,
    AssertionStep,
    DependencyStep,
    ExceptionConfiguration,
    ScenarioAction,
    StepType,
    TestStep,
    ValidationError,
    ValidationResult,
)
from .validator import validate_steps

__all__ = [
    "ActionStep",
    "ArrangeStep",
    "AssertionStep",
    "DependencyStep",
    "ExceptionConfiguration",
    "ScenarioAction",
    "StepType",
    "TestStep",
    "ValidationError",
    "ValidationResult",
    "validate_steps",
]
