"""Runner module - scenario step execution."""

from .executor import ScenarioRunner, StepExecutor, build_steps, verify_scenario
from .transcript import Transcript

__all__ = [
    "ScenarioRunner",
    "StepExecutor",
    "build_steps",
    "verify_scenario",
    "Transcript",
]
