"""Runner configuration.

Defaults work without any file; a YAML file can override them:

    runner:
      emit_transcript: true
      transcript_stream: stdout
      success_suffix: " - ok"
      failure_suffix: " - FAILED"
"""

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TextIO, Union

import yaml

DEFAULT_SUCCESS_SUFFIX = " - PASSED"
DEFAULT_FAILURE_SUFFIX = " - FAILED"

VALID_STREAMS = {"stderr", "stdout"}


@dataclass
class RunnerConfig:
    """Configuration for scenario execution."""
    emit_transcript: bool = True
    transcript_stream: str = "stderr"
    success_suffix: str = DEFAULT_SUCCESS_SUFFIX
    failure_suffix: str = DEFAULT_FAILURE_SUFFIX
    validate: bool = True

    def __post_init__(self):
        self.transcript_stream = self.transcript_stream.lower()
        if self.transcript_stream not in VALID_STREAMS:
            raise ValueError(
                f"Invalid transcript_stream '{self.transcript_stream}'. "
                f"Must be one of: {', '.join(sorted(VALID_STREAMS))}"
            )

    @property
    def stream(self) -> TextIO:
        """Resolve the stream at call time so captured streams are honored."""
        if self.transcript_stream == "stdout":
            return sys.stdout
        return sys.stderr


def load_config(file_path: Union[str, Path]) -> RunnerConfig:
    """Load a RunnerConfig from a YAML file.

    Args:
        file_path: Path to the YAML config file.

    Returns:
        Parsed RunnerConfig.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the YAML is malformed or has wrongly typed fields.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Empty config file: {file_path}")

    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: dict, source: str = "<inline>") -> RunnerConfig:
    """Parse a RunnerConfig from a dictionary (already loaded YAML).

    Raises:
        ValueError: If fields are malformed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}")

    runner_data = data.get("runner", {})
    if not isinstance(runner_data, dict):
        raise ValueError(f"'runner' must be a mapping in {source}")

    values: dict[str, Any] = {}
    for f in fields(RunnerConfig):
        if f.name not in runner_data:
            continue
        value = runner_data[f.name]
        expected_type = bool if f.type in (bool, "bool") else str
        if not isinstance(value, expected_type):
            raise ValueError(
                f"Field 'runner.{f.name}' must be {expected_type.__name__}, "
                f"got {type(value).__name__} ({source})"
            )
        values[f.name] = value

    return RunnerConfig(**values)
