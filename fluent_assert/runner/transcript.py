"""Scenario transcript.

Accumulates one line per executed step: the step title followed by its
success or failure suffix.
"""

from dataclasses import dataclass, field


@dataclass
class Transcript:
    """Append-only narrative of a single scenario run."""
    parts: list[str] = field(default_factory=list)

    def append(self, text: str) -> None:
        """Append text to the current line."""
        self.parts.append(text)

    def append_line(self, text: str = "") -> None:
        """Append text and terminate the current line."""
        self.parts.append(text)
        self.parts.append("\n")

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()

    @property
    def text(self) -> str:
        return "".join(self.parts)

    def __str__(self) -> str:
        return self.text
