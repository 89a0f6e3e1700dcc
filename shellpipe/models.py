"""Immutable parse results: stages, redirections and pipeline requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class StandardStream(Enum):
    """Default redirection targets, one per standard stream."""

    STDIN = "STDIN_FILENO"
    STDOUT = "STDOUT_FILENO"
    STDERR = "STDERR_FILENO"


@dataclass(frozen=True)
class NamedPath:
    path: str

    def __str__(self) -> str:
        return self.path


RedirectTarget = StandardStream | NamedPath


class RedirectMode(Enum):
    NONE = ""
    TRUNCATE = "truncate"
    APPEND = "append"


@dataclass(frozen=True)
class Redirection:
    """Where one standard stream reads from or writes to."""

    target: RedirectTarget
    mode: RedirectMode = RedirectMode.NONE

    @property
    def is_default(self) -> bool:
        return isinstance(self.target, StandardStream)

    @property
    def path(self) -> str | None:
        if isinstance(self.target, NamedPath):
            return self.target.path
        return None

    def to_dict(self) -> dict[str, object]:
        return {
            "target": self.path if self.path is not None else self.target.value,
            "mode": self.mode.value or None,
            "default": self.is_default,
        }


DEFAULT_STDIN = Redirection(StandardStream.STDIN)
DEFAULT_STDOUT = Redirection(StandardStream.STDOUT)
DEFAULT_STDERR = Redirection(StandardStream.STDERR)


@dataclass(frozen=True)
class ProcessSpec:
    """One stage of a pipeline; ``arguments[0]`` is the program name."""

    arguments: tuple[str, ...]
    has_pipe_to_next: bool = False

    @property
    def name(self) -> str:
        return self.arguments[0]

    def to_dict(self) -> dict[str, object]:
        return {"arguments": list(self.arguments), "has_pipe_to_next": self.has_pipe_to_next}


@dataclass(frozen=True)
class PipelineRequest:
    """Parsed form of one input line."""

    raw_input: str
    foreground: bool = True
    stages: tuple[ProcessSpec, ...] = field(default_factory=tuple)
    stdin: Redirection = DEFAULT_STDIN
    stdout: Redirection = DEFAULT_STDOUT
    stderr: Redirection = DEFAULT_STDERR

    @property
    def num_processes(self) -> int:
        return len(self.stages)

    @property
    def num_pipes(self) -> int:
        return sum(1 for stage in self.stages if stage.has_pipe_to_next)

    def to_dict(self) -> dict[str, object]:
        return {
            "raw_input": self.raw_input,
            "foreground": self.foreground,
            "stages": [stage.to_dict() for stage in self.stages],
            "stdin": self.stdin.to_dict(),
            "stdout": self.stdout.to_dict(),
            "stderr": self.stderr.to_dict(),
        }


__all__ = [
    "DEFAULT_STDERR",
    "DEFAULT_STDIN",
    "DEFAULT_STDOUT",
    "NamedPath",
    "PipelineRequest",
    "ProcessSpec",
    "RedirectMode",
    "RedirectTarget",
    "Redirection",
    "StandardStream",
]
