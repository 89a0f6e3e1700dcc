"""Execution-side state that the job-control engine attaches to a parse."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .models import PipelineRequest
from .shell_parser import parse_pipeline

UNSET_ID = -1


class JobStatus(Enum):
    RUNNING = "Running"
    STOPPED = "Stopped"


@dataclass(slots=True)
class ProcessState:
    """Mutable bookkeeping for ``request.stages[index]``."""

    index: int
    pid: int | None = None
    pgid: int | None = None
    stopped: bool = False
    completed: bool = False


def _states_for(request: PipelineRequest) -> list[ProcessState]:
    return [ProcessState(index=idx) for idx in range(request.num_processes)]


def _fmt_id(value: int | None) -> str:
    return str(UNSET_ID if value is None else value)


@dataclass
class Job:
    """A parsed pipeline paired with the identifiers assigned while it runs.

    The parser only fills ``request``; ``job_id``, ``status`` and the
    per-stage :class:`ProcessState` entries belong to the execution engine.
    """

    request: PipelineRequest
    job_id: int | None = None
    status: JobStatus = JobStatus.RUNNING
    processes: list[ProcessState] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.processes:
            self.processes = _states_for(self.request)

    @classmethod
    def from_line(cls, line: str, *, strict: bool = False) -> "Job":
        return cls(parse_pipeline(line, strict=strict))

    # ------------------------------------------------------------------
    # Engine-facing mutators
    # ------------------------------------------------------------------
    def assign_job_id(self, pgid: int) -> None:
        """Record the job's process group and stamp it on every stage."""
        self.job_id = pgid
        for proc in self.processes:
            proc.pgid = pgid

    def set_status(self, status: JobStatus | str | None) -> None:
        if status is None:
            return
        self.status = JobStatus(status)

    def reparse(self, line: str) -> "Job":
        """Replace the parsed line in place, keeping ``job_id`` and ``status``."""
        self.request = parse_pipeline(line)
        self.processes = _states_for(self.request)
        return self

    def copy(self) -> "Job":
        # Only job_id and status carry over; stage pgids are not re-stamped.
        return Job(parse_pipeline(self.request.raw_input), job_id=self.job_id, status=self.status)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def foreground(self) -> bool:
        return self.request.foreground

    @property
    def num_pipes(self) -> int:
        return self.request.num_pipes

    @property
    def num_processes(self) -> int:
        return self.request.num_processes

    def is_stopped(self) -> bool:
        return all(proc.stopped or proc.completed for proc in self.processes)

    def is_completed(self) -> bool:
        return all(proc.completed for proc in self.processes)

    def render(self) -> str:
        header = f"JID = {_fmt_id(self.job_id)}, In foreground? {int(self.foreground)}"
        lines = []
        for proc, stage in zip(self.processes, self.request.stages):
            argv = "".join(f"{arg} " for arg in stage.arguments)
            lines.append(
                f"Process {proc.index} (PID/PGID = {_fmt_id(proc.pid)}/{_fmt_id(proc.pgid)}) "
                f"argv: {argv}"
            )
        return header + "\n" + "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, object]:
        data = self.request.to_dict()
        data["job_id"] = self.job_id
        data["status"] = self.status.value
        data["stages"] = [
            {
                **stage.to_dict(),
                "pid": proc.pid,
                "pgid": proc.pgid,
                "stopped": proc.stopped,
                "completed": proc.completed,
            }
            for stage, proc in zip(self.request.stages, self.processes)
        ]
        return data


__all__ = ["Job", "JobStatus", "ProcessState", "UNSET_ID"]
