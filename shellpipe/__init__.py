"""shellpipe package: quote-aware parser for job-control shell pipelines."""

from .exceptions import PipelineSyntaxError, ShellpipeError
from .jobs import Job, JobStatus, ProcessState
from .models import (
    NamedPath,
    PipelineRequest,
    ProcessSpec,
    RedirectMode,
    Redirection,
    StandardStream,
)
from .shell_parser import Diagnostic, diagnose, parse_pipeline
from .tokenizer import normalize_tokens, tokenize

__all__ = [
    "parse_pipeline",
    "diagnose",
    "Diagnostic",
    "tokenize",
    "normalize_tokens",
    "PipelineRequest",
    "ProcessSpec",
    "Redirection",
    "RedirectMode",
    "StandardStream",
    "NamedPath",
    "Job",
    "JobStatus",
    "ProcessState",
    "ShellpipeError",
    "PipelineSyntaxError",
]
