"""Build pipeline requests from a single line of shell input."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .exceptions import PipelineSyntaxError
from .models import (
    DEFAULT_STDERR,
    DEFAULT_STDIN,
    DEFAULT_STDOUT,
    NamedPath,
    PipelineRequest,
    ProcessSpec,
    RedirectMode,
    Redirection,
)
from .text import split_words, trim
from .tokenizer import TokenStream, scan_tokens

logger = logging.getLogger(__name__)

PIPE = "|"
BACKGROUND = "&"

STDIN_OPERATORS = {"<": RedirectMode.NONE}
STDOUT_OPERATORS = {">": RedirectMode.TRUNCATE, ">>": RedirectMode.APPEND}
STDERR_OPERATORS = {"e>": RedirectMode.TRUNCATE, "e>>": RedirectMode.APPEND}
REDIRECT_OPERATORS = frozenset({**STDIN_OPERATORS, **STDOUT_OPERATORS, **STDERR_OPERATORS})


class TokenRole(Enum):
    STAGE_START = "stage-start"
    ARGUMENT = "argument"
    PIPE = "pipe"
    BACKGROUND = "background"
    REDIRECT_OPERATOR = "redirect-operator"
    REDIRECT_TARGET = "redirect-target"


@dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str
    position: int | None = None


def classify_tokens(tokens: list[str]) -> list[TokenRole]:
    """Assign each token exactly one role, looking back a single token.

    The first token and any token right after ``|`` open a new stage no
    matter what they contain. Operators and the token following an operator
    never reach an argument list.
    """
    roles: list[TokenRole] = []
    for idx, token in enumerate(tokens):
        prev = tokens[idx - 1] if idx > 0 else None
        if prev is None or prev == PIPE:
            roles.append(TokenRole.STAGE_START)
        elif token in REDIRECT_OPERATORS:
            roles.append(TokenRole.REDIRECT_OPERATOR)
        elif prev in REDIRECT_OPERATORS:
            roles.append(TokenRole.REDIRECT_TARGET)
        elif token == PIPE:
            roles.append(TokenRole.PIPE)
        elif token == BACKGROUND:
            roles.append(TokenRole.BACKGROUND)
        else:
            roles.append(TokenRole.ARGUMENT)
    return roles


def _find_redirection(
    tokens: list[str],
    operators: dict[str, RedirectMode],
    default: Redirection,
) -> Redirection:
    # First operator/target pair wins; an operator with nothing after it is ignored.
    for idx in range(1, len(tokens)):
        mode = operators.get(tokens[idx - 1])
        if mode is not None:
            return Redirection(NamedPath(tokens[idx]), mode)
    return default


def _build_stages(tokens: list[str], roles: list[TokenRole]) -> tuple[ProcessSpec, ...]:
    stages: list[list[str]] = []
    pipes: list[bool] = []
    for token, role in zip(tokens, roles):
        if role is TokenRole.STAGE_START:
            stages.append([token])
            pipes.append(False)
        elif role is TokenRole.PIPE:
            pipes[-1] = True
        elif role is TokenRole.ARGUMENT:
            stages[-1].append(token)
    return tuple(ProcessSpec(tuple(args), piped) for args, piped in zip(stages, pipes))


def is_foreground(raw_input: str) -> bool:
    """A job runs in the background only when the line ends with ``&``."""
    return not raw_input.rstrip().endswith(BACKGROUND)


def _collect_diagnostics(stream: TokenStream, roles: list[TokenRole]) -> list[Diagnostic]:
    tokens = stream.tokens
    found: list[Diagnostic] = []
    if stream.unterminated is not None:
        found.append(
            Diagnostic(
                "unterminated-quote",
                f"Unterminated quote swallows {stream.unterminated!r}",
                len(tokens),
            )
        )
    # A trailing operator right after another operator is that operator's target.
    if roles and roles[-1] is TokenRole.REDIRECT_OPERATOR and tokens[-2] not in REDIRECT_OPERATORS:
        found.append(
            Diagnostic(
                "missing-target",
                f"Missing redirection target after {tokens[-1]}",
                len(tokens) - 1,
            )
        )
    if roles and roles[-1] is TokenRole.PIPE:
        found.append(Diagnostic("missing-command", "Missing command after pipe", len(tokens) - 1))
    return found


def _scan(command_line: str) -> tuple[str, TokenStream, list[TokenRole]]:
    raw_input = trim(command_line)
    stream = scan_tokens(split_words(raw_input))
    return raw_input, stream, classify_tokens(stream.tokens)


def diagnose(command_line: str) -> list[Diagnostic]:
    """Report the lenient fallbacks *command_line* relies on."""
    _, stream, roles = _scan(command_line)
    return _collect_diagnostics(stream, roles)


def parse_pipeline(command_line: str, *, strict: bool = False) -> PipelineRequest:
    """Parse one line into a :class:`PipelineRequest`.

    Parsing never fails by default: unterminated quotes, trailing operators
    and stray pipes are absorbed or ignored. With ``strict=True`` the first
    such fallback raises :class:`PipelineSyntaxError` instead.
    """
    raw_input, stream, roles = _scan(command_line)
    problems = _collect_diagnostics(stream, roles)
    for problem in problems:
        logger.debug("Lenient parse of %r: %s", raw_input, problem.message)
    if strict and problems:
        raise PipelineSyntaxError(problems[0])

    tokens = stream.tokens
    request = PipelineRequest(
        raw_input=raw_input,
        foreground=is_foreground(raw_input),
        stages=_build_stages(tokens, roles),
        stdin=_find_redirection(tokens, STDIN_OPERATORS, DEFAULT_STDIN),
        stdout=_find_redirection(tokens, STDOUT_OPERATORS, DEFAULT_STDOUT),
        stderr=_find_redirection(tokens, STDERR_OPERATORS, DEFAULT_STDERR),
    )
    logger.debug("Parsed %r into %d stage(s)", raw_input, request.num_processes)
    return request


__all__ = [
    "BACKGROUND",
    "Diagnostic",
    "PIPE",
    "PipelineSyntaxError",
    "REDIRECT_OPERATORS",
    "TokenRole",
    "classify_tokens",
    "diagnose",
    "is_foreground",
    "parse_pipeline",
]
