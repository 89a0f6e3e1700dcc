"""Custom exceptions for shellpipe."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shell_parser import Diagnostic


class ShellpipeError(ValueError):
    """Base error for shellpipe."""


class PipelineSyntaxError(ShellpipeError):
    """Raised by strict parsing when a line relies on a lenient fallback."""

    def __init__(self, diagnostic: "Diagnostic") -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


__all__ = ["ShellpipeError", "PipelineSyntaxError"]
