"""GitHub Actions adapter for the file check."""

from .core import ActionContext, ActionInputError, WorkflowCommandHandler
from .main import run

__all__ = [
    "ActionContext",
    "ActionInputError",
    "WorkflowCommandHandler",
    "run",
]
