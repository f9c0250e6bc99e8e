"""Mini README: Command-line interface for clinab.

``cli`` defines the Typer application, ``commands`` holds one module per
command group, ``session`` carries per-invocation state and ``output``
renders tables, details and JSON.
"""

from .cli import app
from .output import Column, OutputRenderer
from .session import CommandSession

__all__ = ["Column", "CommandSession", "OutputRenderer", "app"]
