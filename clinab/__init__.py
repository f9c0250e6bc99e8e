"""Mini README: Core package initializer for clinab.

clinab is a command-line client for the You Need A Budget REST API. The
package is split into ``money`` (milliunit conversion and formatting),
``resolution`` (names to identifiers), ``api`` (HTTP transport and endpoint
bindings) and ``interface`` (Typer commands and console output).
"""

from .logging_utils import get_logger

__version__ = "0.1.0"

__all__ = ["__version__", "get_logger"]
