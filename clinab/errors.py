"""Mini README: Exception hierarchy shared by clinab components.

Structure:
    * ClinabError - base class caught by the CLI and rendered for the user.
    * ConfigurationError - missing or unusable runtime configuration.
    * InvalidAmountError - a user-typed amount is not a decimal number.

Component specific errors (``ApiError`` in ``clinab.api.client`` and
``EntityNotFoundError`` in ``clinab.resolution.resolver``) derive from
``ClinabError`` as well so a single handler covers every expected failure.
"""

from __future__ import annotations


class ClinabError(Exception):
    """Base class for failures that should be reported as plain sentences."""


class ConfigurationError(ClinabError):
    """Raised when required configuration (such as the API token) is absent."""


class InvalidAmountError(ClinabError, ValueError):
    """Raised when an amount string cannot be converted to milliunits."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f'Invalid amount "{text}". Use a decimal number such as 12.34 or -85.50.'
        )
        self.text = text
