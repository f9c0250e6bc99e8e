"""Mini README: REST API access for clinab.

``client`` holds the authenticated HTTP transport, ``endpoints`` binds each
REST endpoint to a method, and ``models`` enumerates request field values.
"""

from .client import ApiError, YnabClient
from .endpoints import YnabApi
from .models import (
    ASSET_ACCOUNT_TYPES,
    AccountType,
    ClearedStatus,
    FlagColor,
    Frequency,
    TransactionFilter,
)

__all__ = [
    "ASSET_ACCOUNT_TYPES",
    "AccountType",
    "ApiError",
    "ClearedStatus",
    "FlagColor",
    "Frequency",
    "TransactionFilter",
    "YnabApi",
    "YnabClient",
]
