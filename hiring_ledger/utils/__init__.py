"""
Helpers for loading mutation logs.
"""

from hiring_ledger.utils.oplog import (
    MUTATIONS,
    Operation,
    OperationLog,
    OperationLogError,
    load_operations,
    parse_operations,
)

__all__ = [
    "MUTATIONS",
    "Operation",
    "OperationLog",
    "OperationLogError",
    "load_operations",
    "parse_operations",
]
