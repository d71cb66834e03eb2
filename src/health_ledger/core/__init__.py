"""Core Module.

Building blocks shared by every contract: id allocation, keyed record
tables, relationship permissions, the token ledger and the operation gate.
"""

from .gate import Decision, authorize
from .ids import SequentialIdAllocator
from .ledger import Balance, TokenLedger
from .patch import CLEAR, KEEP, apply_optional
from .permissions import PermissionTable
from .result import ContractResult, ErrorCode
from .table import KeyedRecordTable

__all__ = [
    "Balance",
    "CLEAR",
    "KEEP",
    "ContractResult",
    "Decision",
    "ErrorCode",
    "KeyedRecordTable",
    "PermissionTable",
    "SequentialIdAllocator",
    "TokenLedger",
    "apply_optional",
    "authorize",
]
