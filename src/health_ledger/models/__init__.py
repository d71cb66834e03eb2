"""Record models stored by the contracts.

Every model dumps to the camelCase field names used by the on-chain
contracts (``patientId``, ``totalPrice``, ...) via ``to_dict()``.
"""

from .base import LedgerRecord
from .data_sharing import SharedDataRecord
from .marketplace import Order, OrderStatus, Product
from .personal_health import HealthRecord
from .wearable import DeviceRegistration, HealthMetrics

__all__ = [
    "DeviceRegistration",
    "HealthMetrics",
    "HealthRecord",
    "LedgerRecord",
    "Order",
    "OrderStatus",
    "Product",
    "SharedDataRecord",
]
