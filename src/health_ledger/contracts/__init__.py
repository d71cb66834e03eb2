"""Contract layer: one class per deployed contract."""

from .base import LedgerContract
from .factory import (
    ContractSuite,
    create_contract_suite,
    get_contract_suite,
    reset_contract_suite,
)
from .health_data_sharing import HealthDataSharingContract
from .health_marketplace import HealthMarketplaceContract
from .personal_health_data import PersonalHealthDataContract
from .wearable_device import WearableDeviceContract

__all__ = [
    "ContractSuite",
    "HealthDataSharingContract",
    "HealthMarketplaceContract",
    "LedgerContract",
    "PersonalHealthDataContract",
    "WearableDeviceContract",
    "create_contract_suite",
    "get_contract_suite",
    "reset_contract_suite",
]
