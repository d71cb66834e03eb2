"""Contract suite construction."""

from dataclasses import dataclass
from typing import Optional

from health_ledger.config import Settings, get_settings
from health_ledger.utils.exceptions import ConfigurationError
from health_ledger.utils.logging import get_logger

from .base import Clock
from .health_data_sharing import HealthDataSharingContract
from .health_marketplace import HealthMarketplaceContract
from .personal_health_data import PersonalHealthDataContract
from .wearable_device import WearableDeviceContract

logger = get_logger(__name__)


@dataclass
class ContractSuite:
    """The four contracts, deployed side by side."""

    data_sharing: HealthDataSharingContract
    marketplace: HealthMarketplaceContract
    personal_health: PersonalHealthDataContract
    wearable: WearableDeviceContract

    def reset(self) -> None:
        """Reset every contract to its freshly deployed state."""
        self.data_sharing.reset()
        self.marketplace.reset()
        self.personal_health.reset()
        self.wearable.reset()


def create_contract_suite(
    settings: Optional[Settings] = None, clock: Optional[Clock] = None
) -> ContractSuite:
    """Deploy a fresh, independent set of contracts.

    The wearable contract consults the personal health data contract's
    grants when a non-patient reads metrics.
    """
    settings = settings or get_settings()
    if not settings.contract_owner.strip():
        raise ConfigurationError("contract_owner must be a non-empty principal")

    personal_health = PersonalHealthDataContract(settings, clock)
    suite = ContractSuite(
        data_sharing=HealthDataSharingContract(settings, clock),
        marketplace=HealthMarketplaceContract(settings, clock),
        personal_health=personal_health,
        wearable=WearableDeviceContract(
            settings, clock, access_checker=personal_health.has_data_access
        ),
    )
    logger.info(
        "Deployed contract suite",
        environment=settings.environment,
        contract_owner=settings.contract_owner,
        privileged_viewers=sorted(settings.privileged_viewers),
    )
    return suite


_contract_suite_instance: Optional[ContractSuite] = None


def get_contract_suite() -> ContractSuite:
    """Get the process-wide contract suite, deploying it on first use."""
    global _contract_suite_instance
    if _contract_suite_instance is None:
        _contract_suite_instance = create_contract_suite()

    return _contract_suite_instance


def reset_contract_suite() -> None:
    """Discard the process-wide suite; the next call deploys a new one."""
    global _contract_suite_instance
    _contract_suite_instance = None
