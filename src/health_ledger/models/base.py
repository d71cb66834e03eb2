"""Base model for contract records."""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class LedgerRecord(BaseModel):
    """Common configuration for every stored record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Dump with the contract's camelCase field names."""
        return self.model_dump(by_alias=True)
