"""Prometheus metrics for contract calls."""

from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter

CONTRACT_CALLS_METRIC = "ledger_contract_calls"


def _build_contract_calls(registry: CollectorRegistry) -> Counter:
    try:
        return Counter(
            CONTRACT_CALLS_METRIC,
            "Total number of contract operations by outcome",
            ["contract", "operation", "outcome"],
            registry=registry,
        )
    except ValueError:
        # Already registered (module reloaded), reuse the existing collector
        # Access internal registry structure - pylint: disable=protected-access
        existing: Counter = registry._names_to_collectors[CONTRACT_CALLS_METRIC]
        return existing


contract_calls_total = _build_contract_calls(REGISTRY)


def record_contract_call(
    contract: str, operation: str, error_code: Optional[int] = None
) -> None:
    """Count one contract operation; ``error_code`` is None on success."""
    outcome = "success" if error_code is None else str(int(error_code))
    contract_calls_total.labels(
        contract=contract, operation=operation, outcome=outcome
    ).inc()


def get_contract_call_count(
    contract: str, operation: str, outcome: str = "success"
) -> float:
    """Read back the current counter value (0.0 if never incremented)."""
    value = REGISTRY.get_sample_value(
        f"{CONTRACT_CALLS_METRIC}_total",
        {"contract": contract, "operation": operation, "outcome": outcome},
    )
    return value or 0.0
