"""Command line entry point: deploy a suite and replay the reference scenarios."""

import argparse
import json
from typing import Any, Dict, List, Optional

from health_ledger.config import Settings, get_settings
from health_ledger.contracts import ContractSuite, create_contract_suite
from health_ledger.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def run_scenarios(suite: ContractSuite) -> Dict[str, Any]:
    """Replay the marketplace, data sharing and access grant scenarios."""
    marketplace = suite.marketplace
    product_id = marketplace.list_product(
        "seller1", "Vitamin C", "High-quality Vitamin C supplement", 1000, 100
    ).value
    order_id = marketplace.place_order("buyer1", product_id, 5).value
    order = marketplace.get_order(order_id).value
    product = marketplace.get_product(product_id).value

    sharing = suite.data_sharing
    sharing.share_anonymized_data("user1", "genetic", "ATCG...")
    sharing.share_anonymized_data("user1", "medical-history", "Patient history...")

    health = suite.personal_health
    health.update_health_record(
        "user1", "ATCG...", "Patient history...", ["Aspirin"], ["Peanuts"]
    )
    health.grant_data_access("user1", "doctor1")
    granted = health.get_health_record("doctor1", "user1")
    health.revoke_data_access("user1", "doctor1")
    revoked = health.get_health_record("doctor1", "user1")

    return {
        "orderId": order_id,
        "totalPrice": order.total_price,
        "remainingStock": product.stock,
        "tokenBalance": sharing.get_token_balance("user1").value,
        "readWithGrant": granted.success,
        "readAfterRevoke": {"success": revoked.success, "error": revoked.error},
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Run the scenarios and print a JSON summary."""
    parser = argparse.ArgumentParser(
        description="Replay reference scenarios against in-process health contracts"
    )
    parser.add_argument(
        "--log-format",
        choices=["console", "json"],
        help="Override the configured log renderer",
    )
    args = parser.parse_args(argv)

    settings: Settings = get_settings()
    if args.log_format:
        settings = settings.model_copy(update={"log_format": args.log_format})
    setup_logging(settings)

    summary = run_scenarios(create_contract_suite(settings))
    logger.info("Scenarios complete", **summary)
    print(json.dumps(summary, indent=2, default=int))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
