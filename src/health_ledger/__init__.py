"""Health Ledger Contracts.

In-process stand-ins for the health data sharing, health marketplace,
personal health data and wearable device integration contracts. Every
contract is an ownership-gated keyed record store with relationship-based
access control; see :mod:`health_ledger.core`.
"""

__version__ = "0.1.0"
