"""Health Ledger test suite.

Every contract is exercised through its public operations only; tests
inspect the returned ContractResult values and the records the read
operations hand back.
"""
