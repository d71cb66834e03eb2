"""Shared utilities: logging, exceptions and monitoring."""
