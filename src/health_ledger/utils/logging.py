"""Logging configuration for Health Ledger."""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory

from health_ledger.config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure structured logging for the application."""
    settings = settings or get_settings()

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper()),
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            render_processor(settings),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def render_processor(settings: Optional[Settings] = None) -> Any:
    """Choose renderer based on settings."""
    settings = settings or get_settings()

    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    else:
        return structlog.dev.ConsoleRenderer()


def get_logger(name: str) -> BoundLogger:
    """Get a configured logger instance."""
    bound_logger: BoundLogger = structlog.get_logger(name)
    return bound_logger


class AuditLogger:
    """Logger for the access trail of gated contract operations."""

    def __init__(self) -> None:
        """Initialize audit logger."""
        self.logger = get_logger("audit")

    def log_access(
        self, principal: str, contract: str, resource_id: Any, action: str
    ) -> None:
        """Log an allowed read or write of a record."""
        self.logger.info(
            "resource_accessed",
            principal=principal,
            contract=contract,
            resource_id=resource_id,
            action=action,
        )

    def log_denied(
        self,
        principal: str,
        contract: str,
        resource_id: Any,
        action: str,
        error_code: int,
        reason: str,
    ) -> None:
        """Log an operation refused by the operation gate."""
        self.logger.warning(
            "access_denied",
            principal=principal,
            contract=contract,
            resource_id=resource_id,
            action=action,
            error_code=error_code,
            reason=reason,
        )

    def log_data_change(
        self,
        principal: str,
        contract: str,
        resource_id: Any,
        action: str,
        old_value: Any = None,
        new_value: Any = None,
    ) -> None:
        """Log a record mutation."""
        self.logger.info(
            "data_modified",
            principal=principal,
            contract=contract,
            resource_id=resource_id,
            action=action,
            old_value=old_value,
            new_value=new_value,
        )


audit_logger = AuditLogger()
