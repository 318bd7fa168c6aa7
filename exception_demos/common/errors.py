"""Toolkit errors and failure typing."""


class DemoError(Exception):
    """Base class for failures of the demonstration toolkit itself."""

    error_code = "DEMO_ERROR"


class ConfigError(DemoError):
    """Raised for invalid or missing demonstration settings."""

    error_code = "CONFIG_ERROR"


class ContractError(DemoError):
    """Raised when a function signals a checked fault it did not declare."""

    error_code = "CONTRACT_ERROR"


class MonitorError(DemoError):
    """Raised when a monitored region is built with no clauses and no cleanup."""

    error_code = "MONITOR_ERROR"


class UnreachableClauseError(MonitorError):
    """Raised when an interception clause can never be selected."""

    error_code = "UNREACHABLE_CLAUSE"
