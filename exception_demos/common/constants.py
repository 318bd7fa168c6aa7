"""Application constants."""

LOGGER_NAME = "exception_demos"
DEMO_NAMES = (
    "try-catch",
    "multi-catch",
    "clause-order",
    "nested-try",
    "nested-try-call",
    "rethrow",
    "declared-faults",
    "cleanup",
    "propagation",
    "checked-throws",
    "custom-fault",
    "unhandled",
)
EXIT_SUCCESS = 0
EXIT_UNHANDLED_FAULT = 1
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20
HEADING_RULE = "-" * 43
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "demo",
    "event",
    "status",
    "fault_kind",
    "clause_kind",
    "error_code",
    "duration_ms",
    "message",
)
