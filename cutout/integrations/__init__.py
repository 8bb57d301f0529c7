"""Integration check helpers."""

from .checks import (
    IntegrationCheckResult,
    check_removebg,
    run_all_checks,
)

__all__ = [
    "IntegrationCheckResult",
    "check_removebg",
    "run_all_checks",
]
