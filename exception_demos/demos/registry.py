"""Catalogue of demonstrations by name."""

from __future__ import annotations

from exception_demos.demos import (
    checked_throws,
    cleanup,
    clause_order,
    custom_fault,
    declared_faults,
    multi_catch,
    nested_try,
    nested_try_call,
    propagation,
    rethrow,
    try_catch,
    unhandled,
)
from exception_demos.demos.context import DemoFn

DEMOS: dict[str, DemoFn] = {
    module.NAME: module.run
    for module in (
        try_catch,
        multi_catch,
        clause_order,
        nested_try,
        nested_try_call,
        rethrow,
        declared_faults,
        cleanup,
        propagation,
        checked_throws,
        custom_fault,
        unhandled,
    )
}
