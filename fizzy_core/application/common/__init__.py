"""Shared building blocks for command and query handlers."""

from fizzy_core.application.common.audit import emit_event_best_effort
from fizzy_core.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)
from fizzy_core.application.common.store_errors import store_errors

__all__ = [
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
    "emit_event_best_effort",
    "store_errors",
]
