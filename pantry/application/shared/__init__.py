"""Shared Application Layer components."""

from .clock import Clock, utc_now
from .command import UNSET, Command, Maybe, is_set
from .handler import CommandHandler, QueryHandler
from .pagination import PaginationDTO, resolve_page
from .query import Query
from .transaction_manager import RepositoryFactory, TransactionCallback, TransactionManager

__all__ = [
    "Command",
    "Query",
    "CommandHandler",
    "QueryHandler",
    "UNSET",
    "Maybe",
    "is_set",
    "TransactionManager",
    "TransactionCallback",
    "RepositoryFactory",
    "PaginationDTO",
    "resolve_page",
    "Clock",
    "utc_now",
]
