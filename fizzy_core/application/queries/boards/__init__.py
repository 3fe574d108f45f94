"""Board queries."""

from .list_board_columns import ListBoardColumnsHandler, ListBoardColumnsQuery
from .list_boards import ListBoardsHandler, ListBoardsQuery

__all__ = [
    "ListBoardColumnsHandler",
    "ListBoardColumnsQuery",
    "ListBoardsHandler",
    "ListBoardsQuery",
]
