"""Card queries."""

from .get_card_details import CardDetails, GetCardDetailsHandler, GetCardDetailsQuery
from .list_board_cards import BoardCards, ListBoardCardsHandler, ListBoardCardsQuery
from .list_card_comments import ListCardCommentsHandler, ListCardCommentsQuery
from .list_my_cards import ListMyCardsHandler, ListMyCardsQuery

__all__ = [
    "BoardCards",
    "CardDetails",
    "GetCardDetailsHandler",
    "GetCardDetailsQuery",
    "ListBoardCardsHandler",
    "ListBoardCardsQuery",
    "ListCardCommentsHandler",
    "ListCardCommentsQuery",
    "ListMyCardsHandler",
    "ListMyCardsQuery",
]
