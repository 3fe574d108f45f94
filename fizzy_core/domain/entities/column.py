"""
Column Entity - An ordered lane within a board.
"""

from dataclasses import dataclass

from fizzy_core.domain.value_objects.fizzy_id import FizzyId

_COLOR_MARKERS = {
    "red": "🔴",
    "orange": "🟠",
    "yellow": "🟡",
    "green": "🟢",
    "blue": "🔵",
    "purple": "🟣",
    "gray": "⚪",
    "grey": "⚪",
}


@dataclass
class Column:
    id: FizzyId
    account_id: FizzyId
    board_id: FizzyId
    name: str
    color: str
    position: int

    def formatted_name(self) -> str:
        marker = _COLOR_MARKERS.get(self.color.lower(), "⬜")
        return f"{marker} {self.name}"
