"""
QUERIES - Read use cases

- cards/   → my cards, board cards, card details, card comments
- boards/  → accessible boards, board columns
"""
