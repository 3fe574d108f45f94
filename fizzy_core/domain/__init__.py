"""
DOMAIN LAYER - Cards, boards, columns and comments of a Fizzy account

This layer contains:
- Entities: Business objects with identity (Card, Board, Column, Comment)
- Value Objects: Immutable types (FizzyId, CardStatus)
- Ports: Interfaces that the persistence layer implements
- Exceptions: Store-level errors

RULES:
1. NO framework imports (no Prisma, Pydantic, dishka, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
