"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Prisma repositories issuing raw SQL against the Fizzy schema
- memory/: In-memory repositories with the same semantics

Nothing is re-exported here: importing persistence pulls in no Prisma client,
but the container only wires the backend that STORE_BACKEND selects.
"""
