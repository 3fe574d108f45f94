"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the use cases need from
storage, without specifying HOW it's done.

Subfolders:
- repositories/  → Card, Board, Comment and Event stores

Implementations:
- infrastructure/persistence/  → Prisma client issuing raw SQL (MySQL schema)
- infrastructure/memory/       → In-process tables for tests and local runs
"""
