"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- dto/       → Data Transfer Objects for the chat facade
- common/    → Shared interfaces, error translation, best-effort audit
- errors.py  → Caller-facing error kinds

Rules:
- Depends on Domain layer only
- No chat/transport code here
- Every mutating handler: authorize → resolve → mutate → audit → return
"""
