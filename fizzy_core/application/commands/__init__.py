"""
COMMANDS - Write use cases

- cards/     → create, update, move, close, reopen
- comments/  → add comment
"""
