"""
fizzy-core - persistence and use-case layer behind the Fizzy chat bot.
"""

__version__ = "0.1.0"
