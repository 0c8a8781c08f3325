"""Message dictionary (read-only code to template mapping).

Python 3.13+.
"""

from .dictionary import MessageDictionary

__all__ = ["MessageDictionary"]
