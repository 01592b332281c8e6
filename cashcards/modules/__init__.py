"""Feature modules and their public exports."""

from . import accounts, cards

__all__ = ["accounts", "cards"]
