"""
Password Reset Service Domain Entities
"""

from .store import Store

__all__ = [
    "Store",
]
