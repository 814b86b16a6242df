"""Test factories for admin console documents."""

from .users import UserDocumentFactory

__all__ = [
    "UserDocumentFactory",
]
