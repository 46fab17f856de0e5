"""Parameter type definitions."""

from .user import UserDef

__all__ = ["UserDef"]
