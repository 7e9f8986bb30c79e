"""SQLAlchemy models."""
from messagely.models.user import User
from messagely.models.message import Message

__all__ = ["User", "Message"]
