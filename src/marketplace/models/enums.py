"""Shared enums for models."""

from enum import Enum


class JoinStatus(str, Enum):
    """Status of a user's participation in a joined project."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
