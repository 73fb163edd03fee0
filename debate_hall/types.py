"""Shared types and enums for debate scoring."""

from enum import Enum


class Side(Enum):
    """Position an argument supports."""

    FOR = "for"
    AGAINST = "against"


class Winner(Enum):
    """Outcome of a debate, decided by points."""

    FOR = "FOR"
    AGAINST = "AGAINST"
    DRAW = "DRAW"
