"""Debate scoring, storage and export."""

from .models import Argument, Debate, DebateStats
from .scoring import compute_stats, compute_stats_by_debate
from .types import Side, Winner
from .xml_export import export_debate_xml

__all__ = [
    "Argument",
    "Debate",
    "DebateStats",
    "Side",
    "Winner",
    "compute_stats",
    "compute_stats_by_debate",
    "export_debate_xml",
]
