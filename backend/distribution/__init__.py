"""
Recipient matching and distribution for approved publications.

This module handles:
- Parsing and serializing semicolon-delimited tag sets
- Matching publications against customer subscription profiles
- Running distribution for an approved publication (distribution.orchestrator)
- Re-sending logged notifications (distribution.resend)
"""

from .tag_sets import join_tag_set, parse_tag_set
from .matcher import describe_match, matches

__all__ = [
    'parse_tag_set',
    'join_tag_set',
    'matches',
    'describe_match',
]
