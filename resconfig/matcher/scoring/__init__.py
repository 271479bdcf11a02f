# Path: resconfig/matcher/scoring/__init__.py
"""
Matcher Scoring

Per-axis preference between candidates that all match the reference.
"""

from .tiebreaker import QualifierTiebreaker

__all__ = ['QualifierTiebreaker']
