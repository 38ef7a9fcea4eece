"""Matcher Module - Ranking and urgency analysis over scored matches."""
from core.matcher.service import MatchFinder
from core.matcher.urgency import UrgencyAnalyzer

__all__ = ['MatchFinder', 'UrgencyAnalyzer']
