"""
PokerTrack
==========
Poker session tracker and performance analytics API.
"""

__version__ = "1.0.0"
