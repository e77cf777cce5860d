"""
PokerTrack – Shared Kernel
============================
Cross-cutting configuration and logging used by every layer.
"""
