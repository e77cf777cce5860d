"""
PokerTrack – Infrastructure Layer
===================================
Concrete implementations of interfaces.

This package contains:
- persistence/: database (SQLAlchemy async; MySQL or SQLite)
- cache/: short-lived in-memory session snapshot

DEPENDENCY RULE:
This layer implements interfaces defined in:
- domain/repositories/
- application/ports/

It may import from:
- domain/ (entities, interfaces)
- application/ (ports)
- shared/ (config, logging)
"""
