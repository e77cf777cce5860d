"""Operational scripts run with ``python -m pokertrack.scripts.<name>``."""
