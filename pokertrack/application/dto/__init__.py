"""Data Transfer Objects."""
from pokertrack.application.dto.stats_dto import MetaDTO, PaginationDTO, StatsResponseDTO

__all__ = ["MetaDTO", "PaginationDTO", "StatsResponseDTO"]
