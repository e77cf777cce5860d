"""
Dependency Injection Container.

Holds the instances of repositories, the session cache, the analytics
engine and builds the use cases.

Clean Architecture: the container lives in the outermost layer and is the
only place where concrete dependencies are created.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

# Domain
from pokertrack.domain.repositories.session_repository import ISessionRepository
from pokertrack.domain.services.session_analytics import SessionAnalytics

# Application Ports
from pokertrack.application.ports.session_cache import ISessionCache

# Shared
from pokertrack.shared.config.settings import Settings


@dataclass
class Container:
    """
    Dependency Injection Container.

    Manages the lifecycle of every application dependency. Inner layers
    depend on abstractions; this is where the implementations are chosen.
    """

    # Configuration
    settings: Settings = field(default_factory=Settings)

    # Repositories
    _session_repository: Optional[ISessionRepository] = None

    # Ports
    _session_cache: Optional[ISessionCache] = None

    # Domain Services (stateless, shared)
    _analytics: Optional[SessionAnalytics] = None

    # Infrastructure handles
    _db_manager: Optional[Any] = None

    # ==================== Domain Services ====================

    @property
    def analytics(self) -> SessionAnalytics:
        """SessionAnalytics (singleton)."""
        if self._analytics is None:
            self._analytics = SessionAnalytics()
        return self._analytics

    # ==================== Infrastructure ====================

    @property
    def db_manager(self):
        """DatabaseManager for these settings, built on first access."""
        if self._db_manager is None:
            from pokertrack.infrastructure.persistence.database import DatabaseManager
            self._db_manager = DatabaseManager(self.settings)
        return self._db_manager

    # ==================== Repositories ====================

    @property
    def session_repository(self) -> ISessionRepository:
        """
        SQL repository when the database is enabled, in-memory otherwise.

        The SQL variant needs ``db_manager.initialize()`` to have run
        (FastAPI lifespan) before first use.
        """
        if self._session_repository is None:
            if self.settings.db_enabled:
                # Imported here so the SQL stack loads only when needed
                from pokertrack.infrastructure.persistence.repositories.session_repository_impl import (
                    SessionRepositoryImpl,
                )
                self._session_repository = SessionRepositoryImpl(self.db_manager.session_factory)
            else:
                from pokertrack.infrastructure.persistence.repositories.in_memory_session_repository import (
                    InMemorySessionRepository,
                )
                self._session_repository = InMemorySessionRepository()
        return self._session_repository

    # ==================== Ports ====================

    @property
    def session_cache(self) -> ISessionCache:
        if self._session_cache is None:
            from pokertrack.infrastructure.cache.session_cache import TTLSessionCache
            self._session_cache = TTLSessionCache(
                self.session_repository,
                ttl_seconds=self.settings.cache_ttl_seconds,
            )
        return self._session_cache

    # ==================== Use Cases ====================

    def get_stats_usecase(self):
        """
        Factory for StatsUseCase.

        A new instance per call; state lives in the shared cache.
        """
        from pokertrack.application.use_cases.stats_usecase import StatsUseCase
        return StatsUseCase(
            session_cache=self.session_cache,
            analytics=self.analytics,
        )

    def get_session_usecase(self):
        """Factory for SessionUseCase."""
        from pokertrack.application.use_cases.session_usecase import SessionUseCase
        return SessionUseCase(
            session_repository=self.session_repository,
            session_cache=self.session_cache,
        )

    # ==================== Lifecycle ====================

    def reset(self) -> None:
        """Drop every instance (tests)."""
        self._session_repository = None
        self._session_cache = None
        self._analytics = None
        self._db_manager = None

    def override(self, name: str, instance: Any) -> None:
        """
        Override a dependency (tests with fakes).

        Args:
            name: Dependency name (e.g. 'session_repository')
            instance: Instance to use
        """
        attr_name = f"_{name}"
        if hasattr(self, attr_name):
            setattr(self, attr_name, instance)
        else:
            raise ValueError(f"Unknown dependency: {name}")


# ==================== Global Container ====================

_container: Optional[Container] = None


def get_container() -> Container:
    """Global container instance, created on first use."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    global _container
    if _container is not None:
        _container.reset()
    _container = None


def init_container(settings: Optional[Settings] = None) -> Container:
    """
    Initialise the global container with specific settings.

    Args:
        settings: Optional settings; defaults are read from the environment.

    Returns:
        The new container
    """
    global _container
    if settings is None:
        settings = Settings()
    _container = Container(settings=settings)
    return _container


def create_test_container(settings: Optional[Settings] = None, **overrides) -> Container:
    """
    Container with injected fakes.

    Example:
        container = create_test_container(
            session_repository=InMemorySessionRepository(sessions),
        )
    """
    container = Container(settings=settings or Settings())
    for name, instance in overrides.items():
        container.override(name, instance)
    return container
