"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - registry guarded by a lock
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(ShortestPathService)

        # Testing
        container = Container()
        container.register(GraphRepositoryPort, lambda: FakeRepository())
        repository = container.resolve(GraphRepositoryPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Args:
            port_type: The type to resolve.

        Returns:
            An instance of the requested type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if not self.is_registered(port_type):
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import DijkstraPathSolver, TextGraphRepository
        from .adapters.rendering import TextPathFormatter
        from .ports.graph import GraphRepositoryPort, PathSolverPort
        from .ports.rendering import PathFormatterPort
        from .services import ShortestPathService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            GraphRepositoryPort,
            lambda: TextGraphRepository(config.graph),
        )
        container.register(
            PathSolverPort,
            lambda: DijkstraPathSolver(),
        )
        container.register(
            PathFormatterPort,
            lambda: TextPathFormatter(),
        )

        def create_path_service() -> ShortestPathService:
            return ShortestPathService(
                graph_repository=container.resolve(GraphRepositoryPort),
                path_solver=container.resolve(PathSolverPort),
                formatter=container.resolve(PathFormatterPort),
                config=config.solver,
            )

        container.register(ShortestPathService, create_path_service)

        return container
