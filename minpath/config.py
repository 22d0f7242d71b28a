"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- MINPATH_GRAPH_INPUT_FILE=graphs/mesh.txt
- MINPATH_SOLVER_SOURCE=a
- MINPATH_SOLVER_TARGET=z
- MINPATH_LOG_LEVEL=DEBUG
- etc.

Command-line flags take precedence over the environment; see
``pipeline.build_config``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph input configuration.

    Environment variables prefixed with MINPATH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="MINPATH_GRAPH_")

    input_file: Path = Path("input.txt")
    encoding: str = "utf-8"


class SolverConfig(BaseSettings):
    """Endpoint selection for the shortest-path search.

    Environment variables prefixed with MINPATH_SOLVER_.
    """

    model_config = SettingsConfigDict(env_prefix="MINPATH_SOLVER_")

    source: str = "a"
    target: str = "z"
    # Missing endpoints become isolated vertices instead of an error
    insert_missing_endpoints: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with MINPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MINPATH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.input_file)
        print(config.solver.source)

    Environment variables prefixed with MINPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="MINPATH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
