"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphParseError,
    InputReadError,
    MinPathError,
    NoPathFoundError,
    VertexNotFoundError,
)
from .models import Edge, PathResult

__all__ = [
    # Models
    "Edge",
    "PathResult",
    # Errors
    "MinPathError",
    "InputReadError",
    "GraphParseError",
    "NoPathFoundError",
    "VertexNotFoundError",
    "ConfigurationError",
]
