"""Services layer - Application orchestration.

Available services:
- ShortestPathService: Loads the graph, resolves endpoints and solves
"""

from .path_service import ShortestPathService, describe_error

__all__ = ["ShortestPathService", "describe_error"]
