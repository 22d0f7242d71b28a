"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Graph storage (edge-list text files)
- Path search (Dijkstra)
- Rendering (plain text)
"""
