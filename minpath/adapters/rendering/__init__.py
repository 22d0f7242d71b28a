"""Rendering adapters - Implementations of PathFormatterPort."""

from .text_formatter import TextPathFormatter

__all__ = ["TextPathFormatter"]
