"""
Shared Layer - Case Consensus

Cross-cutting concerns that can be used by any layer.
These are utilities that don't contain business logic.

Contents:
- logging_utils.py: Logging configuration and utilities
"""

from .logging_utils import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
