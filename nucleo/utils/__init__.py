"""Utility exports."""

from .config import CrossoverConfig, MutationConfig
from .logging import get_logger

__all__ = [
    "CrossoverConfig",
    "MutationConfig",
    "get_logger",
]
