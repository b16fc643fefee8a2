"""Application services orchestrating domain and core capabilities."""

from .benchmark import run_all

__all__ = [
    "run_all",
]
