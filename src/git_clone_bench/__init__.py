"""Benchmark git clone strategies against a remote host."""

__version__ = "1.0.0"
