"""Benchmark suite comparing gzip and zstd on synthetic transaction records."""

from .config import BenchmarkConfig

__all__ = ["BenchmarkConfig"]
