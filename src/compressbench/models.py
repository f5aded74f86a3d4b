"""Configuration and result types for compression benchmarks."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class Algorithm(Enum):
    """Compression algorithms under test."""

    GZIP = "gzip"
    ZSTD = "zstd"


class ZstdStrategy(IntEnum):
    """zstd match-finder strategies, ordered from fastest to strongest."""

    FAST = 1
    DFAST = 2
    GREEDY = 3
    LAZY = 4
    LAZY2 = 5
    BTLAZY2 = 6
    BTOPT = 7
    BTULTRA = 8
    BTULTRA2 = 9

    @classmethod
    def parse(cls, value: "ZstdStrategy | int | str") -> "ZstdStrategy":
        """Resolve a strategy from its enum, integer id or name.

        Raises:
            ValueError: If the value does not name a known strategy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value.isdigit():
                return cls(int(value))
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(
                    f"Unknown zstd strategy: {value}. Available: {[s.name for s in cls]}"
                ) from None
        return cls(value)


@dataclass(frozen=True)
class Configuration:
    """One named set of compression parameters under test.

    ``level`` and ``strategy`` only apply to zstd. Leaving both unset selects
    the library defaults.
    """

    algorithm: Algorithm
    level: int | None = None
    strategy: ZstdStrategy | int | None = None
    name: str | None = None

    @property
    def strategy_name(self) -> str | None:
        """Strategy name, or the raw value if it is not a known strategy."""
        if self.strategy is None:
            return None
        try:
            return ZstdStrategy(self.strategy).name
        except ValueError:
            return str(self.strategy)

    @property
    def label(self) -> str:
        """Display label, e.g. ``zstd (level 9, BTOPT)``."""
        if self.name:
            return self.name
        if self.algorithm is Algorithm.GZIP:
            return "gzip"

        parts = []
        if self.level is not None:
            parts.append(f"level {self.level}")
        if self.strategy is not None:
            parts.append(self.strategy_name)
        return f"zstd ({', '.join(parts) or 'default'})"


@dataclass(frozen=True)
class BenchmarkResult:
    """Result of compressing the dataset under a single configuration."""

    label: str
    compress_ms: float
    decompress_ms: float
    compressed_size: int  # bytes
    correct: bool

    algorithm: str
    library: str
    original_size: int  # bytes
    compress_cpu_ms: float
    level: int | None = None
    strategy: str | None = None

    @property
    def compression_ratio(self) -> float:
        """Compressed size relative to the serialized size (lower is better)."""
        if self.original_size <= 0:
            return 1.0
        return self.compressed_size / self.original_size

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "label": self.label,
            "algorithm": self.algorithm,
            "library": self.library,
            "level": self.level,
            "strategy": self.strategy,
            "compress_ms": self.compress_ms,
            "compress_cpu_ms": self.compress_cpu_ms,
            "decompress_ms": self.decompress_ms,
            "original_size": self.original_size,
            "compressed_size": self.compressed_size,
            "compression_ratio": self.compression_ratio,
            "correct": self.correct,
        }

    def to_csv_row(self) -> dict[str, Any]:
        """Convert to flat dictionary for CSV export."""
        row = self.to_dict()
        row["level"] = self.level if self.level is not None else ""
        row["strategy"] = self.strategy or ""
        return row


@dataclass
class BenchmarkSummary:
    """Summary statistics across all benchmark results."""

    total_configurations: int
    correct_count: int
    original_size: int
    avg_compress_ms: float
    p50_compress_ms: float
    p95_compress_ms: float
    avg_decompress_ms: float
    p50_decompress_ms: float
    p95_decompress_ms: float
    best_ratio_label: str | None
    best_ratio: float | None
    fastest_compress_label: str | None
    fastest_decompress_label: str | None

    @property
    def all_correct(self) -> bool:
        return self.correct_count == self.total_configurations

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_configurations": self.total_configurations,
            "correct_count": self.correct_count,
            "all_correct": self.all_correct,
            "original_size": self.original_size,
            "avg_compress_ms": self.avg_compress_ms,
            "p50_compress_ms": self.p50_compress_ms,
            "p95_compress_ms": self.p95_compress_ms,
            "avg_decompress_ms": self.avg_decompress_ms,
            "p50_decompress_ms": self.p50_decompress_ms,
            "p95_decompress_ms": self.p95_decompress_ms,
            "best_ratio_label": self.best_ratio_label,
            "best_ratio": self.best_ratio,
            "fastest_compress_label": self.fastest_compress_label,
            "fastest_decompress_label": self.fastest_decompress_label,
        }
