"""compressbench: Timing, size and round-trip checks for gzip and zstd."""

__version__ = "0.1.0"

from .codecs import (
    BaseCodec,
    GzipCodec,
    InvalidConfigurationError,
    ZstdCodec,
    create_codec,
    list_strategies,
)
from .harness import BenchmarkHarness, run_benchmark
from .models import (
    Algorithm,
    BenchmarkResult,
    BenchmarkSummary,
    Configuration,
    ZstdStrategy,
)
from .serialization import JsonSerializer

__all__ = [
    # Core
    "BenchmarkHarness",
    "run_benchmark",
    # Types
    "Algorithm",
    "ZstdStrategy",
    "Configuration",
    "BenchmarkResult",
    "BenchmarkSummary",
    # Codecs
    "BaseCodec",
    "GzipCodec",
    "ZstdCodec",
    "create_codec",
    "list_strategies",
    "InvalidConfigurationError",
    # Serialization
    "JsonSerializer",
]
