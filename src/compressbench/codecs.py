"""Compression codecs for benchmarks.

Supports:
- gzip: Python standard library, default compression level
- zstd: zstandard bindings, optional compression level (1-22) and strategy (1-9)

See: https://python-zstandard.readthedocs.io/en/latest/compressor.html
     https://facebook.github.io/zstd/zstd_manual.html#Chapter5
"""

import gzip
import logging
from abc import ABC, abstractmethod

import zstandard as zstd

from .models import Algorithm, Configuration, ZstdStrategy

logger = logging.getLogger("compressbench.codecs")

ZSTD_MIN_LEVEL = 1
ZSTD_MAX_LEVEL = 22
ZSTD_DEFAULT_LEVEL = 3

# zstandard's own constants for each strategy
ZSTD_STRATEGY_PARAMS = {
    ZstdStrategy.FAST: zstd.STRATEGY_FAST,
    ZstdStrategy.DFAST: zstd.STRATEGY_DFAST,
    ZstdStrategy.GREEDY: zstd.STRATEGY_GREEDY,
    ZstdStrategy.LAZY: zstd.STRATEGY_LAZY,
    ZstdStrategy.LAZY2: zstd.STRATEGY_LAZY2,
    ZstdStrategy.BTLAZY2: zstd.STRATEGY_BTLAZY2,
    ZstdStrategy.BTOPT: zstd.STRATEGY_BTOPT,
    ZstdStrategy.BTULTRA: zstd.STRATEGY_BTULTRA,
    ZstdStrategy.BTULTRA2: zstd.STRATEGY_BTULTRA2,
}


class InvalidConfigurationError(ValueError):
    """Raised when a configuration names parameters its algorithm cannot use."""


class BaseCodec(ABC):
    """Base class for compress/decompress pairs."""

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Compress raw bytes."""
        pass

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Decompress bytes produced by :meth:`compress`."""
        pass

    @property
    @abstractmethod
    def library(self) -> str:
        """Name of the library doing the work."""
        pass


class GzipCodec(BaseCodec):
    """gzip via the standard library."""

    def compress(self, data: bytes) -> bytes:
        return gzip.compress(data)

    def decompress(self, data: bytes) -> bytes:
        return gzip.decompress(data)

    @property
    def library(self) -> str:
        return "gzip"


class ZstdCodec(BaseCodec):
    """zstd via the zstandard bindings."""

    def __init__(
        self,
        level: int | None = None,
        strategy: ZstdStrategy | int | None = None,
    ):
        """Initialize zstd codec.

        Args:
            level: Compression level 1-22. Defaults to 3.
            strategy: Strategy 1-9 (FAST..BTULTRA2). The level's own
                strategy is used if None.

        Raises:
            InvalidConfigurationError: If level or strategy is out of range
        """
        self.level = validate_zstd_level(level)
        self.strategy = validate_zstd_strategy(strategy)

        if self.strategy is None:
            # Same parameters zstd picks for the level on its own
            self._compressor = zstd.ZstdCompressor(level=self.level or ZSTD_DEFAULT_LEVEL)
        else:
            params = zstd.ZstdCompressionParameters.from_level(
                self.level or ZSTD_DEFAULT_LEVEL,
                strategy=ZSTD_STRATEGY_PARAMS[self.strategy],
            )
            self._compressor = zstd.ZstdCompressor(compression_params=params)
        self._decompressor = zstd.ZstdDecompressor()

    def compress(self, data: bytes) -> bytes:
        return self._compressor.compress(data)

    def decompress(self, data: bytes) -> bytes:
        return self._decompressor.decompress(data)

    @property
    def library(self) -> str:
        return f"zstandard {zstd.__version__}"


def validate_zstd_level(level: int | None) -> int | None:
    """Check a zstd compression level without clamping it."""
    if level is None:
        return None
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidConfigurationError(f"zstd level must be an integer, got {level!r}")
    if not ZSTD_MIN_LEVEL <= level <= ZSTD_MAX_LEVEL:
        raise InvalidConfigurationError(
            f"zstd level {level} out of range {ZSTD_MIN_LEVEL}-{ZSTD_MAX_LEVEL}"
        )
    return level


def validate_zstd_strategy(strategy: ZstdStrategy | int | None) -> ZstdStrategy | None:
    """Check a zstd strategy id without clamping it."""
    if strategy is None:
        return None
    if isinstance(strategy, bool) or not isinstance(strategy, int):
        raise InvalidConfigurationError(f"zstd strategy must be an integer, got {strategy!r}")
    try:
        return ZstdStrategy(strategy)
    except ValueError:
        raise InvalidConfigurationError(
            f"zstd strategy {strategy} out of range "
            f"{ZstdStrategy.FAST.value}-{ZstdStrategy.BTULTRA2.value} (FAST..BTULTRA2)"
        ) from None


def validate_configuration(configuration: Configuration) -> None:
    """Raise InvalidConfigurationError if the configuration cannot run."""
    if not isinstance(configuration.algorithm, Algorithm):
        raise InvalidConfigurationError(f"Unknown algorithm: {configuration.algorithm!r}")

    if configuration.algorithm is Algorithm.GZIP:
        if configuration.level is not None or configuration.strategy is not None:
            raise InvalidConfigurationError(
                f"{configuration.label}: gzip takes no level or strategy"
            )
        return

    validate_zstd_level(configuration.level)
    validate_zstd_strategy(configuration.strategy)


def create_codec(configuration: Configuration) -> BaseCodec:
    """Factory function to create a codec for a configuration.

    Args:
        configuration: Algorithm and parameters to benchmark

    Returns:
        Codec ready to compress and decompress

    Examples:
        # gzip
        codec = create_codec(Configuration(Algorithm.GZIP))

        # zstd level 19
        codec = create_codec(Configuration(Algorithm.ZSTD, level=19))

        # zstd level 3 with the BTULTRA2 strategy
        codec = create_codec(Configuration(Algorithm.ZSTD, strategy=ZstdStrategy.BTULTRA2))
    """
    validate_configuration(configuration)

    if configuration.algorithm is Algorithm.GZIP:
        return GzipCodec()

    logger.debug(
        f"Creating zstd codec: level={configuration.level}, "
        f"strategy={configuration.strategy_name}"
    )
    return ZstdCodec(level=configuration.level, strategy=configuration.strategy)


def list_strategies() -> list[dict]:
    """List all zstd strategies with their ids.

    Returns:
        List of strategy info dictionaries
    """
    return [{"id": int(s), "name": s.name} for s in ZstdStrategy]
