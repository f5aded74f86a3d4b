"""Preset configuration suites.

- levels: gzip against a spread of zstd levels
- default: as ``levels``, plus zstd with library defaults
- strategies: every zstd strategy at level 3
- mixed: zstd defaults, then every strategy at levels 3, 9 and 15
"""

from compressbench.models import Algorithm, Configuration, ZstdStrategy

ZSTD_LEVELS = [1, 3, 6, 15, 22]
MIXED_LEVELS = [3, 9, 15]

GZIP = Configuration(Algorithm.GZIP)
ZSTD_DEFAULT = Configuration(Algorithm.ZSTD)


def levels_suite() -> list[Configuration]:
    return [GZIP] + [Configuration(Algorithm.ZSTD, level=level) for level in ZSTD_LEVELS]


def default_suite() -> list[Configuration]:
    return [GZIP, ZSTD_DEFAULT] + levels_suite()[1:]


def strategies_suite(level: int = 3) -> list[Configuration]:
    return [
        Configuration(Algorithm.ZSTD, level=level, strategy=strategy) for strategy in ZstdStrategy
    ]


def mixed_suite() -> list[Configuration]:
    configurations = [ZSTD_DEFAULT]
    for level in MIXED_LEVELS:
        configurations.extend(strategies_suite(level))
    return configurations


SUITES = {
    "levels": levels_suite,
    "default": default_suite,
    "strategies": strategies_suite,
    "mixed": mixed_suite,
}


def build_configurations(names: list[str]) -> list[Configuration]:
    """Concatenate named suites in order.

    Args:
        names: Suite names. "all" expands to every suite.

    Returns:
        Configurations to benchmark

    Raises:
        ValueError: If a name is not a known suite
    """
    if "all" in names:
        names = list(SUITES)

    configurations: list[Configuration] = []
    for name in names:
        if name not in SUITES:
            raise ValueError(f"Unknown suite: {name}. Available: {list(SUITES)}")
        configurations.extend(SUITES[name]())
    return configurations
