"""Tests for gzip and zstd codecs."""

import pytest

from compressbench.codecs import (
    GzipCodec,
    InvalidConfigurationError,
    ZstdCodec,
    create_codec,
    list_strategies,
    validate_configuration,
)
from compressbench.models import Algorithm, Configuration, ZstdStrategy

PAYLOAD = b'{"a":1,"b":"hello hello hello hello"}' * 100


class TestStrategyParsing:
    def test_parse_by_name(self):
        assert ZstdStrategy.parse("btultra2") is ZstdStrategy.BTULTRA2
        assert ZstdStrategy.parse("FAST") is ZstdStrategy.FAST

    def test_parse_by_id(self):
        assert ZstdStrategy.parse(3) is ZstdStrategy.GREEDY
        assert ZstdStrategy.parse("7") is ZstdStrategy.BTOPT

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            ZstdStrategy.parse("turbo")
        with pytest.raises(ValueError):
            ZstdStrategy.parse(10)

    def test_list_strategies(self):
        strategies = list_strategies()
        assert len(strategies) == 9
        assert strategies[0] == {"id": 1, "name": "FAST"}
        assert strategies[-1] == {"id": 9, "name": "BTULTRA2"}


class TestConfigurationLabel:
    def test_gzip(self):
        assert Configuration(Algorithm.GZIP).label == "gzip"

    def test_zstd_default(self):
        assert Configuration(Algorithm.ZSTD).label == "zstd (default)"

    def test_zstd_level(self):
        assert Configuration(Algorithm.ZSTD, level=6).label == "zstd (level 6)"

    def test_zstd_strategy(self):
        config = Configuration(Algorithm.ZSTD, strategy=ZstdStrategy.GREEDY)
        assert config.label == "zstd (GREEDY)"

    def test_zstd_level_and_strategy(self):
        config = Configuration(Algorithm.ZSTD, level=9, strategy=7)
        assert config.label == "zstd (level 9, BTOPT)"

    def test_explicit_name(self):
        assert Configuration(Algorithm.ZSTD, level=1, name="fast").label == "fast"


class TestGzipCodec:
    def test_round_trip(self):
        codec = GzipCodec()
        compressed = codec.compress(PAYLOAD)
        assert len(compressed) < len(PAYLOAD)
        assert codec.decompress(compressed) == PAYLOAD

    def test_corrupt_input_raises(self):
        with pytest.raises(Exception):
            GzipCodec().decompress(b"not a gzip stream")

    def test_rejects_parameters(self):
        with pytest.raises(InvalidConfigurationError):
            validate_configuration(Configuration(Algorithm.GZIP, level=6))
        with pytest.raises(InvalidConfigurationError):
            create_codec(Configuration(Algorithm.GZIP, strategy=ZstdStrategy.FAST))


class TestZstdCodec:
    def test_default_round_trip(self):
        codec = ZstdCodec()
        assert codec.level is None
        assert codec.strategy is None
        assert codec.decompress(codec.compress(PAYLOAD)) == PAYLOAD

    @pytest.mark.parametrize("level", [1, 3, 19, 22])
    def test_levels(self, level):
        codec = ZstdCodec(level=level)
        assert codec.decompress(codec.compress(PAYLOAD)) == PAYLOAD

    @pytest.mark.parametrize("strategy", list(ZstdStrategy))
    def test_strategies(self, strategy):
        codec = ZstdCodec(level=3, strategy=strategy)
        assert codec.strategy is strategy
        assert codec.decompress(codec.compress(PAYLOAD)) == PAYLOAD

    def test_strategy_without_level(self):
        codec = ZstdCodec(strategy=9)
        assert codec.strategy is ZstdStrategy.BTULTRA2
        assert codec.decompress(codec.compress(PAYLOAD)) == PAYLOAD

    def test_library_name(self):
        assert ZstdCodec().library.startswith("zstandard")

    def test_corrupt_input_raises(self):
        with pytest.raises(Exception):
            ZstdCodec().decompress(b"\x00\x01\x02 definitely not zstd")


class TestZstdValidation:
    @pytest.mark.parametrize("level", [0, -1, 23, 100])
    def test_level_out_of_range(self, level):
        with pytest.raises(InvalidConfigurationError):
            ZstdCodec(level=level)

    @pytest.mark.parametrize("strategy", [0, 10, -3])
    def test_strategy_out_of_range(self, strategy):
        with pytest.raises(InvalidConfigurationError):
            ZstdCodec(strategy=strategy)

    def test_non_integer_level(self):
        with pytest.raises(InvalidConfigurationError):
            ZstdCodec(level="3")
        with pytest.raises(InvalidConfigurationError):
            ZstdCodec(level=True)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            create_codec(Configuration(Algorithm.ZSTD, level=23))


class TestCreateCodec:
    def test_gzip(self):
        assert isinstance(create_codec(Configuration(Algorithm.GZIP)), GzipCodec)

    def test_zstd(self):
        codec = create_codec(Configuration(Algorithm.ZSTD, level=15, strategy=ZstdStrategy.LAZY2))
        assert isinstance(codec, ZstdCodec)
        assert codec.level == 15
        assert codec.strategy is ZstdStrategy.LAZY2

    def test_unknown_algorithm(self):
        with pytest.raises(InvalidConfigurationError):
            create_codec(Configuration("brotli"))
