"""Default configuration parameters for candle persistence."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecParams:
    """Row size heuristics used to pre-size buffers."""
    candle_row_estimate: int = 72      # Bytes per candle row
    trade_row_estimate: int = 32       # Bytes per trade row


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    codec: CodecParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        codec=CodecParams(),
    )
