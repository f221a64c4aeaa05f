"""Configuration for the decoder entry point.

:mod:`runtime` loads ``decoder.yaml``, which names the calibration and
measurement register blocks to decode and the log level, and validates both
blocks up front.
"""

from .runtime import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    DecoderConfig,
    config_from_mapping,
    load_config,
)

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DecoderConfig",
    "config_from_mapping",
    "load_config",
]
