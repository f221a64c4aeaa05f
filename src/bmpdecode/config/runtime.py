"""
Loading of the decoder descriptor (``decoder.yaml``).

Expected shape::

    decoder:
      calibration: "36 6C 05 68 ..."      # 26 bytes, hex text or a list of ints
      measurement: "6C 07 00 7E 4C 00 00 00"
      log_level: INFO

The ``decoder:`` wrapper is optional. Both register blocks are parsed while
loading, so a bad block is reported by name before anything is decoded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..dataio.hex_blocks import parse_hex_block
from ..sensors.bmp280 import CALIBRATION_SIZE, MEASUREMENT_SIZE

logger = logging.getLogger(__name__)

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "decoder.yaml"


class ConfigError(ValueError):
    """Raised when the descriptor cannot be turned into register blocks."""


@dataclass(frozen=True)
class DecoderConfig:
    calibration: bytes
    measurement: bytes
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_block(section: Mapping[str, Any], name: str, size: int) -> bytes:
    value = section.get(name)
    if value is None:
        raise ConfigError(f"{name} block is missing")

    # YAML reads [0x36, 0x6C] as a list of ints.
    if isinstance(value, (list, tuple)):
        for item in value:
            if not isinstance(item, int) or not 0 <= item <= 0xFF:
                raise ConfigError(f"{name} block: element is not a byte: {item!r}")
        if len(value) != size:
            raise ConfigError(f"{name} block: expected {size} bytes, got {len(value)}")
        return bytes(value)

    if not isinstance(value, str):
        raise ConfigError(
            f"{name} block: expected hex text or a list of bytes, got {type(value).__name__}"
        )
    try:
        return parse_hex_block(value, expected_len=size)
    except ValueError as exc:
        raise ConfigError(f"{name} block: {exc}") from exc


def _parse_log_level(section: Mapping[str, Any]) -> str:
    level = str(section.get("log_level") or "INFO").strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Unknown log_level %r, using INFO", section.get("log_level"))
        return "INFO"
    return level


def config_from_mapping(data: Mapping[str, Any]) -> DecoderConfig:
    """Build :class:`DecoderConfig` from a parsed descriptor, validating both blocks."""
    section = data.get("decoder", data)
    if not isinstance(section, Mapping):
        raise ConfigError(f"decoder section must be a mapping, got {type(section).__name__}")
    return DecoderConfig(
        calibration=_parse_block(section, "calibration", CALIBRATION_SIZE),
        measurement=_parse_block(section, "measurement", MEASUREMENT_SIZE),
        log_level=_parse_log_level(section),
    )


def load_config(path: str | Path) -> DecoderConfig:
    """
    Read and validate the descriptor at ``path``.

    Raises ``OSError`` if the file cannot be read, ``yaml.YAMLError`` for
    malformed YAML and :class:`ConfigError` for a bad document.
    """
    cfg_path = Path(path)
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DecoderConfig",
    "config_from_mapping",
    "load_config",
]
