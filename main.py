from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

# Make sure the 'src' directory is on sys.path so 'bmpdecode' can be imported
REPO_ROOT = Path(__file__).resolve().parent
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

import yaml

from bmpdecode.config import DEFAULT_CONFIG_PATH, load_config
from bmpdecode.dataio import format_hex_block
from bmpdecode.sensors import Measurement, decode

logger = logging.getLogger("bmpdecode")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode one BMP280/BME280 register snapshot")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"YAML file with calibration/measurement blocks (default: {DEFAULT_CONFIG_PATH.name})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log decoded coefficients and intermediates",
    )
    return parser


def format_measurement(m: Measurement) -> str:
    return f"Pressure: {m.pressure}Pa, Temperature: {m.temperature}C, Humidity: {m.humidity}"


def main(argv: Sequence[str] | None = None) -> int:
    """
    Decode the register blocks named in the config and print the result.

    Parameters
    ----------
    argv:
        Command-line arguments without the program name. If None, uses sys.argv.
    """
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Cannot load %s: %s", args.config, exc)
        return 1

    if not args.verbose:
        logging.getLogger().setLevel(cfg.log_level_value)
    logger.debug("calibration=%s", format_hex_block(cfg.calibration))
    logger.debug("measurement=%s", format_hex_block(cfg.measurement))
    print(format_measurement(decode(cfg.calibration, cfg.measurement)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
