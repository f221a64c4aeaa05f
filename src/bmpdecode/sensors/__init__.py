"""Sensor-specific register decoders.

:mod:`registers` holds the byte-level readers shared by Bosch sensors, and
:mod:`bmp280` turns BMP280/BME280 calibration and measurement blocks into a
compensated :class:`~bmpdecode.sensors.bmp280.Measurement`.
"""

from .bmp280 import (
    CalibrationCoefficients,
    Measurement,
    RawSample,
    decode,
    decode_calibration,
    decode_raw_sample,
)
from .registers import OutOfRangeError

__all__ = [
    "CalibrationCoefficients",
    "Measurement",
    "OutOfRangeError",
    "RawSample",
    "decode",
    "decode_calibration",
    "decode_raw_sample",
]
