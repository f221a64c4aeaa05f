"""
Compensation of raw BMP280/BME280 readings (datasheet §4.2.3 / §8.2).

The sensor exposes two fixed register blocks:

  - calibration : 26 bytes starting at 0x88, little-endian trimming words
                  T1..T3, P1..P9, one reserved byte and H1 (BME280 only)
  - measurement : 8 bytes starting at 0xF7, packed 20-bit pressure ADC
                  (bytes 0..2), temperature ADC (bytes 3..5), humidity
                  (bytes 6..7, not decoded here)

``decode()`` turns one block of each into a :class:`Measurement`. The integer
formulas are the datasheet's 32-bit temperature and 64-bit pressure
routines; Python ints are unbounded, so every intermediate is wrapped back to
the declared width to keep the exact bit pattern of the reference code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from .registers import (
    Buffer,
    decode_20bit,
    decode_s16_le,
    decode_u16_le,
    decode_u8,
    require_length,
)

logger = logging.getLogger(__name__)

CALIBRATION_SIZE = 26
MEASUREMENT_SIZE = 8

PRESSURE_ADC_OFFSET = 0
TEMPERATURE_ADC_OFFSET = 3
H1_OFFSET = 25


@dataclass(frozen=True)
class CalibrationCoefficients:
    # Temperature trimming: T1 unsigned, T2/T3 signed.
    T1: int
    T2: int
    T3: int
    # Pressure trimming: P1 unsigned, P2..P9 signed.
    P1: int
    P2: int
    P3: int
    P4: int
    P5: int
    P6: int
    P7: int
    P8: int
    P9: int
    # BME280 only; read but not used by any formula.
    H1: int = 0


@dataclass(frozen=True)
class RawSample:
    pressure_adc: int
    temperature_adc: int


@dataclass(frozen=True)
class Measurement:
    pressure: float = 0.0  # Pa
    temperature: float = 0.0  # °C
    humidity: float = 0.0  # %RH, never compensated


def _s32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _s64(value: int) -> int:
    value &= 0xFFFFFFFFFFFFFFFF
    return value - (1 << 64) if value & 0x8000000000000000 else value


def _div_trunc(num: int, den: int) -> int:
    """Integer division rounding toward zero (``//`` floors)."""
    q = abs(num) // abs(den)
    return -q if (num < 0) != (den < 0) else q


def decode_calibration(buf: Buffer) -> CalibrationCoefficients:
    """
    Decode the 26-byte trimming block.

    Raises :class:`~bmpdecode.sensors.registers.OutOfRangeError` if ``buf``
    is shorter than 26 bytes. Trailing bytes are ignored.
    """
    require_length(buf, CALIBRATION_SIZE, "calibration block")
    calib = CalibrationCoefficients(
        T1=decode_u16_le(buf, 0),
        T2=decode_s16_le(buf, 2),
        T3=decode_s16_le(buf, 4),
        P1=decode_u16_le(buf, 6),
        P2=decode_s16_le(buf, 8),
        P3=decode_s16_le(buf, 10),
        P4=decode_s16_le(buf, 12),
        P5=decode_s16_le(buf, 14),
        P6=decode_s16_le(buf, 16),
        P7=decode_s16_le(buf, 18),
        P8=decode_s16_le(buf, 20),
        P9=decode_s16_le(buf, 22),
        H1=decode_u8(buf, H1_OFFSET),
    )
    logger.debug("Decoded calibration %s", calib)
    return calib


def decode_raw_sample(buf: Buffer) -> RawSample:
    """Extract the pressure and temperature ADC values from the 8-byte measurement block."""
    require_length(buf, MEASUREMENT_SIZE, "measurement block")
    return RawSample(
        pressure_adc=decode_20bit(buf, PRESSURE_ADC_OFFSET),
        temperature_adc=decode_20bit(buf, TEMPERATURE_ADC_OFFSET),
    )


def compensate_temperature(calib: CalibrationCoefficients, adc_t: int) -> Tuple[int, float]:
    """
    Return ``(t_fine, degrees_celsius)`` for a raw temperature ADC value.

    ``t_fine`` is the fine temperature consumed by :func:`compensate_pressure`.
    """
    t1 = calib.T1
    var1 = _s32(_s32(((adc_t >> 3) - (t1 << 1)) * calib.T2) >> 11)
    delta = (adc_t >> 4) - t1
    var2 = _s32(_s32((_s32(delta * delta) >> 12) * calib.T3) >> 14)
    t_fine = _s32(var1 + var2)
    centi = _s32(t_fine * 5 + 128) >> 8
    return t_fine, centi / 100.0


def compensate_pressure(calib: CalibrationCoefficients, adc_p: int, t_fine: int) -> float:
    """
    Return the pressure in Pa for a raw pressure ADC value.

    When the P1 term drives the divisor to zero the result is ``0.0``.
    """
    var1 = _s64(t_fine - 128000)
    var2 = _s64(var1 * var1 * calib.P6)
    var2 = _s64(var2 + _s64(_s64(var1 * calib.P5) << 17))
    var2 = _s64(var2 + _s64(calib.P4 << 35))
    var1 = _s64(
        (_s64(var1 * var1 * calib.P3) >> 8) + _s64(_s64(var1 * calib.P2) << 12)
    )
    var1 = _s64(_s64(((1 << 47) + var1) * calib.P1) >> 33)
    if var1 == 0:
        logger.debug("Pressure divisor is zero (P1=%d); pressure left at 0.0", calib.P1)
        return 0.0

    p = 1048576 - adc_p
    p = _div_trunc(_s64(_s64(_s64(p << 31) - var2) * 3125), var1)
    var1 = _s64(_s64(calib.P9 * (p >> 13) * (p >> 13)) >> 25)
    var2 = _s64(calib.P8 * p) >> 19
    p = _s64(((p + var1 + var2) >> 8) + (calib.P7 << 4))
    return p / 256.0


def decode(
    calibration: Union[CalibrationCoefficients, Buffer],
    measurement: Buffer,
) -> Measurement:
    """
    Decode one calibration block and one measurement block into a :class:`Measurement`.

    ``calibration`` may be the raw 26-byte block or coefficients already
    returned by :func:`decode_calibration`. Humidity is always ``0.0``.
    """
    if isinstance(calibration, CalibrationCoefficients):
        calib = calibration
    else:
        calib = decode_calibration(calibration)
    raw = decode_raw_sample(measurement)

    t_fine, temperature = compensate_temperature(calib, raw.temperature_adc)
    logger.debug("adc_T=%d t_fine=%d", raw.temperature_adc, t_fine)
    pressure = compensate_pressure(calib, raw.pressure_adc, t_fine)

    return Measurement(pressure=pressure, temperature=temperature)
