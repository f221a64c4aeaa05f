from __future__ import annotations

import pytest

# Datasheet demonstration vector ("Trimming parameter readout").
CALIBRATION = bytes(
    [
        0x36, 0x6C,  # T1  27702
        0x05, 0x68,  # T2  26629
        0x18, 0xFC,  # T3  -1000
        0xA1, 0x8D,  # P1  36257
        0x93, 0xD6,  # P2  -10605
        0xD0, 0x0B,  # P3  3024
        0xC3, 0x06,  # P4  1731
        0x3B, 0x01,  # P5  315
        0xF9, 0xFF,  # P6  -7
        0x8C, 0x3C,  # P7  15500
        0xF8, 0xC6,  # P8  -14600
        0x70, 0x17,  # P9  6000
        0x00,  # reserved
        0x00,  # H1
    ]
)

MEASUREMENT = bytes([0x6C, 0x07, 0x00, 0x7E, 0x4C, 0x00, 0x00, 0x00])


@pytest.fixture
def calibration_block() -> bytes:
    return CALIBRATION


@pytest.fixture
def measurement_block() -> bytes:
    return MEASUREMENT
