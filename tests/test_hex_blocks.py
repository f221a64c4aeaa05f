import pytest

from bmpdecode.dataio.hex_blocks import format_hex_block, parse_hex_block
from bmpdecode.sensors.registers import OutOfRangeError


def test_parse_space_separated() -> None:
    assert parse_hex_block("6C 07 00 7E 4C 00 00 00") == bytes(
        [0x6C, 0x07, 0x00, 0x7E, 0x4C, 0x00, 0x00, 0x00]
    )


def test_parse_c_style_with_comments() -> None:
    text = """
    0x36, 0x6C,     # T1
    0x05, 0x68,     # T2
    """
    assert parse_hex_block(text) == b"\x36\x6C\x05\x68"


def test_parse_run_together_and_single_digit() -> None:
    assert parse_hex_block("366C0568") == b"\x36\x6C\x05\x68"
    assert parse_hex_block("0x0 f") == b"\x00\x0F"


def test_parse_rejects_bad_tokens() -> None:
    with pytest.raises(ValueError):
        parse_hex_block("36 XY")
    with pytest.raises(ValueError):
        parse_hex_block("366")
    with pytest.raises(ValueError):
        parse_hex_block("0x")


def test_parse_enforces_expected_length() -> None:
    with pytest.raises(OutOfRangeError):
        parse_hex_block("00 " * 20, expected_len=26)
    assert len(parse_hex_block("00 " * 8, expected_len=8)) == 8


def test_format_round_trips_text() -> None:
    assert format_hex_block(b"\x6C\x07\x00") == "6C 07 00"
    assert parse_hex_block(format_hex_block(b"\xF8\xC6")) == b"\xF8\xC6"
