"""Parsing of register dumps written as hex text (config files, logs)."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..sensors.registers import OutOfRangeError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,;]+")


def _split_tokens(text: str) -> List[str]:
    lines = [line.split("#", 1)[0] for line in text.splitlines()]
    return [tok for tok in _SEPARATORS.split(" ".join(lines)) if tok]


def parse_hex_block(text: str, *, expected_len: Optional[int] = None) -> bytes:
    """
    Parse a register dump such as ``"36 6C 05 68"`` or ``"0x36, 0x6C"``.

    Tokens may also be run together (``"366C0568"``). Anything after ``#`` on
    a line is a comment. Raises ``ValueError`` for malformed tokens and
    :class:`OutOfRangeError` when ``expected_len`` is given and not matched.
    """
    out = bytearray()
    for token in _split_tokens(text):
        digits = token[2:] if token.lower().startswith("0x") else token
        if len(digits) == 1:
            digits = "0" + digits
        try:
            if not digits:
                raise ValueError("empty token")
            out.extend(bytes.fromhex(digits))
        except ValueError as exc:
            raise ValueError(f"Bad hex token {token!r} in register dump") from exc

    if expected_len is not None and len(out) != expected_len:
        raise OutOfRangeError(f"Expected {expected_len} bytes in register dump, got {len(out)}")

    logger.debug("Parsed %d-byte register block", len(out))
    return bytes(out)


def format_hex_block(data: bytes) -> str:
    """Render ``data`` as space separated upper-case hex pairs."""
    return " ".join(f"{b:02X}" for b in data)
