"""Data input/output helpers.

:mod:`hex_blocks` parses register dumps written as hex text so calibration
and measurement blocks can live in YAML configs or be pasted from logs.
"""

from .hex_blocks import format_hex_block, parse_hex_block

__all__ = ["format_hex_block", "parse_hex_block"]
