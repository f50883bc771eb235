"""Shared utility functions."""

from .params import (
    parse_params,
    load_params,
    get_output_params,
    get_period_params,
)
from .records import read_text, first_record, load_record
from .output import format_fasta, write_output

__all__ = [
    "parse_params",
    "load_params",
    "get_output_params",
    "get_period_params",
    "read_text",
    "first_record",
    "load_record",
    "format_fasta",
    "write_output",
]
