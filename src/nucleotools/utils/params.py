"""Parameter file parsing utilities."""

from pathlib import Path
from typing import Any

from nucleotools.sequence.record import DEFAULT_MAX_WINDOW, DEFAULT_OLIGO


def parse_params(param_file: str | Path) -> dict[str, Any]:
    """
    Parse a params.txt file of NAME = value lines.

    Numeric values are parsed as float first, then cast where needed.
    Lines starting with '#' are comments.

    Args:
        param_file: Path to the parameters file

    Returns:
        Dictionary of parameter name -> value
    """
    params = {}
    with open(param_file) as f:
        for line in f:
            if line.lstrip().startswith("#"):
                continue
            if "=" in line:
                name, value = line.split("=", 1)
                name = name.strip()
                value = value.strip()
                try:
                    params[name] = float(value)
                except ValueError:
                    params[name] = value
    return params


def load_params(param_file: str | Path | None) -> dict[str, Any]:
    """Parse a params file, or return an empty dict when none is given."""
    if not param_file:
        return {}
    return parse_params(param_file)


def get_output_params(params: dict) -> dict:
    """Extract output formatting parameters from parsed params dict."""
    return {
        "line_width": int(params.get("LINE_WIDTH", 60)),
        "decimals": int(params.get("DECIMALS", 3)),
    }


def get_period_params(params: dict) -> dict:
    """Extract periodicity parameters from parsed params dict."""
    return {
        "oligo": str(params.get("OLIGO", DEFAULT_OLIGO)),
        "max_window": int(params.get("MAX_WINDOW", DEFAULT_MAX_WINDOW)),
    }
