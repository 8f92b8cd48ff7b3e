# File: genointervals/config.py
# Location: genointervals/genointervals/config.py

"""
Configuration management module.

This module handles loading configuration from a JSON file.
All default values reside in config.json, which is included in
the installed package directory.

If no config_file is provided, this module attempts to load the default
config.json from the package installation directory.
"""

import json
import os
from typing import Any, Dict, Optional

from .columns import BaseColumns
from .formats import COLUMN_LAYOUTS
from .parser import ParseOptions

_OPTION_KEYS = (
    "start_offset",
    "max_lines_to_read",
    "delimiter",
    "hash_function",
    "assembly",
    "strict_chromosome_filtering",
    "encoding",
)


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    If no config_file is provided, the function attempts to load the
    'config.json' from the installed package directory. If it fails
    to find or parse the file, it raises an error.

    Parameters
    ----------
    config_file : str, optional
        Path to a configuration file in JSON format. If None, defaults to
        the package-installed 'config.json'.

    Returns
    -------
    dict
        Configuration dictionary loaded from the JSON file.

    Raises
    ------
    FileNotFoundError
        If the specified configuration file does not exist.
    ValueError
        If there is an error parsing the JSON configuration file.
    """
    if not config_file:
        config_file = os.path.join(os.path.dirname(__file__), "config.json")

    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file '{config_file}' not found.")

    with open(config_file, "r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error parsing JSON configuration: {e}")

    return config


def options_from_config(cfg: Dict[str, Any]) -> ParseOptions:
    """
    Build :class:`ParseOptions` from a configuration dictionary.

    Keys missing from ``cfg`` keep the ParseOptions defaults.
    """
    values = {key: cfg[key] for key in _OPTION_KEYS if key in cfg}
    options = ParseOptions(**values)
    options.validate()
    return options


def bed_options_from_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Keyword arguments for the BED parser's value handling."""
    return dict(cfg.get("bed", {}))


def columns_from_config(cfg: Dict[str, Any], file_format: str) -> Optional[BaseColumns]:
    """
    Column layout of ``file_format`` from the ``columns`` section, if present.

    Returns None when the configuration has no layout for the format, in which
    case the parser's default layout applies.
    """
    layout = cfg.get("columns", {}).get(file_format.lower())
    if layout is None:
        return None
    columns = COLUMN_LAYOUTS[file_format.lower()].from_dict(layout)
    columns.validate()
    return columns
