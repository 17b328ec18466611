"""
Analysis parameter persistence.

PinAnalyzer and the CLI read their kernel spread, candidate depth, list
sizes, blend weight and frequency table path from a JSON file. Values
given on the command line win over the file; keys missing from the file
fall back to DEFAULT_SETTINGS. Range checks happen in PinAnalyzer, not
here.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Relative to the directory the CLI runs in
SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "sigma": 0.35,
    "top_k": 4,
    "filter_pct": 0.25,
    "limit": 10,
    "spatial_weight": 0.5,
    "frequency_path": "data/pin-frequency.csv",
    "debug_enabled": False,
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read analysis parameters, layered over DEFAULT_SETTINGS.

    An absent, unreadable or non-object file is logged and ignored.

    Args:
        path: JSON file to read (SETTINGS_FILE if None)

    Returns:
        Fresh dict holding every DEFAULT_SETTINGS key
    """
    path = Path(path) if path is not None else SETTINGS_FILE

    if not path.exists():
        logger.debug(f"No settings at {path}, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Could not read settings from {path}: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(stored, dict):
        logger.warning(f"Settings file {path} is not a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    merged = DEFAULT_SETTINGS.copy()
    merged.update(stored)
    logger.debug(f"Analysis parameters from {path}: {merged}")
    return merged


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Write analysis parameters as indented JSON.

    Write failures are logged, not raised; the analysis itself does not
    depend on the file.

    Args:
        settings: Parameters to store
        path: JSON file to write (SETTINGS_FILE if None)
    """
    path = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Analysis parameters written to {path}")
    except IOError as e:
        logger.error(f"Could not write settings to {path}: {e}")
