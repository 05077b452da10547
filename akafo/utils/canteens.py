"""
Canteen configuration.

Loads the named canteen feeds from canteens.yaml. The file location can be
overridden with the CANTEENS_CONFIG_PATH env variable.

Examples:
    >>> get_canteen().url
    'https://www.akafoe.de/...'
    >>> get_canteen("rub").name
    'Mensa der Ruhr-Universität Bochum'
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_CANTEENS_PATH = Path(__file__).parent.parent / "configs" / "canteens.yaml"
CANTEENS_CONFIG_PATH = Path(os.getenv("CANTEENS_CONFIG_PATH", str(DEFAULT_CANTEENS_PATH)))


@dataclass(frozen=True)
class Canteen:
    """A canteen and the URL of its menu feed."""

    key: str
    name: str
    url: str


def _load_config(config_path: Optional[Path] = None) -> dict:
    if config_path is None:
        config_path = CANTEENS_CONFIG_PATH
    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def load_canteens(config_path: Optional[Path] = None) -> Dict[str, Canteen]:
    """
    Load all configured canteens.

    Args:
        config_path: Optional path to canteens.yaml (defaults to CANTEENS_CONFIG_PATH)

    Returns:
        Dict mapping canteen key to Canteen
    """
    config = _load_config(config_path)
    return {
        key: Canteen(key=key, name=entry["name"], url=entry["url"])
        for key, entry in config["canteens"].items()
    }


def get_canteen(key: Optional[str] = None, config_path: Optional[Path] = None) -> Canteen:
    """
    Look up one canteen by key.

    Args:
        key: Canteen key; the config's `default` entry when omitted
        config_path: Optional path to canteens.yaml

    Raises:
        ValueError: If the key is not configured
    """
    if key is None:
        key = _load_config(config_path)["default"]

    canteens = load_canteens(config_path)
    if key not in canteens:
        available = list(canteens.keys())
        raise ValueError(f"Canteen '{key}' not found. Available canteens: {available}")
    return canteens[key]
