"""
Configuration loader
"""
import os
import yaml
from pathlib import Path
from judgeboard.models import Settings


DEFAULT_CONFIG_PATH = "config/judging.yaml"


def load_config(config_path: str = None) -> Settings:
    """
    Load configuration from YAML file

    The path defaults to $JUDGEBOARD_CONFIG, then config/judging.yaml.
    $JUDGEBOARD_ADMIN_KEY overrides admin_key from the file.

    Args:
        config_path: Path to config file

    Returns:
        Settings object
    """
    path = Path(config_path or os.environ.get("JUDGEBOARD_CONFIG", DEFAULT_CONFIG_PATH))

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    admin_key = os.environ.get("JUDGEBOARD_ADMIN_KEY")
    if admin_key:
        data['admin_key'] = admin_key

    return Settings(**data)
