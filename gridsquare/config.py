"""YAML configuration for the gridsquare command-line tool."""

import sys
import yaml
from pathlib import Path
from typing import Any

from .errors import GridsquareError
from .grid import decode, validate_precision


DEFAULT_CONFIG = {
    "home_grid": "DN40bi",  # Reference point for one-argument distance queries
    "precision": 6,         # Default encode length (even, 6-20)
    "units": "km",          # Distance units shown by default: km or mi
}

UNITS = ("km", "mi")


def _search_paths(config_path: Path | None) -> list[Path]:
    paths = []
    if config_path:
        paths.append(Path(config_path))

    # Local config (gitignored, stays with repo)
    repo_root = Path(__file__).parent.parent
    paths.append(repo_root / "local" / "config" / "config.yaml")

    # XDG config
    paths.append(Path.home() / ".config" / "gridsquare" / "config.yaml")
    return paths


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML file with defaults.

    Searches for config in:
    1. Provided path
    2. local/config/config.yaml (user config, gitignored)
    3. ~/.config/gridsquare/config.yaml (XDG standard)
    4. Falls back to defaults

    Args:
        config_path: Optional path to config file

    Returns:
        Dict with configuration values
    """
    config = DEFAULT_CONFIG.copy()

    for path in _search_paths(config_path):
        if not path.exists():
            continue
        try:
            with open(path) as f:
                user_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Warning: Could not load config from {path}: {e}", file=sys.stderr)
            continue
        if isinstance(user_config, dict):
            config.update(user_config)
        elif user_config is not None:
            print(f"Warning: Ignoring config {path}: expected a mapping", file=sys.stderr)
            continue
        return config

    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration dict to save
        config_path: Optional path to save to (defaults to local/config/config.yaml)
    """
    if config_path is None:
        repo_root = Path(__file__).parent.parent
        config_path = repo_root / "local" / "config" / "config.yaml"

    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: dict[str, Any]) -> list[str]:
    """Check configuration values.

    Returns:
        List of problem descriptions (empty if config is usable)
    """
    problems = []

    try:
        validate_precision(config.get("precision"))
    except GridsquareError as e:
        problems.append(f"precision: {e}")

    if config.get("units") not in UNITS:
        problems.append(f"units: must be one of {', '.join(UNITS)}, got {config.get('units')!r}")

    try:
        decode(config.get("home_grid"))
    except GridsquareError as e:
        problems.append(f"home_grid: {e}")

    return problems
