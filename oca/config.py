"""Settings for the Oca game, loaded from YAML."""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class OcaSettings:
    """Runtime settings for one game session."""
    seed: Optional[int] = None
    turn_key: str = "c"
    quit_key: str = "q"
    log_path: str = "logs/oca"
    verbose: bool = False
    alternate_screen: bool = True

    def __post_init__(self):
        if self.turn_key is None or self.quit_key is None:
            raise ValueError("turn_key and quit_key must not be empty")
        self.turn_key = str(self.turn_key).strip().lower()
        self.quit_key = str(self.quit_key).strip().lower()
        if not self.turn_key or not self.quit_key:
            raise ValueError("turn_key and quit_key must not be empty")
        if self.log_path is None or not str(self.log_path).strip():
            raise ValueError("log_path must not be empty")
        for name in ("verbose", "alternate_screen"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if self.turn_key == self.quit_key:
            raise ValueError(f"turn_key and quit_key must differ (both are '{self.turn_key}')")

    def with_overrides(self, **overrides: Any) -> "OcaSettings":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def load_settings(config_file: Optional[str] = None) -> OcaSettings:
    """Load settings from a YAML file.

    With no ``config_file`` the defaults are returned. An explicit file
    that does not exist is an error.
    """
    if config_file is None:
        return OcaSettings()

    path = Path(config_file)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.error(f"Config file not found: {path}")
        raise

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(OcaSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {path}: {', '.join(unknown)}")

    settings = OcaSettings(**_coerce(data))
    logger.info(f"Loaded settings from {path}")
    return settings


def _coerce(data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize YAML values (e.g. a bare ``c`` key or a numeric log path)."""
    coerced = dict(data)
    for key in ("turn_key", "quit_key", "log_path"):
        if key in coerced and coerced[key] is not None:
            coerced[key] = str(coerced[key])
    seed = coerced.get("seed")
    if isinstance(seed, str):
        try:
            coerced["seed"] = int(seed.strip())
        except ValueError:
            raise ValueError(f"seed must be an integer, got {seed!r}")
    return coerced
