from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from labyrinth.errors import ConfigError

logger = logging.getLogger(__name__)

_PKG = "labyrinth.config"
SETTINGS_FILE_ENV = "LABYRINTH_SETTINGS_FILE"


@dataclass(frozen=True)
class MapLimits:
    """Upper bounds on the size of a loadable map."""

    max_rows: int = 100
    max_cols: int = 100


@dataclass(frozen=True)
class Settings:
    limits: MapLimits = field(default_factory=MapLimits)
    log_level: str = "WARNING"

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(f"cannot read settings file {str(path)!r}: {exc.strerror or exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"settings file {str(path)!r} is not valid YAML: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"settings file {str(path)!r} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @staticmethod
    def _env_overrides(env: Mapping[str, str]) -> dict:
        # Values that do not parse are passed through untouched so the schema
        # reports them alongside any other problem.
        out: Dict[str, Any] = {}
        for env_key, name in (("LABYRINTH_MAX_ROWS", "max_rows"), ("LABYRINTH_MAX_COLS", "max_cols")):
            raw = env.get(env_key)
            if raw is None or raw == "":
                continue
            try:
                value: Any = int(raw)
            except ValueError:
                value = raw
            out.setdefault("limits", {})[name] = value
        level = env.get("LABYRINTH_LOG_LEVEL")
        if level:
            out["logging"] = {"level": level.strip().upper()}
        return out

    @staticmethod
    def _validate(data: dict) -> None:
        schema_text = resources.files(_PKG).joinpath("settings.schema.json").read_text(encoding="utf-8")
        validator = Draft7Validator(json.loads(schema_text))
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
        if errors:
            details = []
            for e in errors:
                path = "/".join(str(p) for p in e.path) or "<root>"
                details.append(f"at {path}: {e.message}")
            raise ConfigError("settings validation failed", details)

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        limits = MapLimits(**data.get("limits", {}))
        level = data.get("logging", {}).get("level", "WARNING")
        return Settings(limits=limits, log_level=level)

    @classmethod
    def load(cls, user_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings from built-in defaults, an optional user file and the environment.

        Order of precedence (lowest to highest): packaged defaults < user file
        < environment. If user_path is None, LABYRINTH_SETTINGS_FILE names the
        user file when set. An explicitly requested file that does not exist
        is an error.

        Raises:
            ConfigError: if a file cannot be read or the merged values fail
                schema validation.
        """
        env = os.environ if env is None else env
        with resources.files(_PKG).joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if user_path is None and env.get(SETTINGS_FILE_ENV):
            user_path = Path(env[SETTINGS_FILE_ENV]).expanduser()
        if user_path is not None:
            user_path = Path(user_path)
            if not user_path.exists():
                raise ConfigError(f"settings file not found: {str(user_path)!r}")
            data = cls._deep_merge(data, cls._load_yaml(user_path))
            logger.info("Loaded user settings from %s", user_path)

        data = cls._deep_merge(data, cls._env_overrides(env))
        cls._validate(data)
        settings = cls._from_dict(data)
        logger.debug("Settings merged: %s", settings)
        return settings


__all__ = ["MapLimits", "Settings", "SETTINGS_FILE_ENV"]
