"""Settings and logging setup for the Sketchpad Playground."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

SETTINGS_ENV = "SKETCHPAD_SETTINGS"
DEFAULT_SETTINGS_FILE = Path(__file__).with_name("sketchpad_settings.json")

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    """Raised when a settings file exists but cannot be used."""


class EditorSettings(BaseModel):
    surface_width: int = Field(800, gt=0, description="Logical drawing surface width in pixels.")
    surface_height: int = Field(600, gt=0, description="Logical drawing surface height in pixels.")
    line_width: float = Field(2.0, gt=0.0, description="Stroke width used for every shape.")
    stroke_color: str = Field("#1e1e1e", description="Stroke colour for committed shapes.")
    preview_color: str = Field("#c85050", description="Stroke colour for the live draft preview.")
    selection_color: str = Field("#3278d7", description="Stroke colour for the selected shape.")
    circle_samples: int = Field(
        128, ge=8, le=4096, description="Number of samples used to outline circles when painting."
    )


def _resolve_path(path: Optional[os.PathLike | str]) -> Optional[Path]:
    if path is not None:
        return Path(path)
    env_value = os.getenv(SETTINGS_ENV)
    if env_value:
        return Path(env_value)
    if DEFAULT_SETTINGS_FILE.exists():
        return DEFAULT_SETTINGS_FILE
    return None


def load_settings(path: Optional[os.PathLike | str] = None) -> EditorSettings:
    """Load settings from ``path``, ``$SKETCHPAD_SETTINGS`` or the packaged default file.

    Missing sources fall back to the built-in defaults. A source that exists but
    is malformed raises ``SettingsError``.
    """
    source = _resolve_path(path)
    if source is None:
        return EditorSettings()
    try:
        with source.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise SettingsError(f"Settings file '{source}' not found") from exc
    except json.JSONDecodeError as exc:
        raise SettingsError(f"Settings file '{source}' is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise SettingsError(f"Settings file '{source}' must contain a JSON object")
    try:
        settings = EditorSettings(**payload)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings in '{source}': {exc}") from exc
    logger.debug("Loaded settings from %s", source)
    return settings


def configure_logging(level: int | str = logging.WARNING) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


__all__ = [
    "DEFAULT_SETTINGS_FILE",
    "EditorSettings",
    "SETTINGS_ENV",
    "SettingsError",
    "configure_logging",
    "load_settings",
]
