from __future__ import annotations

import json
import logging

import pytest

from sketchpad_playground import config
from sketchpad_playground.config import (
    SETTINGS_ENV,
    EditorSettings,
    SettingsError,
    configure_logging,
    load_settings,
)


@pytest.fixture()
def no_settings_sources(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.delenv(SETTINGS_ENV, raising=False)
    monkeypatch.setattr(config, "DEFAULT_SETTINGS_FILE", tmp_path / "absent.json")


def test_defaults_match_reference_surface(no_settings_sources) -> None:
    settings = load_settings()
    assert settings == EditorSettings()
    assert (settings.surface_width, settings.surface_height) == (800, 600)
    assert settings.line_width == 2.0


def test_load_from_explicit_path(tmp_path, no_settings_sources) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"surface_width": 1024, "stroke_color": "#000000"}), encoding="utf-8")
    settings = load_settings(path)
    assert settings.surface_width == 1024
    assert settings.surface_height == 600
    assert settings.stroke_color == "#000000"


def test_load_from_environment(tmp_path, monkeypatch: pytest.MonkeyPatch, no_settings_sources) -> None:
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"line_width": 3.5}), encoding="utf-8")
    monkeypatch.setenv(SETTINGS_ENV, str(path))
    assert load_settings().line_width == 3.5


def test_packaged_default_file_is_used(tmp_path, monkeypatch: pytest.MonkeyPatch, no_settings_sources) -> None:
    path = tmp_path / "sketchpad_settings.json"
    path.write_text(json.dumps({"circle_samples": 64}), encoding="utf-8")
    monkeypatch.setattr(config, "DEFAULT_SETTINGS_FILE", path)
    assert load_settings().circle_samples == 64


@pytest.mark.parametrize(
    "content",
    ["{not json", "[1, 2]", json.dumps({"surface_width": 0}), json.dumps({"circle_samples": "lots"})],
)
def test_bad_settings_raise(tmp_path, content, no_settings_sources) -> None:
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(path)


def test_missing_explicit_path_raises(tmp_path, no_settings_sources) -> None:
    with pytest.raises(SettingsError):
        load_settings(tmp_path / "nope.json")


def test_configure_logging_accepts_names(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging("debug")
    configure_logging("not-a-level")
    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == logging.WARNING
