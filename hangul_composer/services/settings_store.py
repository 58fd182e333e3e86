from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from hangul_composer.domain.hangul_compose import DEFAULT_TAIL_MARKER, is_valid_tail_marker
from hangul_composer.domain.enums import JamoRole
from hangul_composer.domain.hangul_unicode import DEFAULT_FILLER_VOWEL, classify

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ComposerSettings:
    tail_marker: str | None = DEFAULT_TAIL_MARKER
    filler_vowel: str = DEFAULT_FILLER_VOWEL
    dictionary_path: Path | None = None
    log_level: str = "WARNING"


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide a typed `ComposerSettings` view with validated values

    settings.yaml structure:
      composer:
        tail_marker: "-"       # null disables tail markers
        filler_vowel: "ㅡ"
      dictionary:
        path: data/dictionary.yaml   # relative to the settings file
      logging:
        level: WARNING
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except OSError as e:
            logger.warning("Failed to persist settings %s: %s", p, e)

    def composer_settings(self) -> ComposerSettings:
        s = self.load()

        def _section(key: str) -> dict[str, Any]:
            v = s.get(key) or {}
            return v if isinstance(v, dict) else {}

        composer = _section("composer")
        dictionary = _section("dictionary")
        logging_section = _section("logging")

        return ComposerSettings(
            tail_marker=self._tail_marker(composer),
            filler_vowel=self._filler_vowel(composer),
            dictionary_path=self._dictionary_path(dictionary),
            log_level=self._log_level(logging_section),
        )

    # --- Validation helpers ---

    @staticmethod
    def _tail_marker(section: dict[str, Any]) -> str | None:
        if "tail_marker" not in section:
            return DEFAULT_TAIL_MARKER
        v = section.get("tail_marker")
        if v is None or v == "":
            return None
        if isinstance(v, str) and is_valid_tail_marker(v):
            return v
        logger.warning("Invalid tail_marker %r; using %r", v, DEFAULT_TAIL_MARKER)
        return DEFAULT_TAIL_MARKER

    @staticmethod
    def _filler_vowel(section: dict[str, Any]) -> str:
        v = section.get("filler_vowel", DEFAULT_FILLER_VOWEL)
        if isinstance(v, str) and len(v) == 1 and classify(v) is JamoRole.VOWEL:
            return v
        logger.warning("Invalid filler_vowel %r; using %r", v, DEFAULT_FILLER_VOWEL)
        return DEFAULT_FILLER_VOWEL

    def _dictionary_path(self, section: dict[str, Any]) -> Path | None:
        v = section.get("path")
        if not isinstance(v, str) or not v.strip():
            return None
        p = Path(v.strip()).expanduser()
        if not p.is_absolute():
            p = self._path.parent / p
        return p

    @staticmethod
    def _log_level(section: dict[str, Any]) -> str:
        v = section.get("level", "WARNING")
        if isinstance(v, str) and v.strip().upper() in _LOG_LEVELS:
            return v.strip().upper()
        logger.warning("Invalid logging level %r; using WARNING", v)
        return "WARNING"
