from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final, Iterable

import yaml

logger = logging.getLogger(__name__)

_TRIM_CHARS: Final[str] = ".,!?;:\"'()"


def _default_data_path() -> Path:
    """Return <project_root>/data/dictionary.yaml."""
    return Path(__file__).resolve().parents[2] / "data" / "dictionary.yaml"


def normalise_word(word: str) -> str:
    return word.strip(_TRIM_CHARS).lower()


class PronunciationDictionary:
    """Word -> decomposed jamo lookup loaded from YAML.

    Supported YAML shapes (intentionally tolerant):

    1) A mapping under `words`
        words: {hello: "ㅎㅔ-ㄹㄹㅗ", seoul: "ㅅㅓㅇㅜ-ㄹ"}

    2) A flat mapping
        hello: "ㅎㅔ-ㄹㄹㅗ"

    3) A list of dict items under `words`
        words: [{word: hello, jamo: "ㅎㅔ-ㄹㄹㅗ"}, ...]

    Keys are normalised (lower-cased, punctuation trimmed) on load. A missing
    or malformed file gives an empty dictionary, which passes every word
    through unchanged.
    """

    def __init__(self, *, data_path: Path | None = None, entries: dict[str, str] | None = None) -> None:
        self._data_path = data_path or _default_data_path()
        self._entries: dict[str, str] = {}
        if entries is not None:
            self._add_all(entries.items())
        else:
            self._load()

    @property
    def data_path(self) -> Path:
        return self._data_path

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, word: str) -> str:
        """Return the phonetic form of `word`, or `word` itself on a miss."""
        phonetic = self._entries.get(normalise_word(word))
        return word if phonetic is None else phonetic

    def transliterate(self, text: str) -> str:
        return " ".join(self.lookup(w) for w in text.split())

    # --- Loading ---

    def _load(self) -> None:
        data = self._read_yaml()
        if data is None:
            return

        container: Any = data.get("words", data) if isinstance(data, dict) else data

        if isinstance(container, dict):
            self._add_all(container.items())
        elif isinstance(container, list):
            self._add_all(self._iter_list_items(container))
        else:
            logger.warning("Unsupported dictionary layout in %s", self._data_path)

    def _read_yaml(self) -> Any:
        path = self._data_path
        if not path.exists() or not path.is_file():
            logger.debug("Pronunciation dictionary missing: %s", path)
            return None
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as e:
            logger.warning("Failed to read pronunciation dictionary %s: %s", path, e)
            return None
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            logger.warning("Malformed pronunciation dictionary %s: %s", path, e)
            return None

    @staticmethod
    def _iter_list_items(items: list[Any]) -> Iterable[tuple[Any, Any]]:
        for item in items:
            if not isinstance(item, dict):
                continue
            word = item.get("word")
            phonetic = item.get("jamo", item.get("phonetic"))
            yield word, phonetic

    def _add_all(self, pairs: Iterable[tuple[Any, Any]]) -> None:
        for word, phonetic in pairs:
            if not isinstance(word, str) or not isinstance(phonetic, str):
                continue
            key = normalise_word(word)
            value = phonetic.strip()
            if key and value:
                self._entries[key] = value
