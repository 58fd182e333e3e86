from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hangul_composer.domain.hangul_compose import HangulComposer
from hangul_composer.services.pronunciation_dictionary import PronunciationDictionary
from hangul_composer.services.settings_store import ComposerSettings

logger = logging.getLogger(__name__)


@dataclass
class TransliterationController:
    """Runs the lookup -> compose pipeline.

    Responsibilities:
    - map each word to its decomposed jamo through the pronunciation dictionary
    - compose the result into Hangul syllables

    Words missing from the dictionary pass through both stages unchanged.
    """

    dictionary: PronunciationDictionary
    composer: HangulComposer = field(default_factory=HangulComposer)

    @classmethod
    def from_settings(cls, settings: ComposerSettings) -> "TransliterationController":
        composer = HangulComposer(tail_marker=settings.tail_marker, filler_vowel=settings.filler_vowel)
        dictionary = PronunciationDictionary(data_path=settings.dictionary_path)
        logger.debug("Loaded %d dictionary entries from %s", len(dictionary), dictionary.data_path)
        return cls(dictionary=dictionary, composer=composer)

    def transliterate(self, text: str) -> str:
        return self.composer.compose(self.dictionary.transliterate(text))

    def compose_only(self, text: str) -> str:
        return self.composer.compose(text)
