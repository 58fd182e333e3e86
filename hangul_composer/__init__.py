"""Compose decomposed Hangul jamo into syllable blocks."""

from hangul_composer.domain.hangul_compose import HangulComposer, compose_codepoints, compose_hangul  # noqa: F401

__all__ = [
    "HangulComposer",
    "compose_codepoints",
    "compose_hangul",
]
