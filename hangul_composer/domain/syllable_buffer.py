from __future__ import annotations

"""Work-in-progress syllable and its synthesizer (domain layer).

A `SyllableBuffer` holds up to three component indices (lead / medial / tail).
Empty slots are `None`; index 0 is a real lead (ㄱ) and a real vowel (ㅏ).

`synthesize()` turns a possibly incomplete buffer into one displayable
syllable: a missing lead becomes the null onset ㅇ, a missing medial becomes
the filler vowel (ㅡ unless configured otherwise), a missing tail stays absent.
"""

from dataclasses import dataclass

from hangul_composer.domain.enums import SyllableSlot
from hangul_composer.domain.hangul_unicode import (
    DEFAULT_FILLER_VOWEL,
    NULL_ONSET_INDEX,
    compose,
    vowel_index,
)

_DEFAULT_FILLER_VOWEL_INDEX: int = vowel_index(DEFAULT_FILLER_VOWEL)  # type: ignore[assignment]


def synthesize(
    lead: int | None,
    medial: int | None,
    tail: int | None,
    *,
    filler_vowel: int = _DEFAULT_FILLER_VOWEL_INDEX,
) -> str:
    """Compose a syllable from buffer slots, filling the gaps."""
    li = NULL_ONSET_INDEX if lead is None else lead
    vi = filler_vowel if medial is None else medial
    ti = 0 if tail is None else tail
    return compose(li, vi, ti)


@dataclass
class SyllableBuffer:
    lead: int | None = None
    medial: int | None = None
    tail: int | None = None

    def is_empty(self) -> bool:
        return self.lead is None and self.medial is None and self.tail is None

    def store(self, slot: SyllableSlot, index: int) -> None:
        if slot is SyllableSlot.LEAD:
            self.lead = index
        elif slot is SyllableSlot.MEDIAL:
            self.medial = index
        else:
            self.tail = index

    def load(self, lead: int, medial: int, tail: int) -> None:
        """Replace the contents with the parts of a composed syllable (tail 0 = none)."""
        self.lead = lead
        self.medial = medial
        self.tail = tail or None

    def attach(self, medial: int, tail: int) -> None:
        """Give a lead with no medial the medial and tail of a vowel carrier (tail 0 = none)."""
        self.medial = medial
        self.tail = tail or None

    def clear(self) -> None:
        self.lead = None
        self.medial = None
        self.tail = None

    def flush(self, *, filler_vowel: int = _DEFAULT_FILLER_VOWEL_INDEX) -> str | None:
        """Synthesize the buffered syllable and clear the buffer.

        Returns None when there was nothing to flush.
        """
        if self.is_empty():
            return None
        syllable = synthesize(self.lead, self.medial, self.tail, filler_vowel=filler_vowel)
        self.clear()
        return syllable
