from __future__ import annotations

"""Hangul Unicode classification and composition arithmetic.

This module is *domain* logic (pure functions, no I/O, no state).

It provides:
  - The canonical Unicode orderings of lead consonants (choseong), vowels
    (jungseong) and tail consonants (jongseong) as compatibility jamo
  - `classify()` for the Hangul role of a single character
  - `decompose()` / `compose()` for the Hangul Syllables offset formula:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex

Both compatibility jamo (U+3131..U+3163, the ones people type and print) and
conjoining jamo (U+1100..U+11FF) are recognised. Archaic jamo are treated as
ordinary text because they have no place in the composition formula.
"""

from typing import Final

from hangul_composer.domain.enums import JamoRole


# -----------------------------------------------------------------------------
# Unicode constants
# -----------------------------------------------------------------------------

S_BASE: Final[int] = 0xAC00
L_COUNT: Final[int] = 19
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
N_COUNT: Final[int] = V_COUNT * T_COUNT  # 588
S_COUNT: Final[int] = L_COUNT * N_COUNT  # 11172

# Conjoining jamo bases. T_BASE is one below the first real final because
# tail index 0 means "no final".
L_BASE: Final[int] = 0x1100
V_BASE: Final[int] = 0x1161
T_BASE: Final[int] = 0x11A7


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

# The consonant written in front of vowel-initial syllables (아, 이, ...).
NULL_ONSET: Final[str] = "ㅇ"
NULL_ONSET_INDEX: Final[int] = CHOSEONG.index(NULL_ONSET)

# Vowel used when a syllable has to be synthesized without one.
DEFAULT_FILLER_VOWEL: Final[str] = "ㅡ"

_COMPAT_CONSONANT_RANGE: Final[range] = range(0x3131, 0x314F)
_COMPAT_VOWEL_RANGE: Final[range] = range(0x314F, 0x3164)


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG) if j}


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def is_composed_syllable(ch: str) -> bool:
    return len(ch) == 1 and 0 <= ord(ch) - S_BASE < S_COUNT


def _is_conjoining_lead(code: int) -> bool:
    return 0 <= code - L_BASE < L_COUNT


def _is_conjoining_vowel(code: int) -> bool:
    return 0 <= code - V_BASE < V_COUNT


def _is_conjoining_tail(code: int) -> bool:
    return 0 < code - T_BASE < T_COUNT


def classify(ch: str) -> JamoRole:
    """Return the Hangul role of a single character.

    Compatibility consonants default to LEAD_CONSONANT; the clusters that can
    only close a syllable (ㄳ, ㄺ, ...) are TAIL_CONSONANT. "Not Hangul" is an
    ordinary answer, never an error.
    """
    if len(ch) != 1:
        return JamoRole.NON_HANGUL

    code = ord(ch)
    if 0 <= code - S_BASE < S_COUNT:
        return JamoRole.COMPOSED_SYLLABLE

    if code in _COMPAT_CONSONANT_RANGE:
        if ch in _CHO_MAP:
            return JamoRole.LEAD_CONSONANT
        if ch in _JONG_MAP:
            return JamoRole.TAIL_CONSONANT
        return JamoRole.NON_HANGUL
    if code in _COMPAT_VOWEL_RANGE:
        return JamoRole.VOWEL

    if _is_conjoining_lead(code):
        return JamoRole.LEAD_CONSONANT
    if _is_conjoining_vowel(code):
        return JamoRole.VOWEL
    if _is_conjoining_tail(code):
        return JamoRole.TAIL_CONSONANT

    return JamoRole.NON_HANGUL


def is_jamo(ch: str) -> bool:
    """True for a decomposed lead, vowel or tail (not a whole syllable)."""
    return classify(ch) in (JamoRole.LEAD_CONSONANT, JamoRole.VOWEL, JamoRole.TAIL_CONSONANT)


# -----------------------------------------------------------------------------
# Component indices
# -----------------------------------------------------------------------------

def lead_index(ch: str) -> int | None:
    """Return the choseong index of `ch`, or None if it cannot start a syllable."""
    if len(ch) != 1:
        return None
    code = ord(ch)
    if _is_conjoining_lead(code):
        return code - L_BASE
    return _CHO_MAP.get(ch)


def vowel_index(ch: str) -> int | None:
    if len(ch) != 1:
        return None
    code = ord(ch)
    if _is_conjoining_vowel(code):
        return code - V_BASE
    return _JUNG_MAP.get(ch)


def tail_index(ch: str) -> int | None:
    """Return the jongseong index (1..27) of `ch`, or None if it cannot close a syllable.

    Conjoining lead consonants are looked up through their compatibility
    form, so a marked ᄂ closes a syllable the same way a marked ㄴ does.
    """
    if len(ch) != 1:
        return None
    code = ord(ch)
    if _is_conjoining_tail(code):
        return code - T_BASE
    if _is_conjoining_lead(code):
        return _JONG_MAP.get(CHOSEONG[code - L_BASE])
    return _JONG_MAP.get(ch)


def is_null_onset(lead_idx: int) -> bool:
    return lead_idx == NULL_ONSET_INDEX


# -----------------------------------------------------------------------------
# Offset arithmetic
# -----------------------------------------------------------------------------

def decompose(ch: str) -> tuple[int, int, int]:
    """Split a composed syllable into (lead, vowel, tail) indices.

    Raises:
        ValueError: if `ch` is not a composed Hangul syllable.
    """
    if not is_composed_syllable(ch):
        raise ValueError("Not a composed Hangul syllable: %r" % (ch,))

    syllable_index = ord(ch) - S_BASE
    tail = syllable_index % T_COUNT
    vowel = (syllable_index // T_COUNT) % V_COUNT
    lead = syllable_index // N_COUNT
    return lead, vowel, tail


def compose(lead_idx: int, vowel_idx: int, tail_idx: int = 0) -> str:
    """Compose one syllable from component indices.

    Raises:
        ValueError: if any index is outside the 19 x 21 x 28 grid.
    """
    if not (0 <= lead_idx < L_COUNT and 0 <= vowel_idx < V_COUNT and 0 <= tail_idx < T_COUNT):
        raise ValueError(
            "Invalid indices for compose: lead=%r vowel=%r tail=%r" % (lead_idx, vowel_idx, tail_idx)
        )
    return chr(S_BASE + (lead_idx * V_COUNT + vowel_idx) * T_COUNT + tail_idx)


def split_to_jamo(ch: str) -> tuple[str, str, str]:
    """Return the compatibility jamo of a composed syllable; tail is "" when absent."""
    lead, vowel, tail = decompose(ch)
    return CHOSEONG[lead], JUNGSEONG[vowel], JONGSEONG[tail]
