from __future__ import annotations

from enum import Enum, IntEnum, auto


class JamoRole(Enum):
    """Structural role of a single character, derived from its Unicode block."""

    LEAD_CONSONANT = auto()
    VOWEL = auto()
    TAIL_CONSONANT = auto()
    COMPOSED_SYLLABLE = auto()
    NON_HANGUL = auto()


class SyllableSlot(IntEnum):
    """Position inside a syllable block.

    The values order the positions: a syllable fills LEAD -> MEDIAL -> TAIL.
    """

    LEAD = 0
    MEDIAL = 1
    TAIL = 2


class ComposerState(Enum):
    """How far the open syllable has been filled by the most recent symbol.

    EMPTY            : nothing buffered (stream start, or right after pass-through text)
    HAS_LEAD         : the last symbol was a lead consonant
    HAS_LEAD_MEDIAL  : the last symbol was a vowel (the lead may still be missing
                       and is filled with the null onset on flush)
    HAS_LEAD_TAIL    : a tail closed a bare lead; the medial is still missing
    FULL             : the last symbol was a tail, or a whole syllable was loaded
    """

    EMPTY = auto()
    HAS_LEAD = auto()
    HAS_LEAD_MEDIAL = auto()
    HAS_LEAD_TAIL = auto()
    FULL = auto()


class ComposerEvent(Enum):
    """What the incoming symbol means to the composer."""

    LEAD = auto()
    VOWEL = auto()
    TAIL = auto()
    SYLLABLE = auto()
    VOWEL_CARRIER = auto()  # composed syllable with a null-onset lead (아, 안, ...)
    OTHER = auto()


class ComposerAction(Enum):
    STORE = auto()
    LOAD = auto()
    ATTACH = auto()
    EMIT = auto()
