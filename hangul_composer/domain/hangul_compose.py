from __future__ import annotations

"""Jamo -> syllable composer (domain layer).

Reads text that mixes decomposed jamo, composed syllables and ordinary text,
and assembles the jamo into composed syllable blocks:

    >>> compose_hangul("ㅈㅏㅁㅗ")
    '자모'
    >>> compose_hangul("ㅎㅏ-ㄴㄱㅡ-ㄹㄹㅏㅇㅣㅈㅡ")
    '한글라이즈'

A consonant preceded by the tail marker ("-" by default) closes the open
syllable instead of starting a new one. Malformed sequences are never
rejected: a bare lead gets the filler vowel, a bare vowel or tail gets the
null onset ㅇ.

Primary API:
- compose_hangul(text)
- HangulComposer(tail_marker=..., filler_vowel=...).compose(text)
"""

import logging
from typing import Final, Iterable, Iterator, NamedTuple

from hangul_composer.domain.enums import (
    ComposerAction,
    ComposerEvent,
    ComposerState,
    JamoRole,
    SyllableSlot,
)
from hangul_composer.domain.hangul_unicode import (
    DEFAULT_FILLER_VOWEL,
    classify,
    decompose,
    is_jamo,
    is_null_onset,
    lead_index,
    tail_index,
    vowel_index,
)
from hangul_composer.domain.syllable_buffer import SyllableBuffer

logger = logging.getLogger(__name__)

DEFAULT_TAIL_MARKER: Final[str] = "-"


def is_valid_tail_marker(ch: str) -> bool:
    """A marker must be one punctuation-like character that is not Hangul."""
    return (
        len(ch) == 1
        and not ch.isspace()
        and not ch.isalnum()
        and classify(ch) is JamoRole.NON_HANGUL
    )


# -----------------------------------------------------------------------------
# Transition table
# -----------------------------------------------------------------------------

class Transition(NamedTuple):
    flush: bool
    action: ComposerAction
    target: ComposerState


_S = ComposerState
_E = ComposerEvent
_A = ComposerAction

# A jamo extends the open syllable only when it moves forward through
# lead -> medial -> tail. The one exception is a tail right after a vowel,
# which closes the same syllable. Composed syllables always start a new
# buffer unless they are a vowel carrier completing a lead with no medial.
TRANSITIONS: Final[dict[tuple[ComposerState, ComposerEvent], Transition]] = {
    (_S.EMPTY, _E.LEAD): Transition(False, _A.STORE, _S.HAS_LEAD),
    (_S.EMPTY, _E.VOWEL): Transition(False, _A.STORE, _S.HAS_LEAD_MEDIAL),
    (_S.EMPTY, _E.TAIL): Transition(False, _A.STORE, _S.FULL),
    (_S.EMPTY, _E.SYLLABLE): Transition(False, _A.LOAD, _S.FULL),
    (_S.EMPTY, _E.VOWEL_CARRIER): Transition(False, _A.LOAD, _S.FULL),
    (_S.EMPTY, _E.OTHER): Transition(False, _A.EMIT, _S.EMPTY),

    (_S.HAS_LEAD, _E.LEAD): Transition(True, _A.STORE, _S.HAS_LEAD),
    (_S.HAS_LEAD, _E.VOWEL): Transition(False, _A.STORE, _S.HAS_LEAD_MEDIAL),
    (_S.HAS_LEAD, _E.TAIL): Transition(False, _A.STORE, _S.HAS_LEAD_TAIL),
    (_S.HAS_LEAD, _E.SYLLABLE): Transition(True, _A.LOAD, _S.FULL),
    (_S.HAS_LEAD, _E.VOWEL_CARRIER): Transition(False, _A.ATTACH, _S.FULL),
    (_S.HAS_LEAD, _E.OTHER): Transition(True, _A.EMIT, _S.EMPTY),

    (_S.HAS_LEAD_MEDIAL, _E.LEAD): Transition(True, _A.STORE, _S.HAS_LEAD),
    (_S.HAS_LEAD_MEDIAL, _E.VOWEL): Transition(True, _A.STORE, _S.HAS_LEAD_MEDIAL),
    (_S.HAS_LEAD_MEDIAL, _E.TAIL): Transition(False, _A.STORE, _S.FULL),
    (_S.HAS_LEAD_MEDIAL, _E.SYLLABLE): Transition(True, _A.LOAD, _S.FULL),
    (_S.HAS_LEAD_MEDIAL, _E.VOWEL_CARRIER): Transition(True, _A.LOAD, _S.FULL),
    (_S.HAS_LEAD_MEDIAL, _E.OTHER): Transition(True, _A.EMIT, _S.EMPTY),

    (_S.HAS_LEAD_TAIL, _E.LEAD): Transition(True, _A.STORE, _S.HAS_LEAD),
    (_S.HAS_LEAD_TAIL, _E.VOWEL): Transition(True, _A.STORE, _S.HAS_LEAD_MEDIAL),
    (_S.HAS_LEAD_TAIL, _E.TAIL): Transition(True, _A.STORE, _S.FULL),
    (_S.HAS_LEAD_TAIL, _E.SYLLABLE): Transition(True, _A.LOAD, _S.FULL),
    (_S.HAS_LEAD_TAIL, _E.VOWEL_CARRIER): Transition(False, _A.ATTACH, _S.FULL),
    (_S.HAS_LEAD_TAIL, _E.OTHER): Transition(True, _A.EMIT, _S.EMPTY),

    (_S.FULL, _E.LEAD): Transition(True, _A.STORE, _S.HAS_LEAD),
    (_S.FULL, _E.VOWEL): Transition(True, _A.STORE, _S.HAS_LEAD_MEDIAL),
    (_S.FULL, _E.TAIL): Transition(True, _A.STORE, _S.FULL),
    (_S.FULL, _E.SYLLABLE): Transition(True, _A.LOAD, _S.FULL),
    (_S.FULL, _E.VOWEL_CARRIER): Transition(True, _A.LOAD, _S.FULL),
    (_S.FULL, _E.OTHER): Transition(True, _A.EMIT, _S.EMPTY),
}

_SLOT_FOR_EVENT: Final[dict[ComposerEvent, SyllableSlot]] = {
    _E.LEAD: SyllableSlot.LEAD,
    _E.VOWEL: SyllableSlot.MEDIAL,
    _E.TAIL: SyllableSlot.TAIL,
}


# -----------------------------------------------------------------------------
# Reading
# -----------------------------------------------------------------------------

class Symbol(NamedTuple):
    char: str
    event: ComposerEvent
    parts: tuple[int, ...] = ()


def read_symbols(text: str, tail_marker: str | None = DEFAULT_TAIL_MARKER) -> Iterator[tuple[str, bool]]:
    """Yield (char, marked_as_tail) pairs.

    The marker is consumed only when it sits right in front of a decomposed
    jamo; anywhere else it is ordinary text.
    """
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if tail_marker and ch == tail_marker and i + 1 < n and is_jamo(text[i + 1]):
            yield text[i + 1], True
            i += 2
            continue
        yield ch, False
        i += 1


def symbol_for(ch: str, marked: bool = False) -> Symbol:
    """Translate one character into the event the state machine reacts to."""
    role = classify(ch)

    if role is JamoRole.COMPOSED_SYLLABLE:
        parts = decompose(ch)
        event = _E.VOWEL_CARRIER if is_null_onset(parts[0]) else _E.SYLLABLE
        return Symbol(ch, event, parts)

    if role is JamoRole.VOWEL:
        return Symbol(ch, _E.VOWEL, (vowel_index(ch),))

    if role is JamoRole.TAIL_CONSONANT:
        return Symbol(ch, _E.TAIL, (tail_index(ch),))

    if role is JamoRole.LEAD_CONSONANT:
        if marked:
            ti = tail_index(ch)
            if ti is not None:
                return Symbol(ch, _E.TAIL, (ti,))
            logger.debug("Tail marker ignored: %r cannot close a syllable", ch)
        return Symbol(ch, _E.LEAD, (lead_index(ch),))

    return Symbol(ch, _E.OTHER)


# -----------------------------------------------------------------------------
# Composer
# -----------------------------------------------------------------------------

class HangulComposer:
    """Single-pass jamo composer.

    The instance only holds configuration. Every `compose()` call owns its
    buffer and output, so one composer can serve many threads.
    """

    def __init__(
        self,
        *,
        tail_marker: str | None = DEFAULT_TAIL_MARKER,
        filler_vowel: str = DEFAULT_FILLER_VOWEL,
    ) -> None:
        if tail_marker is not None and not is_valid_tail_marker(tail_marker):
            raise ValueError("Tail marker must be one non-Hangul punctuation character: %r" % (tail_marker,))
        vi = vowel_index(filler_vowel)
        if vi is None:
            raise ValueError("Filler vowel must be a Hangul vowel: %r" % (filler_vowel,))

        self._tail_marker = tail_marker or None
        self._filler_vowel = filler_vowel
        self._filler_vowel_index = vi

    @property
    def tail_marker(self) -> str | None:
        return self._tail_marker

    @property
    def filler_vowel(self) -> str:
        return self._filler_vowel

    def compose(self, text: str) -> str:
        out: list[str] = []
        buffer = SyllableBuffer()
        state = ComposerState.EMPTY

        for ch, marked in read_symbols(text, self._tail_marker):
            symbol = symbol_for(ch, marked)
            transition = TRANSITIONS[(state, symbol.event)]
            if transition.flush:
                self._flush(buffer, out)
            self._apply(transition.action, symbol, buffer, out)
            state = transition.target

        self._flush(buffer, out)
        return "".join(out)

    def _flush(self, buffer: SyllableBuffer, out: list[str]) -> None:
        syllable = buffer.flush(filler_vowel=self._filler_vowel_index)
        if syllable is not None:
            out.append(syllable)

    @staticmethod
    def _apply(action: ComposerAction, symbol: Symbol, buffer: SyllableBuffer, out: list[str]) -> None:
        if action is _A.STORE:
            buffer.store(_SLOT_FOR_EVENT[symbol.event], symbol.parts[0])
        elif action is _A.LOAD:
            lead, medial, tail = symbol.parts
            buffer.load(lead, medial, tail)
        elif action is _A.ATTACH:
            _, medial, tail = symbol.parts
            logger.debug("Attaching vowel carrier %r to pending lead", symbol.char)
            buffer.attach(medial, tail)
        else:
            out.append(symbol.char)


_DEFAULT_COMPOSER: Final[HangulComposer] = HangulComposer()


def compose_hangul(text: str, **kwargs) -> str:
    """Compose decomposed jamo in `text` into Hangul syllables."""
    composer = HangulComposer(**kwargs) if kwargs else _DEFAULT_COMPOSER
    return composer.compose(text)


def compose_codepoints(codepoints: Iterable[int], **kwargs) -> list[int]:
    """Codepoint-level form of `compose_hangul()`."""
    text = "".join(chr(cp) for cp in codepoints)
    return [ord(ch) for ch in compose_hangul(text, **kwargs)]
