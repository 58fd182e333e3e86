from __future__ import annotations

import itertools

import pytest

from hangul_composer.domain.enums import ComposerAction, ComposerEvent, ComposerState
from hangul_composer.domain.hangul_compose import TRANSITIONS, symbol_for

# Fill score of the last symbol per state; -1 = nothing open
_STATE_SCORE = {
    ComposerState.EMPTY: -1,
    ComposerState.HAS_LEAD: 0,
    ComposerState.HAS_LEAD_MEDIAL: 1,
    ComposerState.HAS_LEAD_TAIL: 2,
    ComposerState.FULL: 2,
}
_EVENT_SCORE = {
    ComposerEvent.LEAD: 0,
    ComposerEvent.VOWEL: 1,
    ComposerEvent.TAIL: 2,
}
_STATE_FOR_SCORE = {
    0: ComposerState.HAS_LEAD,
    1: ComposerState.HAS_LEAD_MEDIAL,
    2: ComposerState.FULL,
}


def _expected_target(state, event):
    if state is ComposerState.HAS_LEAD and event is ComposerEvent.TAIL:
        return ComposerState.HAS_LEAD_TAIL
    return _STATE_FOR_SCORE[_EVENT_SCORE[event]]


def test_table_covers_every_state_and_event():
    expected = set(itertools.product(ComposerState, ComposerEvent))
    assert set(TRANSITIONS) == expected


@pytest.mark.parametrize("state,event", list(itertools.product(ComposerState, _EVENT_SCORE)))
def test_jamo_transitions_follow_fill_order(state, event):
    prev = _STATE_SCORE[state]
    score = _EVENT_SCORE[event]
    tail_after_vowel = score == 2 and prev == 1

    transition = TRANSITIONS[(state, event)]

    assert transition.flush == (score <= prev and not tail_after_vowel)
    assert transition.action is ComposerAction.STORE
    assert transition.target is _expected_target(state, event)


@pytest.mark.parametrize("state", list(ComposerState))
def test_non_hangul_flushes_and_resets(state):
    transition = TRANSITIONS[(state, ComposerEvent.OTHER)]
    assert transition.action is ComposerAction.EMIT
    assert transition.target is ComposerState.EMPTY
    assert transition.flush == (state is not ComposerState.EMPTY)


@pytest.mark.parametrize("state", list(ComposerState))
def test_composed_syllables_fill_through_tail(state):
    for event in (ComposerEvent.SYLLABLE, ComposerEvent.VOWEL_CARRIER):
        assert TRANSITIONS[(state, event)].target is ComposerState.FULL


def test_vowel_carrier_attaches_to_lead_without_medial():
    attaching = {key for key, t in TRANSITIONS.items() if t.action is ComposerAction.ATTACH}
    assert attaching == {
        (ComposerState.HAS_LEAD, ComposerEvent.VOWEL_CARRIER),
        (ComposerState.HAS_LEAD_TAIL, ComposerEvent.VOWEL_CARRIER),
    }
    for key in attaching:
        assert not TRANSITIONS[key].flush


@pytest.mark.parametrize("ch,marked,event", [
    ("ㄱ", False, ComposerEvent.LEAD),
    ("ㄱ", True, ComposerEvent.TAIL),
    ("ㄸ", True, ComposerEvent.LEAD),
    ("ㄳ", False, ComposerEvent.TAIL),
    ("ㅏ", False, ComposerEvent.VOWEL),
    ("ㅏ", True, ComposerEvent.VOWEL),
    ("가", False, ComposerEvent.SYLLABLE),
    ("아", False, ComposerEvent.VOWEL_CARRIER),
    ("왕", False, ComposerEvent.VOWEL_CARRIER),
    ("x", False, ComposerEvent.OTHER),
])
def test_symbol_events(ch, marked, event):
    assert symbol_for(ch, marked).event is event
