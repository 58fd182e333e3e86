from __future__ import annotations

import itertools

import pytest

from hangul_composer.domain.enums import JamoRole
from hangul_composer.domain.hangul_unicode import (
    CHOSEONG,
    JONGSEONG,
    JUNGSEONG,
    L_COUNT,
    NULL_ONSET_INDEX,
    T_COUNT,
    V_COUNT,
    classify,
    compose,
    decompose,
    is_composed_syllable,
    is_jamo,
    is_null_onset,
    lead_index,
    split_to_jamo,
    tail_index,
    vowel_index,
)


@pytest.mark.classification
@pytest.mark.parametrize("ch,role", [
    ("ㄱ", JamoRole.LEAD_CONSONANT),
    ("ㅎ", JamoRole.LEAD_CONSONANT),
    ("ㄳ", JamoRole.TAIL_CONSONANT),
    ("ㅀ", JamoRole.TAIL_CONSONANT),
    ("ㅄ", JamoRole.TAIL_CONSONANT),
    ("ㅏ", JamoRole.VOWEL),
    ("ㅣ", JamoRole.VOWEL),
    ("가", JamoRole.COMPOSED_SYLLABLE),
    ("힣", JamoRole.COMPOSED_SYLLABLE),
    ("ᄀ", JamoRole.LEAD_CONSONANT),
    ("ᅡ", JamoRole.VOWEL),
    ("ᆨ", JamoRole.TAIL_CONSONANT),
    ("a", JamoRole.NON_HANGUL),
    (" ", JamoRole.NON_HANGUL),
    ("-", JamoRole.NON_HANGUL),
    ("ㅥ", JamoRole.NON_HANGUL),  # archaic compatibility jamo
    ("ᆧ", JamoRole.NON_HANGUL),
    ("漢", JamoRole.NON_HANGUL),
    ("", JamoRole.NON_HANGUL),
])
def test_classify(ch, role):
    assert classify(ch) is role


@pytest.mark.classification
def test_every_table_jamo_is_classified_as_jamo():
    for ch in CHOSEONG + JUNGSEONG + tuple(j for j in JONGSEONG if j):
        assert is_jamo(ch), ch
    assert not is_jamo("가")
    assert not is_jamo("x")


@pytest.mark.classification
def test_component_indices_for_compatibility_jamo():
    assert lead_index("ㄱ") == 0
    assert lead_index("ㅎ") == 18
    assert lead_index("ㄳ") is None
    assert vowel_index("ㅏ") == 0
    assert vowel_index("ㅡ") == 18
    assert vowel_index("ㄱ") is None
    assert tail_index("ㄱ") == 1
    assert tail_index("ㄴ") == 4
    assert tail_index("ㅎ") == 27
    # Doubled consonants that never close a syllable
    assert tail_index("ㄸ") is None
    assert tail_index("ㅃ") is None
    assert tail_index("ㅉ") is None


@pytest.mark.classification
def test_component_indices_for_conjoining_jamo():
    assert lead_index("ᄒ") == 18
    assert vowel_index("ᅵ") == 20
    assert tail_index("ᇂ") == 27
    # A conjoining lead maps onto the same final as its compatibility form
    assert tail_index("ᄂ") == tail_index("ㄴ")


def test_null_onset():
    assert CHOSEONG[NULL_ONSET_INDEX] == "ㅇ"
    assert is_null_onset(NULL_ONSET_INDEX)
    assert not is_null_onset(0)


def test_decompose_known_syllables():
    assert decompose("가") == (0, 0, 0)
    assert decompose("한") == (18, 0, 4)
    assert decompose("힣") == (18, 20, 27)
    assert split_to_jamo("글") == ("ㄱ", "ㅡ", "ㄹ")
    assert split_to_jamo("아") == ("ㅇ", "ㅏ", "")


def test_compose_known_syllables():
    assert compose(0, 0) == "가"
    assert compose(18, 0, 4) == "한"
    assert compose(NULL_ONSET_INDEX, 20) == "이"


def test_decompose_inverts_compose_over_full_range():
    seen = set()
    for lead, vowel, tail in itertools.product(range(L_COUNT), range(V_COUNT), range(T_COUNT)):
        ch = compose(lead, vowel, tail)
        assert is_composed_syllable(ch)
        assert decompose(ch) == (lead, vowel, tail)
        seen.add(ch)
    assert len(seen) == L_COUNT * V_COUNT * T_COUNT


@pytest.mark.parametrize("indices", [(-1, 0, 0), (19, 0, 0), (0, 21, 0), (0, 0, 28), (0, -1, 0)])
def test_compose_rejects_out_of_range(indices):
    with pytest.raises(ValueError):
        compose(*indices)


@pytest.mark.parametrize("ch", ["ㄱ", "a", "", "가나"])
def test_decompose_rejects_non_syllables(ch):
    with pytest.raises(ValueError):
        decompose(ch)
