import pytest

from hangul_analyzer.core import (
    WordHarmony,
    describe_pattern,
    find_rhymes,
    structural_pattern,
    vowel_harmony_analysis,
)


def test_find_rhymes_groups_shared_endings():
    assert find_rhymes("산간만") == {"ㅏㄴ": ["산", "간", "만"]}


def test_find_rhymes_drops_single_occurrences():
    assert find_rhymes("가나한글") == {"ㅏ": ["가", "나"]}
    assert find_rhymes("한글") == {}
    assert find_rhymes("") == {}


def test_find_rhymes_orders_by_group_size():
    rhymes = find_rhymes("가나산간만")

    assert list(rhymes) == ["ㅏㄴ", "ㅏ"]


def test_find_rhymes_ties_keep_first_appearance():
    rhymes = find_rhymes("산가간나")

    assert list(rhymes) == ["ㅏㄴ", "ㅏ"]
    assert rhymes["ㅏ"] == ["가", "나"]


def test_find_rhymes_keeps_duplicates_in_order():
    assert find_rhymes("달 밤 달") == {"ㅏㄹ": ["달", "달"]}


def test_find_rhymes_on_poem(seosi_opening):
    rhymes = find_rhymes(seosi_opening)

    assert rhymes
    assert all(len(members) >= 2 for members in rhymes.values())


def test_vowel_harmony_single_word():
    patterns = vowel_harmony_analysis("아버지")

    assert patterns == [WordHarmony(word="아버지", pattern="+-·")]
    assert patterns[0].as_dict() == {"word": "아버지", "pattern": "+-·"}


def test_vowel_harmony_splits_on_whitespace_runs():
    patterns = vowel_harmony_analysis("  하늘  \n\t바다 ")

    assert [(p.word, p.pattern) for p in patterns] == [("하늘", "+·"), ("바다", "++")]


def test_vowel_harmony_skips_words_without_syllables():
    patterns = vowel_harmony_analysis("Hello 세계! 123")

    assert [(p.word, p.pattern) for p in patterns] == [("세계!", "--")]


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("++", "양성"),
        ("--", "음성"),
        ("+-+", "양성 우세"),
        ("+--", "음성 우세"),
        ("+-", "혼합"),
        ("··", "혼합"),
    ],
)
def test_describe_pattern(pattern, expected):
    assert describe_pattern(pattern) == expected


def test_structural_pattern_closed_and_open():
    assert structural_pattern("한글") == "CVC CVC"
    assert structural_pattern("가나다") == "CV CV CV"
    assert structural_pattern("사랑") == "CV CVC"


def test_structural_pattern_passes_visible_characters_through():
    assert structural_pattern("한 글!") == "CVC CVC !"
    assert structural_pattern("a 가\n") == "a CV"
    assert structural_pattern("   ") == ""
