import math

import pytest

from hangul_analyzer.core import CHOSEONG, JUNGSEONG, fingerprint, line_syllable_counts
from hangul_analyzer.core.fingerprint import rhythm_statistics, shannon_entropy


@pytest.mark.parametrize("text", ["", "Hello 123", "ㄱㄴㄷ\n\n"])
def test_fingerprint_absent_without_syllables(text):
    assert fingerprint(text) is None


def test_fingerprint_bounds(seosi_opening):
    fp = fingerprint(seosi_opening)

    assert fp is not None
    assert fp.total_syllables > 0
    assert -1 <= fp.brightness <= 1
    assert 0 <= fp.weight <= 1
    assert 0 <= fp.rhythm_regularity <= 1
    assert 0 <= fp.consonant_diversity <= 1
    assert 0 <= fp.vowel_diversity <= 1
    assert fp.top_cho
    assert fp.top_jung


def test_open_syllables_have_zero_weight():
    fp = fingerprint("가나다라마바사")

    assert fp.weight == 0
    assert fp.brightness == 1.0
    assert fp.rhythm_regularity == 1.0
    assert fp.avg_line_length == 7.0
    assert fp.consonant_diversity == round(math.log2(7) / math.log2(19), 3)
    assert fp.vowel_diversity == 0.0
    assert fp.top_cho == ("ㄱ", "ㄴ", "ㄷ")
    assert fp.top_jung == ("ㅏ",)


def test_closed_syllables_are_heavy():
    assert fingerprint("한글문장").weight > 0.5


def test_brightness_sign_follows_vowels():
    assert fingerprint("하하하 나나나 오호호").brightness > 0
    assert fingerprint("허허허 너너너 우후후").brightness == -1.0
    assert fingerprint("이리 기미").brightness == 0.0


def test_profiles_cover_full_tables(seosi):
    fp = fingerprint(seosi)

    assert list(fp.cho_profile) == list(CHOSEONG)
    assert list(fp.jung_profile) == list(JUNGSEONG)
    assert sum(fp.cho_profile.values()) == pytest.approx(1.0)
    assert sum(fp.jung_profile.values()) == pytest.approx(1.0)
    assert len(fp.feature_vector()) == len(CHOSEONG) + len(JUNGSEONG) + 3


def test_feature_vector_ends_with_scalars(seosi):
    fp = fingerprint(seosi)

    assert fp.feature_vector()[-3:] == [fp.brightness, fp.weight, fp.rhythm_regularity]


def test_line_counts_skip_blank_and_non_korean_lines():
    text = "가나다\n\nhello\n가나\n   \n가나다라"

    assert line_syllable_counts(text) == [3, 2, 4]


def test_rhythm_regularity_uses_population_deviation():
    fp = fingerprint("가나다\n가나\n\n가나다라")

    assert fp.avg_line_length == 3.0
    assert fp.rhythm_regularity == round(1 - math.sqrt(2 / 3) / 3, 3)


def test_rhythm_regularity_never_negative():
    text = "\n".join(["가"] * 99 + ["가" * 100])

    assert fingerprint(text).rhythm_regularity == 0.0


def test_rhythm_statistics_empty():
    assert rhythm_statistics([]) == (0.0, 0.0)


def test_shannon_entropy():
    assert shannon_entropy([0.5, 0.5]) == pytest.approx(1.0)
    assert shannon_entropy([1.0, 0.0]) == 0.0


def test_fingerprint_is_deterministic(seosi):
    assert fingerprint(seosi).as_dict() == fingerprint(seosi).as_dict()


@pytest.mark.parametrize("separator", ["\r", "\u2028", "\x0c", "\x85"])
def test_only_newline_separates_lines(separator):
    fp = fingerprint(f"가나{separator}다")

    assert fp.avg_line_length == 3.0
    assert fp.rhythm_regularity == 1.0


def test_crlf_input_counts_like_newline():
    assert line_syllable_counts("가나\r\n다") == [2, 1]


def test_fingerprint_is_hashable_and_read_only():
    fp = fingerprint("가나다")

    assert hash(fp) == hash(fingerprint("가나다"))
    with pytest.raises(TypeError):
        fp.cho_profile["ㄱ"] = 99.0

    exported = fp.as_dict()
    exported["cho_profile"]["ㄱ"] = 99.0
    assert type(exported["jung_profile"]) is dict
    assert fp.cho_profile["ㄱ"] == pytest.approx(1 / 3)
