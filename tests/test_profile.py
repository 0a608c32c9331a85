from dataclasses import dataclass

import pytest

from digitcode.profile import DigitCodeProfile, TotpCodeProfile, split_graphemes


@dataclass(frozen=True)
class SuitProfile(DigitCodeProfile):
    def __len__(self):
        return 3

    def char_matches_alphabet(self, char):
        return char in ("\u2660", "\u2665", "e\u0301")


def test_split_graphemes_keeps_combining_marks():
    assert split_graphemes("e\u0301x") == ["e\u0301", "x"]


def test_split_graphemes_round_trip():
    text = "a\u0301bc\U0001F44D\U0001F3FD"
    assert "".join(split_graphemes(text)) == text


def test_totp_default_length():
    assert len(TotpCodeProfile()) == 6


def test_totp_explicit_length():
    assert len(TotpCodeProfile(8)) == 8


def test_totp_negative_length_rejected():
    with pytest.raises(ValueError):
        TotpCodeProfile(-1)


@pytest.mark.parametrize("char", list("0123456789"))
def test_totp_digits_valid(char):
    assert TotpCodeProfile().is_valid_char(char) is True


@pytest.mark.parametrize("char", ["a", "", "12", " ", "\u0661"])
def test_totp_non_digits_invalid(char):
    assert TotpCodeProfile().is_valid_char(char) is False


def test_totp_input_mode():
    assert TotpCodeProfile().input_mode(0) == "numeric"


def test_base_input_mode_is_text():
    assert DigitCodeProfile.input_mode(SuitProfile(), 1) == "text"


def test_str_code_valid():
    profile = TotpCodeProfile()
    assert profile.is_str_code_valid("123456") is True
    assert profile.is_str_code_valid("12345") is False
    assert profile.is_str_code_valid("1234567") is False
    assert profile.is_str_code_valid("12345a") is False


def test_char_code_valid_accepts_iterator():
    assert TotpCodeProfile(3).is_char_code_valid(iter(["1", "2", "3"])) is True


def test_valid_char_code_joins():
    chars = list("987654")
    assert TotpCodeProfile().valid_char_code(chars) == "".join(chars)


def test_valid_char_code_rejects_short():
    assert TotpCodeProfile().valid_char_code(list("123")) is None


def test_grapheme_alphabet():
    profile = SuitProfile()
    assert DigitCodeProfile.is_valid_char(profile, "e\u0301") is True
    assert DigitCodeProfile.is_str_code_valid(profile, "\u2660e\u0301\u2665") is True
    assert DigitCodeProfile.is_str_code_valid(profile, "\u2660e\u2665") is False
    assert split_graphemes("\u2660e\u0301\u2665") == ["\u2660", "e\u0301", "\u2665"]


def test_abstract_profile_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DigitCodeProfile()  # type: ignore[abstract]