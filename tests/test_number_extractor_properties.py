"""
番号抽出のプロパティベーステスト

Property 1: 抽出結果の一意性
Property 2: 番号の文字列表現の保持
"""

import re

import pytest
from hypothesis import given, strategies as st
from hypothesis import settings

from photo_picker.number_extractor import (
    clean_line, extract_from_line, extract_identifiers
)


# 写真番号らしい数字列（先頭ゼロを含む）
photo_number_strategy = st.text(alphabet='0123456789', min_size=3, max_size=8)

# 行頭の記号
prefix_strategy = st.sampled_from(['', '1. ', '12.', '- ', '* ', '• ', '‚Ä¢ ', '  '])


@st.composite
def shot_list_strategy(draw):
    """撮影リストのテキストを生成するストラテジー"""
    numbers = draw(st.lists(photo_number_strategy, min_size=1, max_size=20))
    lines = []
    for number in numbers:
        prefix = draw(prefix_strategy)
        suffix = draw(st.sampled_from(['', '_v2.JPG', ' ok', '  ']))
        lines.append(f"{prefix}{number}{suffix}")
    return numbers, '\n'.join(lines)


@settings(max_examples=100)
@given(st.text(max_size=500))
def test_no_duplicates_property(text):
    """
    **Feature: photo-number-picker, Property 1: 抽出結果の一意性**

    任意の入力テキストに対して、抽出結果は重複を含まず、
    すべて数字のみからなる文字列であるべきである。
    """
    identifiers = extract_identifiers(text)

    assert len(identifiers) == len(set(identifiers))
    for identifier in identifiers:
        assert re.fullmatch(r'\d+', identifier), f"数字以外を含む番号: {identifier!r}"


@settings(max_examples=100)
@given(shot_list_strategy())
def test_string_form_preserved_property(scenario):
    """
    **Feature: photo-number-picker, Property 2: 番号の文字列表現の保持**

    任意の撮影リストに対して、抽出した番号は先頭のゼロを含めて
    元の文字列のまま、最初に出現した順で返されるべきである。
    """
    numbers, text = scenario

    identifiers = extract_identifiers(text)

    expected = list(dict.fromkeys(numbers))
    assert identifiers == expected


@settings(max_examples=50)
@given(st.lists(photo_number_strategy, min_size=1, max_size=10))
def test_extraction_is_deterministic_property(numbers):
    """同じテキストからは常に同じ結果が得られるべきである"""
    text = '\n'.join(numbers)
    assert extract_identifiers(text) == extract_identifiers(text)


class TestNumberExtractorExamples:
    """番号抽出の具体例テスト"""

    def test_mixed_shot_list(self):
        """番号付きリスト、箇条書き、ファイル名、小さい数字が混在する入力"""
        text = "1. 3185\n‚Ä¢ 3190\nIMG_1234.JPG\n42"
        assert extract_identifiers(text) == ["3185", "3190", "1234"]

    def test_bullet_variants(self):
        """箇条書き記号の各バリエーション"""
        text = "- 101\n* 202\n• 303\n‚Ä¢ 404"
        assert extract_identifiers(text) == ["101", "202", "303", "404"]

    def test_leading_zeros_are_kept(self):
        """先頭のゼロは保持される"""
        assert extract_identifiers("0042\n007") == ["0042", "007"]

    def test_multiple_numbers_on_one_line(self):
        """1行に複数の3桁以上の数字がある場合はすべて抽出"""
        assert extract_identifiers("3185, 3186 and 3190") == ["3185", "3186", "3190"]

    def test_short_numbers_are_dropped_when_long_number_exists(self):
        """3桁以上の数字がある行では短い数字は無視される"""
        assert extract_identifiers("12 shots from 3185") == ["3185"]

    def test_short_numbers_below_threshold(self):
        """3桁未満で100未満の数字しかない行は何も返さない"""
        assert extract_identifiers("12\n5 and 99") == []

    def test_duplicates_removed_in_first_seen_order(self):
        """重複は最初に出現した順で除去される"""
        assert extract_identifiers("300\n100\n300\n200\n100") == ["300", "100", "200"]

    def test_windows_line_endings(self):
        """CRLF改行でも抽出できる"""
        assert extract_identifiers("1. 3185\r\n2. 3190\r\n") == ["3185", "3190"]

    def test_empty_and_blank_input(self):
        """空の入力は空リストを返す"""
        assert extract_identifiers("") == []
        assert extract_identifiers("   \n\n\t\n") == []

    def test_ordered_marker_only_line(self):
        """番号付きリストの記号だけの行は何も返さない"""
        assert extract_identifiers("100.") == []

    def test_ordered_marker_with_long_prefix(self):
        """番号付きリストの番号自体は抽出しない"""
        assert extract_identifiers("250. DSC_0100") == ["0100"]


@pytest.mark.parametrize("line, expected", [
    ("1. 3185", "3185"),
    ("  12.   3190  ", "3190"),
    ("- IMG_1234", "IMG_1234"),
    ("‚Ä¢ 3190", "3190"),
    ("* * 100", "* 100"),
    ("", ""),
])
def test_clean_line(line, expected):
    """行頭の記号は1つだけ除去される"""
    assert clean_line(line) == expected


def test_extract_from_line_fallback_threshold():
    """3桁以上の数字がない行では100以上の値のみ採用される"""
    assert extract_from_line("99") == []
    assert extract_from_line("IMG_3185.JPG") == ["3185"]
