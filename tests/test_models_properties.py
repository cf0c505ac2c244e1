"""
データモデルのプロパティベーステスト

Property 13: コピー結果の辞書変換の保存性を検証します。
"""

import json

from hypothesis import given, strategies as st
from hypothesis import settings

from photo_picker.models import (
    CopyFailure, CopyReport, CopySuccess, MatchReport, PriorityClass
)


identifier_strategy = st.text(alphabet='0123456789', min_size=3, max_size=6)
filename_strategy = st.builds(
    lambda n, ext: f"DSC_{n:04d}{ext}",
    st.integers(min_value=0, max_value=9999),
    st.sampled_from(['.ARW', '.JPG', '.PNG'])
)


@st.composite
def copy_report_strategy(draw):
    """CopyReportを生成するストラテジー"""
    successes = draw(st.lists(st.builds(CopySuccess, identifier_strategy, filename_strategy), max_size=10))
    failures = draw(st.lists(
        st.builds(CopyFailure, identifier_strategy, filename_strategy, st.text(max_size=50)),
        max_size=5
    ))
    not_found = draw(st.lists(identifier_strategy, max_size=5))
    return CopyReport(successes=successes, failures=failures, not_found=not_found)


@settings(max_examples=100)
@given(copy_report_strategy())
def test_report_dict_preserves_entries_property(report):
    """
    **Feature: photo-number-picker, Property 13: コピー結果の辞書変換の保存性**

    任意のコピー結果に対して、辞書形式は全ての成功・失敗・見つからない番号を
    同じ順序で保持し、JSONに変換可能であるべきである。
    """
    data = report.to_dict()

    assert [(e['input'], e['matched']) for e in data['success']] == [
        (s.identifier, s.matched_file) for s in report.successes
    ]
    assert [(e['input'], e['matched'], e['error']) for e in data['failed']] == [
        (f.identifier, f.matched_file, f.error_message) for f in report.failures
    ]
    assert data['notFound'] == report.not_found
    assert json.loads(json.dumps(data, ensure_ascii=False)) == data

    # 辞書のリストは元のレポートと独立している
    data['notFound'].append('999999')
    assert '999999' not in report.not_found


def test_priority_class_order():
    """優先度はRAW、PNG/TIFF、JPEGの順"""
    assert sorted(PriorityClass, key=lambda c: c.value) == [
        PriorityClass.RAW, PriorityClass.OTHER, PriorityClass.JPEG
    ]


def test_match_report_files_for_returns_copy():
    report = MatchReport(matches={"100": ["DSC_0100.ARW"]}, not_found=["200"])

    files = report.files_for("100")
    files.append("extra.jpg")

    assert report.matches["100"] == ["DSC_0100.ARW"]
    assert report.files_for("200") == []


def test_default_reports_are_independent():
    first = CopyReport()
    second = CopyReport()
    first.not_found.append("100")
    assert second.not_found == []
