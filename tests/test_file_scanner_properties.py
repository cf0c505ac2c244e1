"""
FileScannerのプロパティベーステスト

Property 6: 拡張子による優先度クラス判定の一貫性
Property 7: ベース名抽出の一貫性
"""

import tempfile
from pathlib import Path
from hypothesis import given, strategies as st
from hypothesis import settings
import pytest

from photo_picker.exceptions import DirectoryError
from photo_picker.file_scanner import FileScanner
from photo_picker.models import PriorityClass


# ファイルシステムで安全に使用できる文字のストラテジー
safe_filename_strategy = st.text(
    alphabet=st.characters(
        whitelist_categories=('Lu', 'Ll', 'Nd'),
        min_codepoint=32,
        max_codepoint=126
    ),
    min_size=1,
    max_size=50
).filter(lambda x: x.strip() and not any(c in x for c in '<>:"|?*\\/.'))


def random_case(draw, text: str) -> str:
    """文字ごとに大文字小文字をランダムに変える"""
    flags = draw(st.lists(st.booleans(), min_size=len(text), max_size=len(text)))
    return ''.join(c.upper() if flag else c.lower() for c, flag in zip(text, flags))


@st.composite
def classified_filename_strategy(draw):
    """拡張子と期待される優先度クラスのペアを生成するストラテジー"""
    basename = draw(safe_filename_strategy)
    priority = draw(st.sampled_from(list(PriorityClass)))
    extensions = {
        PriorityClass.RAW: FileScanner.RAW_EXTENSIONS,
        PriorityClass.OTHER: FileScanner.OTHER_EXTENSIONS,
        PriorityClass.JPEG: FileScanner.JPEG_EXTENSIONS,
    }[priority]
    extension = random_case(draw, draw(st.sampled_from(sorted(extensions))))
    return f"{basename}{extension}", basename, priority


@settings(max_examples=100)
@given(classified_filename_strategy())
def test_classification_is_case_insensitive_property(scenario):
    """
    **Feature: photo-number-picker, Property 6: 拡張子による優先度クラス判定の一貫性**

    任意の対象拡張子を持つファイル名に対して、拡張子の大文字小文字にかかわらず
    同じ優先度クラスに分類されるべきである。
    """
    filename, _, priority = scenario

    assert FileScanner.classify(filename) is priority
    assert FileScanner.is_image_file(filename)


@settings(max_examples=100)
@given(classified_filename_strategy())
def test_basename_extraction_property(scenario):
    """
    **Feature: photo-number-picker, Property 7: ベース名抽出の一貫性**

    任意のファイル名に対して、ベース名は最後のドットより前の部分であり、
    大文字小文字が保持されるべきである。
    """
    filename, basename, _ = scenario

    assert FileScanner.get_basename(filename) == basename


def test_extension_sets_are_disjoint():
    """優先度クラスの拡張子は重複しない"""
    assert not FileScanner.RAW_EXTENSIONS & FileScanner.OTHER_EXTENSIONS
    assert not FileScanner.RAW_EXTENSIONS & FileScanner.JPEG_EXTENSIONS
    assert not FileScanner.OTHER_EXTENSIONS & FileScanner.JPEG_EXTENSIONS


@pytest.mark.parametrize("filename", [
    "notes.txt", "clip.MOV", "DSC_0100.xmp", "README", "IMG_0100.CR3", "archive.jpg.zip"
])
def test_unsupported_files_are_not_classified(filename):
    """対象外の形式は分類されない"""
    assert FileScanner.classify(filename) is None
    assert not FileScanner.is_image_file(filename)


def test_basename_with_multiple_dots():
    """ベース名は最後のドットまで"""
    assert FileScanner.get_basename("shoot.day1.DSC_0100.ARW") == "shoot.day1.DSC_0100"
    assert FileScanner.get_extension("shoot.day1.DSC_0100.ARW") == ".arw"
    assert FileScanner.get_basename("README") == "README"
    assert FileScanner.get_extension("README") == ""


class TestListImageFiles:
    """ディレクトリスキャンのテスト"""

    def test_lists_only_image_files_in_top_level(self):
        """直下の画像ファイルのみを名前順で返す"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            for name in ["DSC_0200.JPG", "DSC_0100.ARW", "DSC_0100.JPG", "notes.txt", "B.png"]:
                (temp_path / name).write_bytes(b"data")

            # サブディレクトリ内のファイルは対象外
            sub_dir = temp_path / "sub"
            sub_dir.mkdir()
            (sub_dir / "DSC_0300.JPG").write_bytes(b"data")

            # ディレクトリ名が拡張子に見えても対象外
            (temp_path / "folder.jpg").mkdir()

            scanner = FileScanner()
            assert scanner.list_image_files(temp_path) == sorted(
                ["B.png", "DSC_0100.ARW", "DSC_0100.JPG", "DSC_0200.JPG"]
            )
            assert "notes.txt" in scanner.list_directory(temp_path)

    def test_empty_directory(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            assert FileScanner().list_image_files(Path(temp_dir)) == []

    def test_missing_directory_raises_directory_error(self):
        """存在しないディレクトリはDirectoryError"""
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = Path(temp_dir) / "missing"
            with pytest.raises(DirectoryError) as exc_info:
                FileScanner().list_image_files(missing)
            assert str(missing) in str(exc_info.value)

    def test_file_path_raises_directory_error(self):
        """ファイルを指定した場合はDirectoryError"""
        with tempfile.TemporaryDirectory() as temp_dir:
            file_path = Path(temp_dir) / "photo.jpg"
            file_path.write_bytes(b"data")
            with pytest.raises(DirectoryError):
                FileScanner().list_image_files(file_path)
