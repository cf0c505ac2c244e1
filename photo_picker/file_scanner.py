"""
ファイルスキャナー

ソースディレクトリをスキャンして画像ファイルを検索する機能と、
拡張子による優先度クラスの判定を提供します。
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Set

from .exceptions import DirectoryError, ValidationError
from .models import PriorityClass
from .path_validator import PathValidator


class FileScanner:
    """ディレクトリをスキャンして画像ファイルを検索するクラス"""

    # RAWファイル拡張子（小文字で比較）
    RAW_EXTENSIONS: Set[str] = {
        '.arw',    # Sony
        '.cr2',    # Canon
        '.nef',    # Nikon
        '.dng',    # Adobe/Leica
        '.orf',    # Olympus
        '.pef',    # Pentax
        '.rw2',    # Panasonic
        '.raw',
        '.raf',    # Fujifilm
    }

    # RAW以外でJPEGより優先する形式
    OTHER_EXTENSIONS: Set[str] = {
        '.png',
        '.tiff',
        '.tif',
    }

    # JPEG拡張子
    JPEG_EXTENSIONS: Set[str] = {
        '.jpg',
        '.jpeg',
    }

    _CLASS_BY_EXTENSION: Dict[str, PriorityClass] = {
        **{ext: PriorityClass.RAW for ext in RAW_EXTENSIONS},
        **{ext: PriorityClass.OTHER for ext in OTHER_EXTENSIONS},
        **{ext: PriorityClass.JPEG for ext in JPEG_EXTENSIONS},
    }

    def __init__(self):
        """FileScannerを初期化"""
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def get_extension(filename: str) -> str:
        """
        ファイル名から拡張子（ドット付き、小文字）を取得

        Args:
            filename: ファイル名

        Returns:
            拡張子。ドットを含まない場合は空文字列
        """
        index = filename.rfind('.')
        if index < 0:
            return ''
        return filename[index:].lower()

    @staticmethod
    def get_basename(filename: str) -> str:
        """
        ファイル名からベース名（最後のドットと拡張子を除いた部分）を取得

        大文字小文字はそのまま保持します。

        Args:
            filename: ファイル名

        Returns:
            ベース名
        """
        index = filename.rfind('.')
        if index < 0:
            return filename
        return filename[:index]

    @classmethod
    def classify(cls, filename: str) -> Optional[PriorityClass]:
        """
        ファイルの優先度クラスを判定

        Args:
            filename: ファイル名

        Returns:
            優先度クラス。対象外の形式の場合None
        """
        return cls._CLASS_BY_EXTENSION.get(cls.get_extension(filename))

    @classmethod
    def is_image_file(cls, filename: str) -> bool:
        """対象となる画像ファイルかどうかを判定"""
        return cls.classify(filename) is not None

    def list_directory(self, directory: Path) -> List[str]:
        """
        ディレクトリ直下のファイル名一覧を取得（サブディレクトリは含まない）

        Args:
            directory: スキャンするディレクトリ

        Returns:
            ファイル名のリスト（名前順）

        Raises:
            DirectoryError: ディレクトリが読み取れない場合
        """
        try:
            PathValidator.validate_directory(directory)
        except ValidationError as e:
            raise DirectoryError(str(e)) from e

        try:
            names = [entry.name for entry in directory.iterdir() if entry.is_file()]
        except OSError as e:
            raise DirectoryError(f"ディレクトリの読み取りに失敗しました: {directory} ({e})") from e

        return sorted(names)

    def list_image_files(self, directory: Path) -> List[str]:
        """
        ディレクトリ直下の画像ファイル名一覧を取得

        Args:
            directory: スキャンするディレクトリ

        Returns:
            画像ファイル名のリスト（名前順）

        Raises:
            DirectoryError: ディレクトリが読み取れない場合
        """
        names = self.list_directory(directory)
        image_files = [name for name in names if self.is_image_file(name)]
        self.logger.debug(
            f"画像ファイルスキャン: {directory} - {len(image_files)}/{len(names)}個"
        )
        return image_files
