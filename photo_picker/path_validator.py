"""
パス検証ユーティリティ

ディレクトリパスの検証、コピー先ディレクトリの作成、
クロスプラットフォーム対応を提供します。
"""

import os
import shutil
from pathlib import Path
from typing import Optional

from .exceptions import DirectoryError, ValidationError


class PathValidator:
    """パス検証を行うユーティリティクラス"""

    @staticmethod
    def validate_directory(path: Path) -> None:
        """
        ディレクトリの存在とアクセス権を検証

        Args:
            path: 検証するディレクトリパス

        Raises:
            ValidationError: ディレクトリが存在しない、アクセス不可能、
                           またはディレクトリではない場合
        """
        if not path.exists():
            raise ValidationError(f"ディレクトリが存在しません: {path}")

        if not path.is_dir():
            raise ValidationError(f"指定されたパスはディレクトリではありません: {path}")

        # 読み取り権限の確認
        if not os.access(path, os.R_OK):
            raise ValidationError(f"ディレクトリに読み取り権限がありません: {path}")

    @staticmethod
    def normalize_path(path_str: str) -> Path:
        """
        パス文字列を正規化してPathオブジェクトに変換
        macOSとWindowsの両方のパス形式をサポート

        Args:
            path_str: パス文字列

        Returns:
            正規化されたPathオブジェクト
        """
        return Path(path_str).expanduser().resolve()

    @staticmethod
    def ensure_directory(path: Path) -> Path:
        """
        ディレクトリが存在しない場合は作成し、絶対パスを返す

        Args:
            path: 作成するディレクトリパス

        Returns:
            ディレクトリの絶対パス

        Raises:
            DirectoryError: ディレクトリを作成できない場合
        """
        path = Path(path).expanduser()
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryError(f"コピー先ディレクトリを作成できません: {path} ({e})") from e

        if not path.is_dir():
            raise DirectoryError(f"指定されたパスはディレクトリではありません: {path}")

        return path.resolve()

    @staticmethod
    def resolve_destination_name(parent_dir: Path, folder_name: str) -> Path:
        """
        フォルダ名からコピー先ディレクトリのパスを組み立てる

        Args:
            parent_dir: 親ディレクトリ（通常はダウンロードフォルダ）
            folder_name: ユーザーが入力したフォルダ名

        Returns:
            コピー先ディレクトリのパス

        Raises:
            ValidationError: フォルダ名が空、または親ディレクトリ外を指す場合
        """
        name = folder_name.strip()
        if not name:
            raise ValidationError("コピー先のフォルダ名を入力してください")

        if Path(name).is_absolute() or '..' in Path(name).parts:
            raise ValidationError(f"フォルダ名が不正です: {folder_name}")

        return parent_dir / name

    @staticmethod
    def get_disk_usage_info(path: Path) -> Optional[tuple[int, int, int]]:
        """
        ディスクの使用量情報を取得

        Args:
            path: 確認するディレクトリパス

        Returns:
            (total, used, free) のタプル（バイト単位）、
            エラーの場合はNone
        """
        try:
            return shutil.disk_usage(path)
        except (OSError, ValueError):
            return None
