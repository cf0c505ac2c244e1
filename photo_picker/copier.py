"""
ファイルコピー処理モジュール

選択されたファイルをコピー先ディレクトリにコピーする機能を提供します。
エラーハンドリングとディスク容量チェックを含みます。
"""

import logging
import shutil
from pathlib import Path

from .config import DEFAULT_DISK_SPACE_MARGIN
from .exceptions import CopyError
from .path_validator import PathValidator


class Copier:
    """ファイルをコピーするクラス"""

    def __init__(self, check_disk_space: bool = True,
                 disk_space_margin: int = DEFAULT_DISK_SPACE_MARGIN):
        """
        Copierを初期化

        Args:
            check_disk_space: コピー前にディスク容量を確認する場合True
            disk_space_margin: 容量確認時の安全マージン（バイト）
        """
        self.check_disk_space = check_disk_space
        self.disk_space_margin = disk_space_margin
        self.logger = logging.getLogger(__name__)

    def copy_file(self, source_path: Path, dest_path: Path) -> Path:
        """
        単一ファイルをコピー

        コピー先に同名のファイルがある場合は上書きします。

        Args:
            source_path: コピー元ファイル
            dest_path: コピー先ファイル

        Returns:
            コピー先ファイルのパス

        Raises:
            CopyError: コピーに失敗した場合
        """
        if not source_path.is_file():
            error_msg = f"ソースファイルが存在しません: {source_path}"
            self.logger.warning(f"コピー失敗: {error_msg}")
            raise CopyError(error_msg, source_path)

        if self.check_disk_space:
            try:
                source_size = source_path.stat().st_size
            except OSError as e:
                # サイズが取得できなくてもコピーは継続
                self.logger.warning(f"ディスク容量チェックスキップ: {source_path} - {e}")
            else:
                if not self._has_disk_space(dest_path.parent, source_size):
                    error_msg = "ディスク容量不足"
                    self.logger.error(f"コピー失敗: {source_path} - {error_msg}")
                    raise CopyError(error_msg, source_path)

        try:
            # shutil.copy2を使用してメタデータも保持
            shutil.copy2(source_path, dest_path)
        except PermissionError as e:
            error_msg = f"アクセス権限エラー: {e}"
            self.logger.error(f"コピー失敗: {source_path} - {error_msg}")
            raise CopyError(error_msg, source_path) from e
        except OSError as e:
            error_msg = f"ファイル操作エラー: {e}"
            self.logger.error(f"コピー失敗: {source_path} - {error_msg}")
            raise CopyError(error_msg, source_path) from e

        self.logger.debug(f"コピー成功: {source_path.name} -> {dest_path}")
        return dest_path

    def _has_disk_space(self, target_dir: Path, required_bytes: int) -> bool:
        """
        ディスク空き容量を確認

        Args:
            target_dir: 確認対象ディレクトリ
            required_bytes: 必要なバイト数

        Returns:
            容量が十分な場合True。容量が取得できない場合もTrue
        """
        usage = PathValidator.get_disk_usage_info(target_dir)
        if usage is None:
            # 容量が取得できない場合はコピー時のエラーに任せる
            return True

        free_bytes = usage[2]
        if free_bytes < required_bytes + self.disk_space_margin:
            self.logger.warning(
                f"ディスク容量不足: 必要={required_bytes:,}bytes, "
                f"利用可能={free_bytes:,}bytes"
            )
            return False
        return True
