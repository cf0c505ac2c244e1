"""
設定管理

Photo Number Pickerの実行時設定を定義します。
環境変数による上書きをサポートします。
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# 環境変数名
ENV_DOWNLOADS_DIR = 'PHOTO_PICKER_DOWNLOADS_DIR'
ENV_LOG_DIR = 'PHOTO_PICKER_LOG_DIR'

# ディスク容量チェックの安全マージン
DEFAULT_DISK_SPACE_MARGIN = 10 * 1024 * 1024  # 10MB


@dataclass
class PickerConfig:
    """実行時設定"""
    downloads_dir: Path = None
    log_dir: Path = None
    check_disk_space: bool = True
    disk_space_margin: int = DEFAULT_DISK_SPACE_MARGIN
    verbose: bool = False
    log_file: Optional[Path] = None

    def __post_init__(self):
        if self.downloads_dir is None:
            self.downloads_dir = Path.home() / 'Downloads'
        if self.log_dir is None:
            self.log_dir = Path.home() / '.photo_picker' / 'logs'

        # 文字列で渡された場合もPathに揃える
        if isinstance(self.downloads_dir, str):
            self.downloads_dir = Path(self.downloads_dir)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    @classmethod
    def from_env(cls, **overrides) -> 'PickerConfig':
        """
        環境変数から設定を作成

        Args:
            **overrides: 環境変数より優先する設定値

        Returns:
            設定オブジェクト
        """
        values = {}
        downloads_dir = os.environ.get(ENV_DOWNLOADS_DIR)
        if downloads_dir:
            values['downloads_dir'] = Path(downloads_dir).expanduser()
        log_dir = os.environ.get(ENV_LOG_DIR)
        if log_dir:
            values['log_dir'] = Path(log_dir).expanduser()
        values.update(overrides)
        return cls(**values)
