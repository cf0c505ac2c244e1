"""
ロギングシステム

Photo Number Pickerのロギング機能を提供します。
標準出力とファイル出力の両方をサポートし、進捗表示とエラーログを管理します。
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from .models import CopyReport, ProcessingStats


@dataclass
class LogConfig:
    """ログ設定"""
    console_level: int = logging.INFO
    file_level: int = logging.DEBUG
    log_file: Optional[Path] = None
    verbose: bool = False


class ProgressLogger:
    """進捗表示とロギングを管理するクラス"""

    def __init__(self, config: LogConfig):
        self.config = config
        self._file_handler: Optional[logging.FileHandler] = None
        self.logger = self._setup_logger()
        self._start_time: Optional[datetime] = None

    def _setup_logger(self) -> logging.Logger:
        """ロガーのセットアップ"""
        logger = logging.getLogger('photo_picker.progress')
        logger.setLevel(logging.DEBUG)

        # 既存のハンドラーをクリア
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        console_formatter = logging.Formatter(
            '%(message)s'
        )
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # コンソールハンドラー
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.config.console_level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        # ファイルハンドラー（指定されている場合）
        if self.config.log_file:
            self.config.log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(self.config.log_file, encoding='utf-8')
            file_handler.setLevel(self.config.file_level)
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
            self._file_handler = file_handler

        return logger

    def log_processing_start(self, source_dir: Path, dest_dir: Optional[Path] = None):
        """処理開始時のサマリー表示"""
        self._start_time = datetime.now()

        self.logger.info("=" * 60)
        self.logger.info("Photo Number Picker - 処理開始")
        self.logger.info("=" * 60)
        self.logger.info(f"開始時刻: {self._start_time.strftime('%Y-%m-%d %H:%M:%S')}")
        self.logger.info(f"ソースディレクトリ: {source_dir}")

        if dest_dir:
            self.logger.info(f"コピー先ディレクトリ: {dest_dir}")

        self.logger.info("")

    def log_identifiers(self, identifiers: List[str]):
        """抽出した番号のログ"""
        self.logger.info(f"写真番号: {len(identifiers)}個")
        if self.config.verbose and identifiers:
            self.logger.info(f"  {', '.join(identifiers)}")

    def log_source_scan(self, source_dir: Path, image_files_count: int):
        """ソースディレクトリのスキャン結果のログ"""
        self.logger.info(f"画像ファイル発見: {image_files_count}個 ({source_dir})")

    def log_preview(self, preview: Dict[str, List[str]]):
        """番号ごとの選択ファイルの記録（詳細モードのみコンソールに表示）"""
        for identifier, files in preview.items():
            if files:
                self.logger.debug(f"  {identifier} -> {', '.join(files)}")
            else:
                self.logger.debug(f"  {identifier} -> 見つかりません")

    def log_copy_start(self, files_count: int):
        """コピー処理開始のログ"""
        self.logger.info(f"コピー処理開始: {files_count}個のファイルをコピー予定")

    def log_copy_progress(self, total_files: int, files_processed: int, current_file: Optional[str] = None):
        """コピー時の進捗表示"""
        if self.config.verbose and current_file:
            self.logger.info(f"コピー中: {current_file}")

        if total_files > 0:
            progress = (files_processed / total_files) * 100
            self.logger.debug(f"コピー進捗: {files_processed}/{total_files} ({progress:.1f}%)")

    def log_not_found(self, identifier: str):
        """見つからなかった番号のログ"""
        self.logger.info(f"見つかりません: {identifier}")

    def log_copy_complete(self, report: CopyReport, processing_time: float):
        """コピー処理完了のログ"""
        self.logger.info("コピー処理完了:")
        self.logger.info(f"  - 成功: {len(report.successes)}個")
        self.logger.info(f"  - 失敗: {len(report.failures)}個")
        self.logger.info(f"  - 見つからない番号: {len(report.not_found)}個")
        self.logger.info(f"処理時間: {processing_time:.2f}秒")
        self.logger.info("")

    def log_processing_complete(self, stats: ProcessingStats):
        """処理完了時のサマリー表示"""
        end_time = datetime.now()
        total_time = (end_time - self._start_time).total_seconds() if self._start_time else 0

        self.logger.info("=" * 60)
        self.logger.info("処理完了サマリー")
        self.logger.info("=" * 60)
        self.logger.info(f"終了時刻: {end_time.strftime('%Y-%m-%d %H:%M:%S')}")
        self.logger.info(f"総処理時間: {total_time:.2f}秒")
        self.logger.info("")
        self.logger.info("処理結果:")
        self.logger.info(f"  - 写真番号: {stats.identifiers_requested}")
        self.logger.info(f"  - 画像ファイル発見数: {stats.source_files_found}")
        self.logger.info(f"  - マッチしたファイル: {stats.files_matched}")
        self.logger.info(f"  - コピー成功: {stats.files_copied}")
        self.logger.info(f"  - 失敗: {stats.files_failed}")
        self.logger.info(f"  - 見つからない番号: {stats.identifiers_not_found}")

        if stats.errors:
            self.logger.info("")
            self.logger.info(f"エラー詳細 ({len(stats.errors)}件):")
            for target, error_msg in stats.errors:
                self.logger.error(f"  - {target}: {error_msg}")

        self.logger.info("=" * 60)

    def log_error(self, target: Union[Path, str], error_message: str, exception: Optional[Exception] = None):
        """エラーログの詳細記録"""
        error_msg = f"エラー - {target}: {error_message}"

        if exception:
            error_msg += f" ({type(exception).__name__}: {str(exception)})"

        self.logger.error(error_msg)

        # 詳細なスタックトレースはファイルログのみに記録
        if exception and self._file_handler:
            record = self.logger.makeRecord(
                self.logger.name, logging.DEBUG, __file__, 0, "スタックトレース:", None,
                (type(exception), exception, exception.__traceback__)
            )
            self._file_handler.handle(record)


def create_default_logger(verbose: bool = False, log_file: Optional[Path] = None) -> ProgressLogger:
    """デフォルトのロガーを作成"""
    config = LogConfig(
        console_level=logging.DEBUG if verbose else logging.INFO,
        file_level=logging.DEBUG,
        log_file=log_file,
        verbose=verbose
    )
    return ProgressLogger(config)


def get_default_log_file(log_dir: Optional[Path] = None) -> Path:
    """デフォルトのログファイルパスを取得"""
    if log_dir is None:
        log_dir = Path.home() / '.photo_picker' / 'logs'
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return log_dir / f'photo_picker_{timestamp}.log'
