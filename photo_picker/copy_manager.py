"""
コピー管理モジュール

写真番号の抽出、マッチングのプレビュー、コピー処理を統合的に管理します。
番号は入力順に1つずつ処理し、ファイルのコピーも選択順に1つずつ行います。
"""

import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .config import PickerConfig
from .copier import Copier
from .exceptions import CopyError, DirectoryError
from .file_scanner import FileScanner
from .logger import ProgressLogger, create_default_logger, get_default_log_file
from .matcher import match_files
from .models import CopyFailure, CopyReport, CopySuccess, ProcessingStats
from .number_extractor import extract_identifiers
from .path_validator import PathValidator


class CopyManager:
    """プレビューとコピー処理を担当するクラス"""

    def __init__(self, config: Optional[PickerConfig] = None,
                 progress_logger: Optional[ProgressLogger] = None):
        """
        CopyManagerを初期化

        Args:
            config: 実行時設定（省略時は環境変数から作成）
            progress_logger: 進捗表示用のロガー（省略時は設定から作成）
        """
        self.config = config or PickerConfig.from_env()
        self.file_scanner = FileScanner()
        self.copier = Copier(
            check_disk_space=self.config.check_disk_space,
            disk_space_margin=self.config.disk_space_margin
        )
        self.progress_logger = progress_logger

    def _get_progress_logger(self) -> ProgressLogger:
        """プログレスロガーを取得（未作成の場合は作成）"""
        if self.progress_logger is None:
            log_file = self.config.log_file
            if log_file is None and self.config.verbose:
                log_file = get_default_log_file(self.config.log_dir)
            self.progress_logger = create_default_logger(
                verbose=self.config.verbose, log_file=log_file
            )
        return self.progress_logger

    def preview_matches(self, source_files: Sequence[str], raw_text: str) -> Dict[str, List[str]]:
        """
        入力テキストの番号ごとにマッチするファイルを取得

        Args:
            source_files: ソースディレクトリのファイル名のリスト
            raw_text: ユーザーが貼り付けたテキスト

        Returns:
            番号 -> 優先度適用後のファイル名（見つからない番号は空リスト）
        """
        identifiers = extract_identifiers(raw_text)
        report = match_files(source_files, identifiers)
        return {identifier: report.files_for(identifier) for identifier in identifiers}

    def preview_directory(self, source_dir: Path, raw_text: str) -> Dict[str, List[str]]:
        """
        ソースディレクトリを読み取ってプレビューを作成

        Args:
            source_dir: ソースディレクトリ
            raw_text: ユーザーが貼り付けたテキスト

        Returns:
            番号 -> 優先度適用後のファイル名（見つからない番号は空リスト）

        Raises:
            DirectoryError: ソースディレクトリが読み取れない場合
        """
        source_files = self.file_scanner.list_image_files(source_dir)
        return self.preview_matches(source_files, raw_text)

    def create_destination(self, folder_name: str) -> Path:
        """
        ダウンロードフォルダにコピー先ディレクトリを作成

        Args:
            folder_name: フォルダ名

        Returns:
            作成したディレクトリの絶対パス

        Raises:
            ValidationError: フォルダ名が空または不正な場合
            DirectoryError: ディレクトリを作成できない場合
        """
        dest_dir = PathValidator.resolve_destination_name(self.config.downloads_dir, folder_name)
        return PathValidator.ensure_directory(dest_dir)

    def perform_copy(self, source_dir: Path, dest_dir: Path, raw_text: str) -> CopyReport:
        """
        入力テキストの番号にマッチするファイルをコピー

        個別ファイルのコピー失敗は結果に記録して処理を継続します。

        Args:
            source_dir: ソースディレクトリ
            dest_dir: コピー先ディレクトリ
            raw_text: ユーザーが貼り付けたテキスト

        Returns:
            コピー結果

        Raises:
            DirectoryError: ソースが読み取れない、またはコピー先を作成できない場合
        """
        progress_logger = self._get_progress_logger()
        progress_logger.log_processing_start(source_dir, dest_dir)

        # 1. ソースディレクトリの読み取り（コピー開始前に失敗させる）
        try:
            image_files = self.file_scanner.list_image_files(source_dir)
        except DirectoryError as e:
            progress_logger.log_error(source_dir, "ソースディレクトリを読み取れません", e)
            raise
        progress_logger.log_source_scan(source_dir, len(image_files))

        # 2. コピー先ディレクトリの準備
        try:
            dest_dir = PathValidator.ensure_directory(dest_dir)
        except DirectoryError as e:
            progress_logger.log_error(dest_dir, "コピー先ディレクトリを準備できません", e)
            raise

        # 3. 番号の抽出とマッチング
        identifiers = extract_identifiers(raw_text)
        progress_logger.log_identifiers(identifiers)
        match_report = match_files(image_files, identifiers)
        progress_logger.log_preview(
            {identifier: match_report.files_for(identifier) for identifier in identifiers}
        )

        total_files = sum(len(files) for files in match_report.matches.values())
        progress_logger.log_copy_start(total_files)
        start_time = time.time()

        # 4. 番号ごとのコピー
        report = CopyReport()
        errors = []
        processed = 0
        for identifier in identifiers:
            selected_files = match_report.files_for(identifier)
            if not selected_files:
                report.not_found.append(identifier)
                progress_logger.log_not_found(identifier)
                continue

            error_messages = []
            for filename in selected_files:
                progress_logger.log_copy_progress(total_files, processed, filename)
                processed += 1
                try:
                    self.copier.copy_file(source_dir / filename, dest_dir / filename)
                except CopyError as e:
                    progress_logger.log_error(source_dir / filename, str(e), e)
                    errors.append((filename, str(e)))
                    if str(e) not in error_messages:
                        error_messages.append(str(e))
                    continue
                report.successes.append(CopySuccess(identifier, filename))

            if error_messages:
                # 失敗時は対象ファイルを再取得して1件にまとめる（成功分も含む）
                attempted = match_files(image_files, [identifier]).files_for(identifier)
                report.failures.append(CopyFailure(
                    identifier=identifier,
                    matched_file=', '.join(attempted),
                    error_message='; '.join(error_messages)
                ))

        copy_time = time.time() - start_time
        progress_logger.log_copy_complete(report, copy_time)

        # 5. 結果レポート
        stats = ProcessingStats(
            identifiers_requested=len(identifiers),
            source_files_found=len(image_files),
            files_matched=total_files,
            files_copied=len(report.successes),
            files_failed=len(errors),
            identifiers_not_found=len(report.not_found),
            errors=errors
        )
        progress_logger.log_processing_complete(stats)

        return report
