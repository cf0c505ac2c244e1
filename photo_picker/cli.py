"""
コマンドラインインターフェース

Photo Number Pickerのメインエントリーポイントです。
argparseのサブコマンド機能を使用して、extract、preview、copyコマンドを提供します。
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from .config import PickerConfig
from .copy_manager import CopyManager
from .exceptions import ProcessingError, ValidationError
from .logger import LogConfig, ProgressLogger, get_default_log_file
from .number_extractor import extract_identifiers
from .path_validator import PathValidator

_PURPOSE_LABELS = {
    'source': 'ソースフォルダ',
    'destination': 'コピー先フォルダ',
}


def create_parser() -> argparse.ArgumentParser:
    """
    コマンドライン引数パーサーを作成

    Returns:
        設定済みのArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='photo-picker',
        description='撮影リストの番号に一致する写真をコピーするツール（RAWファイルを優先）',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  # 入力テキストから写真番号を抽出
  photo-picker extract --input shot_list.txt

  # マッチするファイルを確認
  photo-picker preview /path/to/photos --input shot_list.txt

  # ダウンロードフォルダに新しいフォルダを作成してコピー
  photo-picker copy /path/to/photos --create "Client Wedding Photos" --input shot_list.txt

詳細については各サブコマンドのヘルプを参照してください:
  photo-picker <command> --help
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='利用可能なコマンド',
        metavar='<command>'
    )

    # extractコマンド（エイリアス: e）
    extract_parser = subparsers.add_parser(
        'extract',
        aliases=['e'],
        help='入力テキストから写真番号を抽出',
        description='貼り付けたテキストから写真番号を抽出して表示します。'
    )
    _add_input_argument(extract_parser)

    # previewコマンド（エイリアス: p）
    preview_parser = subparsers.add_parser(
        'preview',
        aliases=['p'],
        help='写真番号にマッチするファイルを表示',
        description='ソースフォルダ内で写真番号にマッチするファイルを、RAW優先の規則を適用して表示します。',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  photo-picker preview /path/to/photos --input shot_list.txt
  pbpaste | photo-picker preview /path/to/photos
        """
    )
    preview_parser.add_argument(
        'source',
        type=str,
        nargs='?',
        help='写真のソースフォルダ（省略時は入力を求めます）'
    )
    _add_input_argument(preview_parser)

    # copyコマンド（エイリアス: c）
    copy_parser = subparsers.add_parser(
        'copy',
        aliases=['c'],
        help='写真番号にマッチするファイルをコピー',
        description='ソースフォルダ内で写真番号にマッチするファイルをコピー先フォルダにコピーします。',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  # 既存のフォルダにコピー
  photo-picker copy /path/to/photos --dest /path/to/selected --input shot_list.txt

  # ~/Downloads/<フォルダ名> を作成してコピー
  photo-picker copy /path/to/photos --create "Client Wedding Photos" --input shot_list.txt
        """
    )
    copy_parser.add_argument(
        'source',
        type=str,
        nargs='?',
        help='写真のソースフォルダ（省略時は入力を求めます）'
    )
    dest_group = copy_parser.add_mutually_exclusive_group()
    dest_group.add_argument(
        '--dest', '-d',
        type=str,
        help='コピー先フォルダ（省略時は入力を求めます）'
    )
    dest_group.add_argument(
        '--create', '-c',
        type=str,
        metavar='NAME',
        help='ダウンロードフォルダに作成するフォルダ名'
    )
    copy_parser.add_argument(
        '--json',
        action='store_true',
        help='コピー結果をJSON形式で出力'
    )
    _add_input_argument(copy_parser)
    copy_parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='詳細ログを表示'
    )

    return parser


def _add_input_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--input', '-i',
        type=str,
        help='写真番号を含むテキストファイル（省略時は標準入力）'
    )


def read_input_text(input_path: Optional[str]) -> str:
    """
    入力テキストを読み込む

    Args:
        input_path: テキストファイルのパス（Noneの場合は標準入力）

    Returns:
        入力テキスト

    Raises:
        ValidationError: ファイルが読み込めない、またはテキストが空の場合
    """
    if input_path:
        try:
            text = Path(input_path).expanduser().read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ValidationError(f"入力ファイルを読み込めません: {input_path} ({e})") from e
    else:
        text = sys.stdin.read()

    if not text.strip():
        raise ValidationError("写真番号を入力してください")
    return text


def prompt_directory(purpose: str, input_func: Optional[Callable[[str], str]] = None) -> Optional[Path]:
    """
    フォルダのパスをユーザーに入力してもらう

    Args:
        purpose: 'source' または 'destination'
        input_func: 入力関数（省略時は組み込みのinput）

    Returns:
        入力されたパス。キャンセルされた場合None
    """
    if input_func is None:
        input_func = input

    label = _PURPOSE_LABELS.get(purpose, purpose)
    try:
        answer = input_func(f"{label}のパスを入力してください（空欄でキャンセル）: ")
    except (EOFError, KeyboardInterrupt):
        return None

    answer = answer.strip().strip('"').strip("'")
    if not answer:
        return None
    return PathValidator.normalize_path(answer)


def _resolve_directory(path_str: Optional[str], purpose: str) -> Path:
    """引数またはプロンプトからディレクトリパスを取得"""
    if path_str:
        return PathValidator.normalize_path(path_str)

    path = prompt_directory(purpose)
    if path is None:
        raise ValidationError(f"{_PURPOSE_LABELS[purpose]}が選択されていません")
    return path


def handle_extract_command(args) -> int:
    """
    extractコマンドを処理

    Args:
        args: 解析されたコマンドライン引数

    Returns:
        終了コード（0: 成功、1: エラー）
    """
    try:
        identifiers = extract_identifiers(read_input_text(args.input))

        if not identifiers:
            print("写真番号が見つかりませんでした。")
            return 0

        print(f"写真番号 ({len(identifiers)}個):")
        for identifier in identifiers:
            print(f"  {identifier}")
        return 0

    except ValidationError as e:
        print(f"❌ 入力エラー: {e}", file=sys.stderr)
        return 1


def handle_preview_command(args) -> int:
    """
    previewコマンドを処理

    Args:
        args: 解析されたコマンドライン引数

    Returns:
        終了コード（0: 成功、1: エラー）
    """
    try:
        source_path = _resolve_directory(args.source, 'source')
        PathValidator.validate_directory(source_path)
        raw_text = read_input_text(args.input)

        copy_manager = CopyManager()
        preview = copy_manager.preview_directory(source_path, raw_text)

        if not preview:
            print("写真番号が見つかりませんでした。")
            return 0

        matched_count = 0
        for identifier, files in preview.items():
            if files:
                matched_count += len(files)
                print(f"{identifier} -> {', '.join(files)}")
            else:
                print(f"{identifier} -> 見つかりません")

        print()
        print(f"マッチしたファイル: {matched_count}個 / 写真番号: {len(preview)}個")
        return 0

    except ValidationError as e:
        print(f"❌ 入力エラー: {e}", file=sys.stderr)
        return 1
    except ProcessingError as e:
        print(f"❌ 処理エラー: {e}", file=sys.stderr)
        return 1


def _create_json_logger(config: PickerConfig) -> ProgressLogger:
    """JSON出力用のロガーを作成（標準出力にはJSONのみを出力する）"""
    log_file = config.log_file
    if log_file is None and config.verbose:
        log_file = get_default_log_file(config.log_dir)
    return ProgressLogger(LogConfig(
        console_level=logging.CRITICAL,
        log_file=log_file,
        verbose=config.verbose
    ))


def handle_copy_command(args) -> int:
    """
    copyコマンドを処理

    Args:
        args: 解析されたコマンドライン引数

    Returns:
        終了コード（0: 成功、1: エラー）
    """
    try:
        source_path = _resolve_directory(args.source, 'source')
        PathValidator.validate_directory(source_path)
        raw_text = read_input_text(args.input)

        config = PickerConfig.from_env(verbose=args.verbose)
        progress_logger = _create_json_logger(config) if args.json else None
        copy_manager = CopyManager(config, progress_logger=progress_logger)

        if args.create is not None:
            dest_path = copy_manager.create_destination(args.create)
        else:
            dest_path = _resolve_directory(args.dest, 'destination')

        report = copy_manager.perform_copy(source_path, dest_path, raw_text)

        if args.json:
            print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        else:
            for success in report.successes:
                print(f"✅ {success.identifier} -> {success.matched_file}")
            for failure in report.failures:
                print(f"❌ {failure.identifier} -> {failure.matched_file}: {failure.error_message}")
            for identifier in report.not_found:
                print(f"⚠️  {identifier} -> 見つかりません")

        return 0

    except ValidationError as e:
        print(f"❌ 入力エラー: {e}", file=sys.stderr)
        return 1
    except ProcessingError as e:
        print(f"❌ 処理エラー: {e}", file=sys.stderr)
        return 1


def main(argv=None) -> int:
    """
    メインエントリーポイント

    Args:
        argv: コマンドライン引数（省略時はsys.argv）

    Returns:
        終了コード（0: 成功、1: エラー）
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # コマンドが指定されていない場合はヘルプを表示
    if not args.command:
        parser.print_help()
        return 0

    if args.command in ['extract', 'e']:
        return handle_extract_command(args)
    elif args.command in ['preview', 'p']:
        return handle_preview_command(args)
    elif args.command in ['copy', 'c']:
        return handle_copy_command(args)
    else:
        print(f"❌ 不明なコマンド: {args.command}", file=sys.stderr)
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
