#!/usr/bin/env python3
"""
Photo Number Picker - 基本的な使用例

このスクリプトは、Photo Number Pickerの基本的な使用方法を示します。
プログラムから直接ツールの機能を呼び出す例を提供します。
"""

import sys
from pathlib import Path

# プロジェクトのルートディレクトリをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

from photo_picker import CopyManager, ProcessingError, extract_identifiers, match_files


SHOT_LIST = """お客様から届いたセレクト:
1. 3185
2. 3190
‚Ä¢ 3201
- IMG_3222.JPG
"""


def example_extract_and_match():
    """番号抽出とマッチングの例（ファイル操作なし）"""
    print("=" * 60)
    print("Photo Number Picker - 番号抽出とマッチング")
    print("=" * 60)

    identifiers = extract_identifiers(SHOT_LIST)
    print(f"写真番号: {', '.join(identifiers)}")
    print()

    files = [
        "IMG_3185.CR2", "IMG_3185.JPG",
        "IMG_3190.JPG", "IMG_3190.TIF",
        "IMG_3201.JPG",
    ]
    report = match_files(files, identifiers)

    for identifier, matched in report.matches.items():
        print(f"  {identifier} -> {', '.join(matched)}")
    for identifier in report.not_found:
        print(f"  {identifier} -> 見つかりません")
    print()


def example_copy_workflow():
    """プレビューとコピーの例"""
    print("=" * 60)
    print("Photo Number Picker - プレビューとコピー")
    print("=" * 60)

    # 例用のディレクトリパス（実際の使用時は適切なパスに変更してください）
    source_directory = Path("~/Pictures/2024-05-01_Wedding").expanduser()

    if not source_directory.exists():
        print(f"⚠️  ソースディレクトリが存在しません: {source_directory}")
        print("実際のディレクトリパスに変更してください。")
        return

    copy_manager = CopyManager()

    try:
        # ステップ1: プレビュー
        print("ステップ1: プレビュー")
        print("-" * 40)
        preview = copy_manager.preview_directory(source_directory, SHOT_LIST)
        for identifier, files in preview.items():
            print(f"  {identifier} -> {', '.join(files) if files else '見つかりません'}")
        print()

        # ステップ2: ~/Downloads/Wedding Selects にコピー
        print("ステップ2: コピー")
        print("-" * 40)
        dest_directory = copy_manager.create_destination("Wedding Selects")
        report = copy_manager.perform_copy(source_directory, dest_directory, SHOT_LIST)

        print(f"✅ 成功: {len(report.successes)}個")
        for failure in report.failures:
            print(f"❌ {failure.identifier}: {failure.error_message}")
        for identifier in report.not_found:
            print(f"⚠️  見つかりません: {identifier}")

    except ProcessingError as e:
        print(f"❌ エラーが発生しました: {e}")
        return


def main():
    """メイン関数"""
    example_extract_and_match()
    example_copy_workflow()


if __name__ == '__main__':
    main()
