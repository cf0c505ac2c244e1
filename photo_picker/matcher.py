"""
マッチング処理モジュール

写真番号に対応するファイルを検索し、同じ撮影（ベース名）に複数の形式が
ある場合はRAW > PNG/TIFF > JPEGの優先順位で選択します。

番号の照合は意図的に緩くしています。ファイル名に含まれる数字列のいずれかが
以下のどれかを満たせばマッチとみなします。

1. 整数として等しい（先頭のゼロを無視）
2. 数字列が番号を含む
3. 番号が数字列を含む
"""

import logging
import re
from typing import Dict, Iterable, List, Sequence

from .file_scanner import FileScanner
from .models import MatchReport, PriorityClass

logger = logging.getLogger(__name__)

_DIGIT_RUN = re.compile(r'\d+')


def extract_file_numbers(filename: str) -> List[str]:
    """ファイル名に含まれる数字列をすべて取得"""
    return _DIGIT_RUN.findall(filename)


def is_match(identifier: str, filename: str) -> bool:
    """
    ファイル名が写真番号にマッチするかを判定

    Args:
        identifier: 写真番号
        filename: ファイル名

    Returns:
        マッチする場合True
    """
    identifier_value = int(identifier) if identifier.isdecimal() else None
    for file_number in extract_file_numbers(filename):
        if (
            int(file_number) == identifier_value
            or identifier in file_number
            or file_number in identifier
        ):
            return True
    return False


def find_matching_files(all_files: Iterable[str], identifier: str) -> List[str]:
    """
    写真番号にマッチする画像ファイルを検索（優先度適用前）

    Args:
        all_files: ファイル名のリスト
        identifier: 写真番号

    Returns:
        マッチしたファイル名のリスト（入力順）
    """
    return [
        filename for filename in all_files
        if FileScanner.is_image_file(filename) and is_match(identifier, filename)
    ]


def prioritize_files(matching_files: Iterable[str]) -> List[str]:
    """
    ベース名ごとに最も優先度の高い形式のファイルだけを残す

    同じベース名にRAWファイルがあればRAWファイルをすべて、なければPNG/TIFFを、
    それもなければJPEGを選択します。

    Args:
        matching_files: マッチしたファイル名のリスト

    Returns:
        優先度適用後のファイル名のリスト（ベース名の出現順）
    """
    grouped: Dict[str, List[str]] = {}
    for filename in matching_files:
        grouped.setdefault(FileScanner.get_basename(filename), []).append(filename)

    prioritized: List[str] = []
    for basename, files in grouped.items():
        for priority in PriorityClass:
            selected = [f for f in files if FileScanner.classify(f) is priority]
            if selected:
                break
        prioritized.extend(selected)

        if len(selected) < len(files):
            logger.debug(f"優先度適用: {basename} - {files} -> {selected}")

    return prioritized


def match_files(all_files: Sequence[str], identifiers: Sequence[str]) -> MatchReport:
    """
    写真番号ごとにマッチするファイルを検索し、優先度を適用

    副作用のない純粋関数で、同じ入力には常に同じ結果を返します。

    Args:
        all_files: ソースディレクトリのファイル名のリスト
        identifiers: 写真番号のリスト

    Returns:
        マッチング結果
    """
    report = MatchReport()

    for identifier in identifiers:
        matching_files = find_matching_files(all_files, identifier)

        # 見つからない判定は優先度適用前の結果で行う
        if not matching_files:
            report.not_found.append(identifier)
            logger.debug(f"マッチなし: {identifier}")
            continue

        report.matches[identifier] = prioritize_files(matching_files)
        logger.debug(f"マッチ発見: {identifier} -> {report.matches[identifier]}")

    return report
