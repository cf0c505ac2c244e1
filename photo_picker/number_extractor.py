"""
番号抽出モジュール

撮影リストなどから貼り付けられた自由形式のテキストから、
写真番号の候補を抽出します。

1行ごとに番号付きリスト（"12. "）と箇条書き記号（"• ", "- ", "* "）を除去し、
3桁以上の数字列を番号として取り出します。3桁以上の数字列がない行では、
値が100以上の数字列のみを採用します。
"""

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# 番号付きリストの接頭辞（例: "1. ", "12."）
_ORDERED_LIST_PREFIX = re.compile(r'^\d+\.\s*')

# 箇条書き記号。"‚Ä¢" は "•" がMac Romanで文字化けしたもの
_BULLET_PREFIX = re.compile(r'^(?:‚Ä¢|[•‚Ä¢\-*])\s*')

_PHOTO_NUMBER = re.compile(r'\d{3,}')
_ANY_NUMBER = re.compile(r'\d+')

# 3桁未満しかない行で採用する最小値
MIN_FALLBACK_NUMBER = 100


def clean_line(line: str) -> str:
    """
    行頭のリスト記号を取り除く

    Args:
        line: 入力テキストの1行

    Returns:
        記号と前後の空白を除去した行
    """
    cleaned = line.strip()
    cleaned = _ORDERED_LIST_PREFIX.sub('', cleaned, count=1)
    cleaned = _BULLET_PREFIX.sub('', cleaned, count=1)
    return cleaned.strip()


def extract_from_line(line: str) -> List[str]:
    """
    1行から番号を抽出

    Args:
        line: 入力テキストの1行

    Returns:
        抽出した番号のリスト（出現順、重複あり）
    """
    cleaned = clean_line(line)
    if not cleaned:
        return []

    photo_numbers = _PHOTO_NUMBER.findall(cleaned)
    if photo_numbers:
        return photo_numbers

    # 3桁以上の数字がない場合は小さすぎる数字を除外
    return [num for num in _ANY_NUMBER.findall(cleaned) if int(num) >= MIN_FALLBACK_NUMBER]


def extract_identifiers(text: str) -> List[str]:
    """
    テキスト全体から写真番号を抽出

    先頭のゼロは保持したまま、最初に出現した順で重複を除去します。

    Args:
        text: ユーザーが貼り付けたテキスト

    Returns:
        写真番号のリスト
    """
    identifiers: List[str] = []
    for line in text.split('\n'):
        identifiers.extend(extract_from_line(line))

    # dictは挿入順を保持する
    unique = list(dict.fromkeys(identifiers))
    logger.debug(f"番号抽出: {len(unique)}個 ({len(identifiers)}個から重複除去)")
    return unique
