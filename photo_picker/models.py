"""
データモデル定義

Photo Number Pickerで使用するデータクラスを定義します。
すべてのデータは一回の処理の間だけ存在し、永続化されません。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


class PriorityClass(Enum):
    """ファイル形式の優先度クラス（値が小さいほど優先）"""
    RAW = 0
    OTHER = 1  # PNG / TIFF
    JPEG = 2


@dataclass
class MatchReport:
    """マッチング結果"""
    matches: Dict[str, List[str]] = field(default_factory=dict)  # 番号 -> 優先度適用後のファイル名
    not_found: List[str] = field(default_factory=list)

    def files_for(self, identifier: str) -> List[str]:
        """番号に対応するファイル名のリストを取得（見つからない場合は空リスト）"""
        return list(self.matches.get(identifier, []))


@dataclass
class CopySuccess:
    """コピー成功"""
    identifier: str
    matched_file: str


@dataclass
class CopyFailure:
    """コピー失敗"""
    identifier: str
    matched_file: str  # 対象ファイル名（複数の場合は ", " 区切り）
    error_message: str


@dataclass
class CopyReport:
    """コピー処理全体の結果"""
    successes: List[CopySuccess] = field(default_factory=list)
    failures: List[CopyFailure] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """画面表示用の辞書形式に変換"""
        return {
            'success': [
                {'input': s.identifier, 'matched': s.matched_file}
                for s in self.successes
            ],
            'failed': [
                {'input': f.identifier, 'matched': f.matched_file, 'error': f.error_message}
                for f in self.failures
            ],
            'notFound': list(self.not_found),
        }


@dataclass
class ProcessingStats:
    """処理統計情報"""
    identifiers_requested: int
    source_files_found: int
    files_matched: int
    files_copied: int
    files_failed: int
    identifiers_not_found: int
    errors: List[Tuple[str, str]]  # (identifier or file, error_message)
