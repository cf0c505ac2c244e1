"""
カスタム例外クラス定義

Photo Number Pickerで使用する例外クラスを定義します。
番号抽出とマッチングは例外を送出せず、空の結果を正常な結果として扱います。
"""


class ProcessingError(Exception):
    """処理エラーの基底クラス"""
    pass


class ValidationError(ProcessingError):
    """入力検証エラー"""
    pass


class DirectoryError(ProcessingError):
    """ディレクトリエラー（ソース読み取り不可、コピー先作成不可）

    バッチ全体を中断するエラーです。
    """
    pass


class CopyError(ProcessingError):
    """個別ファイルのコピーエラー

    ファイル単位で捕捉され、失敗結果に変換されます。
    """

    def __init__(self, message: str, source=None):
        super().__init__(message)
        self.source = source
