"""
デコード処理の例外定義
"""


class ReaderError(Exception):
    """1フレーム分のデコード失敗。呼び出し側には伝播させない。"""


class NotFoundError(ReaderError):
    pass


class FormatError(ReaderError):
    """シンボルは見つかったが内容が壊れている（チェックサム不一致など）"""


class FrameError(ValueError):
    """フレームバッファと宣言サイズが合わない等、呼び出し側の契約違反"""
