"""
バーコードデコーダ（外部ライブラリ）の共通インターフェース
"""
from typing import NamedTuple, Optional, Tuple, Union

from .formats import BarcodeFormat


class DecodeResult(NamedTuple):
    """
    format: BarcodeFormat（対応表にない形式はライブラリ側の名前文字列）
    points: 読み取り枠内の座標で表したシンボルの頂点
    """
    format: Union[BarcodeFormat, str]
    text: str
    raw_bytes: bytes
    points: Optional[Tuple[Tuple[int, int], ...]] = None


class ReaderBase:
    def __init__(self):
        self.formats = frozenset()

    def set_formats(self, formats):
        self.formats = frozenset(formats)

    def decode(self, luma):
        """
        luma: 2次元 uint8 の輝度画像
        戻り値: DecodeResult。見つからなければ NotFoundError、壊れていれば FormatError。
        """
        raise NotImplementedError

    def reset(self):
        pass
