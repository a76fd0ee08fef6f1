# core/zxing_reader.py
import numpy as np
import zxingcpp

from .errors import FormatError, NotFoundError
from .formats import BarcodeFormat
from .reader_base import DecodeResult, ReaderBase

# BarcodeFormat -> zxing-cpp のフォーマット名
ZXING_FORMAT_NAMES = {
    BarcodeFormat.AZTEC: "Aztec",
    BarcodeFormat.CODABAR: "Codabar",
    BarcodeFormat.CODE_39: "Code39",
    BarcodeFormat.CODE_93: "Code93",
    BarcodeFormat.CODE_128: "Code128",
    BarcodeFormat.DATA_MATRIX: "DataMatrix",
    BarcodeFormat.EAN_8: "EAN8",
    BarcodeFormat.EAN_13: "EAN13",
    BarcodeFormat.ITF: "ITF",
    BarcodeFormat.MAXICODE: "MaxiCode",
    BarcodeFormat.PDF_417: "PDF417",
    BarcodeFormat.QR_CODE: "QRCode",
    BarcodeFormat.RSS_14: "DataBar",
    BarcodeFormat.RSS_EXPANDED: "DataBarExpanded",
    BarcodeFormat.UPC_A: "UPCA",
    BarcodeFormat.UPC_E: "UPCE",
}

_FROM_ZXING_NAME = {name: fmt for fmt, name in ZXING_FORMAT_NAMES.items()}


class ZXingReader(ReaderBase):
    """zxing-cpp による多形式デコード（LocalAverage = HybridBinarizer 相当）"""

    def __init__(self):
        super().__init__()
        self._zx_formats = None

    def set_formats(self, formats):
        super().set_formats(formats)
        zx_formats = tuple(getattr(zxingcpp.BarcodeFormat, ZXING_FORMAT_NAMES[f]) for f in self.formats)
        # 空なら None（ライブラリ側で全形式）
        self._zx_formats = zx_formats or None

    def decode(self, luma):
        # バインディングは詰まったバッファを要求する
        image = np.ascontiguousarray(luma)
        kwargs = {"binarizer": zxingcpp.Binarizer.LocalAverage, "return_errors": True}
        if self._zx_formats is not None:
            kwargs["formats"] = self._zx_formats

        results = zxingcpp.read_barcodes(image, **kwargs)
        if not results:
            raise NotFoundError()

        valid = [r for r in results if r.valid]
        if not valid:
            # 見つかったがチェックサム等で壊れている
            raise FormatError(str(results[0].error))
        r = valid[0]

        name = r.format.name
        points = None
        if r.position:
            pos = r.position
            points = tuple(
                (p.x, p.y) for p in (pos.top_left, pos.top_right, pos.bottom_right, pos.bottom_left)
            )
        return DecodeResult(
            format=_FROM_ZXING_NAME.get(name, name),
            text=r.text,
            raw_bytes=bytes(r.bytes),
            points=points,
        )
