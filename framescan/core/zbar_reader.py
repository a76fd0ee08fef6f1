# core/zbar_reader.py
import logging

import numpy as np
from pyzbar import pyzbar
from pyzbar.pyzbar import ZBarSymbol

from .errors import NotFoundError
from .formats import BarcodeFormat
from .reader_base import DecodeResult, ReaderBase

logger = logging.getLogger(__name__)

# BarcodeFormat -> ZBarSymbol 名（zbar が読めない形式は含めない）
ZBAR_SYMBOL_NAMES = {
    BarcodeFormat.CODABAR: "CODABAR",
    BarcodeFormat.CODE_39: "CODE39",
    BarcodeFormat.CODE_93: "CODE93",
    BarcodeFormat.CODE_128: "CODE128",
    BarcodeFormat.EAN_8: "EAN8",
    BarcodeFormat.EAN_13: "EAN13",
    BarcodeFormat.ITF: "I25",
    BarcodeFormat.PDF_417: "PDF417",
    BarcodeFormat.QR_CODE: "QRCODE",
    BarcodeFormat.RSS_14: "DATABAR",
    BarcodeFormat.RSS_EXPANDED: "DATABAR_EXP",
    BarcodeFormat.UPC_A: "UPCA",
    BarcodeFormat.UPC_E: "UPCE",
}

_FROM_ZBAR_NAME = {name: fmt for fmt, name in ZBAR_SYMBOL_NAMES.items()}


class ZBarReader(ReaderBase):
    """pyzbar による多形式デコード（AZTEC / DATA_MATRIX / MAXICODE は非対応）"""

    def __init__(self):
        super().__init__()
        self._symbols = None

    def set_formats(self, formats):
        super().set_formats(formats)
        unsupported = sorted(f.value for f in self.formats if f not in ZBAR_SYMBOL_NAMES)
        if unsupported:
            logger.warning(f"zbar cannot decode {unsupported}; these formats are skipped")
        self._symbols = [ZBarSymbol[ZBAR_SYMBOL_NAMES[f]] for f in self.formats if f in ZBAR_SYMBOL_NAMES]

    def decode(self, luma):
        if self.formats and not self._symbols:
            raise NotFoundError("no zbar-supported format enabled")

        decoded_objs = pyzbar.decode(np.ascontiguousarray(luma), symbols=self._symbols or None)
        if not decoded_objs:
            raise NotFoundError()

        obj = decoded_objs[0]
        points = tuple((p.x, p.y) for p in obj.polygon) if obj.polygon else None
        return DecodeResult(
            format=_FROM_ZBAR_NAME.get(obj.type, obj.type),
            text=obj.data.decode("utf-8", errors="ignore"),
            raw_bytes=obj.data,
            points=points,
        )
