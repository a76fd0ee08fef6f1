"""
読み取り対象フォーマットの選択
"""
from dataclasses import dataclass, fields
from enum import Enum
from typing import FrozenSet, Iterable, Mapping


class BarcodeFormat(str, Enum):
    AZTEC = "AZTEC"
    CODABAR = "CODABAR"
    CODE_39 = "CODE_39"
    CODE_93 = "CODE_93"
    CODE_128 = "CODE_128"
    DATA_MATRIX = "DATA_MATRIX"
    EAN_8 = "EAN_8"
    EAN_13 = "EAN_13"
    ITF = "ITF"
    MAXICODE = "MAXICODE"
    PDF_417 = "PDF_417"
    QR_CODE = "QR_CODE"
    RSS_14 = "RSS_14"
    RSS_EXPANDED = "RSS_EXPANDED"
    UPC_A = "UPC_A"
    UPC_E = "UPC_E"


ALL_FORMATS: FrozenSet[BarcodeFormat] = frozenset(BarcodeFormat)


def select_formats(preferences: Mapping[str, bool]) -> FrozenSet[BarcodeFormat]:
    """
    preferences: {フォーマット名: 有効フラグ}
    未指定のキーは無効扱い。未知のキーは無視する。
    """
    return frozenset(fmt for fmt in BarcodeFormat if preferences.get(fmt.value, False))


def resolve_formats(enabled: Iterable[BarcodeFormat]) -> FrozenSet[BarcodeFormat]:
    """
    リーダーに渡すフォーマット集合。
    何も有効でない場合は全フォーマットを試す。
    """
    enabled = frozenset(enabled)
    return enabled if enabled else ALL_FORMATS


@dataclass
class FormatPreferences:
    """フォーマットごとの有効フラグ（既定はすべて無効）"""

    AZTEC: bool = False
    CODABAR: bool = False
    CODE_39: bool = False
    CODE_93: bool = False
    CODE_128: bool = False
    DATA_MATRIX: bool = False
    EAN_8: bool = False
    EAN_13: bool = False
    ITF: bool = False
    MAXICODE: bool = False
    PDF_417: bool = False
    QR_CODE: bool = False
    RSS_14: bool = False
    RSS_EXPANDED: bool = False
    UPC_A: bool = False
    UPC_E: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, bool]) -> "FormatPreferences":
        return cls(**{fmt.value: bool(mapping.get(fmt.value, False)) for fmt in BarcodeFormat})

    @classmethod
    def from_formats(cls, formats: Iterable[BarcodeFormat]) -> "FormatPreferences":
        return cls(**{BarcodeFormat(fmt).value: True for fmt in formats})

    def as_mapping(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def enabled_formats(self) -> FrozenSet[BarcodeFormat]:
        return select_formats(self.as_mapping())
