# core/decoder.py
import logging
import time
from collections.abc import Mapping

import numpy as np

from framescan.config.settings import DEFAULT_BACKEND
from .errors import FrameError, ReaderError
from .formats import BarcodeFormat, FormatPreferences, resolve_formats, select_formats
from .geometry import FrameGeometry
from .logger import get_logger
from .luminance import PlanarLuminanceSource
from .preference_store import PreferenceStore

logger = logging.getLogger(__name__)


def create_reader(backend):
    if backend == "zxing":
        from .zxing_reader import ZXingReader
        return ZXingReader()
    elif backend == "zbar":
        from .zbar_reader import ZBarReader
        return ZBarReader()
    else:
        raise ValueError(f"Unsupported decode backend: {backend}")


def _enabled_formats(formats, preferences):
    if formats is not None:
        # "QR_CODE" のような名前文字列も受け付ける
        return frozenset(BarcodeFormat(f) for f in formats)
    if preferences is None:
        return frozenset()
    if isinstance(preferences, PreferenceStore):
        preferences = preferences.load_format_preferences()
    if isinstance(preferences, FormatPreferences):
        return preferences.enabled_formats()
    if isinstance(preferences, Mapping):
        return select_formats(preferences)
    raise TypeError(f"Unsupported preferences type: {type(preferences).__name__}")


class Decoder:
    """
    読み取り枠内のデータをデコードする。
    リーダーはデコードごとに使い回し、毎回 reset() する。

    screen_resolution: 画面解像度 (width, height)
    on_result: デコード成功時に DecodeResult を受け取るコールバック
    formats / preferences: 有効なフォーマット（どちらも未指定なら全形式を試す）
    preferences は FormatPreferences / {名前: bool} / PreferenceStore のいずれか
    reader: ReaderBase 実装。未指定なら backend から生成する。
    """

    def __init__(self, screen_resolution, on_result, formats=None, preferences=None,
                 reader=None, backend=DEFAULT_BACKEND):
        get_logger()
        self.on_result = on_result
        self.geometry = FrameGeometry(screen_resolution)

        self.enabled_formats = _enabled_formats(formats, preferences)
        self.reader = reader if reader is not None else create_reader(backend)
        self.reader.set_formats(resolve_formats(self.enabled_formats))
        logger.info(
            f"Decoder ready: screen={self.geometry.screen_resolution.width}x"
            f"{self.geometry.screen_resolution.height} formats={sorted(f.value for f in self.enabled_formats) or 'all'}"
        )

    @property
    def framing_rect(self):
        return self.geometry.framing_rect

    def get_framing_rect(self):
        return self.geometry.framing_rect

    def decode(self, data, width, height):
        """
        data: プレビューフレーム（Y平面が先頭にあるYUV）
        width / height: フレームのサイズ
        戻り値: DecodeResult。見つからなければ None。
        """
        if width <= 0 or height <= 0:
            raise FrameError(f"Invalid frame size: {width}x{height}")
        size = data.size if isinstance(data, np.ndarray) else memoryview(data).nbytes
        if size < width * height:
            raise FrameError(f"Frame buffer too short: {size} bytes for {width}x{height}")

        start = time.perf_counter()
        rect = self.geometry.framing_rect_in_preview(width, height)
        if rect is None:
            return None

        source = PlanarLuminanceSource(data, width, height, rect.left, rect.top, rect.width, rect.height)
        raw_result = None
        try:
            raw_result = self.reader.decode(source.matrix)
        except ReaderError:
            pass
        finally:
            self.reader.reset()

        if raw_result is not None:
            # 内容はログに出さない
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"Found barcode in {elapsed_ms:.0f} ms")
            self.on_result(raw_result)
        return raw_result
