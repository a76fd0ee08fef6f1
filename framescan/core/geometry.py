"""
ビューファインダー枠の計算（画面座標 → カメラフレーム座標）
"""
import logging
import threading
from typing import NamedTuple, Optional

from framescan.config.settings import (
    MIN_FRAME_WIDTH,
    MIN_FRAME_HEIGHT,
    MAX_FRAME_WIDTH,
    MAX_FRAME_HEIGHT,
    FRAME_TARGET_NUMERATOR,
    FRAME_TARGET_DENOMINATOR,
)

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    width: int
    height: int


class Rect(NamedTuple):
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


def _trunc_div(a: int, b: int) -> int:
    # 0方向への切り捨て（負の座標でも符号を保つ）
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def find_desired_dimension_in_range(resolution: int, hard_min: int, hard_max: int) -> int:
    dim = FRAME_TARGET_NUMERATOR * resolution // FRAME_TARGET_DENOMINATOR
    if dim < hard_min:
        return hard_min
    if dim > hard_max:
        return hard_max
    return dim


def scale_rect(rect: Rect, source: Resolution, target: Resolution) -> Rect:
    """rect を source 座標系から target 座標系へ線形変換する"""
    return Rect(
        _trunc_div(rect.left * target.width, source.width),
        _trunc_div(rect.top * target.height, source.height),
        _trunc_div(rect.right * target.width, source.width),
        _trunc_div(rect.bottom * target.height, source.height),
    )


class FrameGeometry:
    """
    画面解像度から読み取り枠を求め、プレビュー（カメラフレーム）座標に写像する。

    画面上の枠は生成時に一度だけ計算し、以後変更しない。
    プレビュー座標の枠は最初に届いたフレーム解像度で計算してキャッシュし、
    解像度が変わった場合のみ再計算する。
    """

    def __init__(self, screen_resolution):
        width, height = screen_resolution
        if width < 0 or height < 0:
            raise ValueError(f"Invalid screen resolution: {width}x{height}")
        self.screen_resolution = Resolution(int(width), int(height))

        self._lock = threading.Lock()
        self._framing_rect = self._compute_framing_rect()
        self._preview_resolution: Optional[Resolution] = None
        self._framing_rect_in_preview: Optional[Rect] = None

    def _compute_framing_rect(self) -> Rect:
        res = self.screen_resolution
        width = find_desired_dimension_in_range(res.width, MIN_FRAME_WIDTH, MAX_FRAME_WIDTH)
        height = find_desired_dimension_in_range(res.height, MIN_FRAME_HEIGHT, MAX_FRAME_HEIGHT)

        left_offset = _trunc_div(res.width - width, 2)
        top_offset = _trunc_div(res.height - height, 2)
        rect = Rect(left_offset, top_offset, left_offset + width, top_offset + height)
        logger.debug(f"Calculated framing rect: {rect}")
        return rect

    @property
    def framing_rect(self) -> Rect:
        return self._framing_rect

    def get_framing_rect(self) -> Rect:
        return self._framing_rect

    @property
    def preview_resolution(self) -> Optional[Resolution]:
        return self._preview_resolution

    def framing_rect_in_preview(self, width: int, height: int) -> Optional[Rect]:
        """
        framing_rect と同じ領域をプレビューフレームの座標で返す。
        画面解像度が未確定（0）の場合、または枠がフレームに収まらない場合は None（利用不可）。
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid preview resolution: {width}x{height}")
        if self.screen_resolution.width == 0 or self.screen_resolution.height == 0:
            return None

        preview = Resolution(width, height)
        with self._lock:
            if self._preview_resolution != preview:
                if self._preview_resolution is not None:
                    logger.info(f"Preview resolution changed {self._preview_resolution} -> {preview}")
                rect = scale_rect(self._framing_rect, self.screen_resolution, preview)
                if rect.left < 0 or rect.top < 0 or rect.right > width or rect.bottom > height:
                    # 画面が最小枠より小さい場合、枠がフレーム外にはみ出す
                    logger.warning(f"Framing rect {rect} does not fit preview {width}x{height}")
                    rect = None
                self._framing_rect_in_preview = rect
                self._preview_resolution = preview
            return self._framing_rect_in_preview
