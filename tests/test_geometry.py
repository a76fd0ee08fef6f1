"""
==============================================================================
Framing Geometry Tests
==============================================================================
"""

import threading

import pytest

from framescan.core.geometry import (
    FrameGeometry,
    Rect,
    Resolution,
    find_desired_dimension_in_range,
    scale_rect,
)


class TestDesiredDimension:
    """Tests for the 5/8 target clamped to hard bounds."""

    def test_below_minimum_is_clamped(self):
        assert find_desired_dimension_in_range(320, 240, 675) == 240

    def test_above_maximum_is_clamped(self):
        assert find_desired_dimension_in_range(4000, 240, 675) == 675

    def test_in_range_uses_five_eighths(self):
        assert find_desired_dimension_in_range(800, 240, 675) == 500

    def test_integer_division(self):
        # 5 * 481 / 8 = 300.625
        assert find_desired_dimension_in_range(481, 240, 1200) == 300

    @pytest.mark.parametrize("width,height", [(1, 1), (320, 480), (720, 1280), (1080, 1920), (1440, 3200)])
    def test_bounds_hold(self, width, height):
        rect = FrameGeometry((width, height)).framing_rect
        assert 240 <= rect.width <= 675
        assert 240 <= rect.height <= 1200
        assert rect.width == min(max(5 * width // 8, 240), 675)
        assert rect.height == min(max(5 * height // 8, 240), 1200)


class TestFramingRect:
    """Tests for the on-screen framing rectangle."""

    def test_full_hd_portrait(self):
        rect = FrameGeometry((1080, 1920)).framing_rect
        assert rect == Rect(202, 360, 877, 1560)
        assert (rect.width, rect.height) == (675, 1200)

    def test_small_screen(self):
        rect = FrameGeometry((320, 480)).framing_rect
        assert (rect.width, rect.height) == (240, 300)
        assert (rect.left, rect.top) == (40, 90)

    @pytest.mark.parametrize("width,height", [(640, 480), (1081, 1921), (999, 333)])
    def test_centered(self, width, height):
        rect = FrameGeometry((width, height)).framing_rect
        assert rect.left == (width - rect.width) // 2
        assert rect.top == (height - rect.height) // 2

    def test_cached(self):
        geometry = FrameGeometry((1080, 1920))
        assert geometry.get_framing_rect() is geometry.framing_rect

    def test_negative_resolution_rejected(self):
        with pytest.raises(ValueError):
            FrameGeometry((-1, 480))


class TestFramingRectInPreview:
    """Tests for mapping the framing rect into frame coordinates."""

    def test_same_resolution_is_identity(self):
        geometry = FrameGeometry((1080, 1920))
        assert geometry.framing_rect_in_preview(1080, 1920) == geometry.framing_rect

    def test_scaled_into_landscape_preview(self):
        geometry = FrameGeometry((1080, 1920))
        assert geometry.framing_rect_in_preview(1280, 720) == Rect(239, 135, 1039, 585)

    def test_within_preview_bounds(self):
        geometry = FrameGeometry((1080, 2340))
        rect = geometry.framing_rect_in_preview(640, 480)
        assert 0 <= rect.left < rect.right <= 640
        assert 0 <= rect.top < rect.bottom <= 480

    def test_cached_until_resolution_changes(self):
        geometry = FrameGeometry((1080, 1920))
        first = geometry.framing_rect_in_preview(1280, 720)
        assert geometry.framing_rect_in_preview(1280, 720) is first
        assert geometry.preview_resolution == Resolution(1280, 720)

        other = geometry.framing_rect_in_preview(640, 480)
        assert other != first
        assert geometry.preview_resolution == Resolution(640, 480)

    def test_unavailable_for_zero_screen(self):
        geometry = FrameGeometry((0, 480))
        assert geometry.framing_rect_in_preview(640, 480) is None

    def test_unavailable_when_rect_exceeds_screen(self):
        # 200px screen < 240px minimum frame
        geometry = FrameGeometry((200, 200))
        assert geometry.framing_rect.left == -20
        assert geometry.framing_rect_in_preview(200, 200) is None

    def test_invalid_preview_size(self):
        geometry = FrameGeometry((1080, 1920))
        with pytest.raises(ValueError):
            geometry.framing_rect_in_preview(0, 720)

    def test_concurrent_first_access_agrees(self):
        geometry = FrameGeometry((1080, 1920))
        results = []

        def worker():
            results.append(geometry.framing_rect_in_preview(1280, 720))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(id(r) for r in results)) == 1


class TestScaleRect:
    """Tests for the linear rect transform."""

    def test_truncates_toward_zero_for_negative_coordinates(self):
        rect = scale_rect(Rect(-3, -3, 3, 3), Resolution(2, 2), Resolution(1, 1))
        assert rect == Rect(-1, -1, 1, 1)
