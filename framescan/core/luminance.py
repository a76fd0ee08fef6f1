"""
カメラフレーム（Y平面）から読み取り枠部分の輝度画像を切り出す
"""
import cv2
import numpy as np

from .errors import FrameError


class PlanarLuminanceSource:
    """
    行優先・1画素1バイトの輝度平面に対する切り出しビュー。
    data は bytes / bytearray / memoryview / numpy 配列のいずれでもよい。
    先頭 data_width * data_height バイトだけを使う（後続のU/V平面は無視）。
    """

    def __init__(self, data, data_width, data_height, left, top, width, height, reverse_horizontal=False):
        if data_width <= 0 or data_height <= 0:
            raise FrameError(f"Invalid frame size: {data_width}x{data_height}")
        if left < 0 or top < 0 or width <= 0 or height <= 0 \
                or left + width > data_width or top + height > data_height:
            raise FrameError(
                f"Crop rectangle ({left}, {top}, {width}x{height}) does not fit within "
                f"image data {data_width}x{data_height}"
            )

        if isinstance(data, np.ndarray):
            plane = np.asarray(data, dtype=np.uint8).reshape(-1)
        else:
            plane = np.frombuffer(data, dtype=np.uint8)
        if plane.size < data_width * data_height:
            raise FrameError(
                f"Frame buffer too short: {plane.size} bytes for {data_width}x{data_height}"
            )

        self.data_width = data_width
        self.data_height = data_height
        self.left = left
        self.top = top
        self.width = width
        self.height = height

        # コピーせずにビューとして切り出す
        full = plane[:data_width * data_height].reshape(data_height, data_width)
        matrix = full[top:top + height, left:left + width]
        if reverse_horizontal:
            matrix = matrix[:, ::-1]
        self._matrix = matrix

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    def get_row(self, y: int) -> np.ndarray:
        if y < 0 or y >= self.height:
            raise IndexError(f"Requested row is outside the image: {y}")
        return self._matrix[y]

    @classmethod
    def from_bgr(cls, frame_bgr: np.ndarray) -> "PlanarLuminanceSource":
        """OpenCVのBGR画像からフレーム全体の輝度ソースを作る"""
        gray = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2GRAY)
        h, w = gray.shape[:2]
        return cls(gray, w, h, 0, 0, w, h)
