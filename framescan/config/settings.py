# ライブラリ全体の設定値

# ビューファインダー枠（画面座標, px）
MIN_FRAME_WIDTH = 240
MIN_FRAME_HEIGHT = 240
MAX_FRAME_WIDTH = 675  # = 5/8 * 1080
MAX_FRAME_HEIGHT = 1200  # = 5/8 * 1920

# 画面サイズに対する枠の目標比率 (5/8)
FRAME_TARGET_NUMERATOR = 5
FRAME_TARGET_DENOMINATOR = 8

# デコードバックエンド: "zxing" or "zbar"
DEFAULT_BACKEND = "zxing"

# 読み取りフォーマット設定の保存先
PREFERENCES_DB_PATH = "data/preferences.db"

# ログ
LOG_DIR = "data/logs"
LOG_FILE_BASENAME = "framescan.log"
LOG_MAX_BYTES = 2 * 1024 * 1024  # 2MB
LOG_BACKUP_COUNT = 3
LOG_LEVEL = "INFO"  # "DEBUG" でデコード時間も出力
LOG_TO_FILE = True
