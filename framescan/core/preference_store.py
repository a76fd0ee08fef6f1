import sqlite3
import os
import logging

from framescan.config.settings import PREFERENCES_DB_PATH
from .formats import BarcodeFormat, FormatPreferences

logger = logging.getLogger(__name__)


class PreferenceStore:
    """読み取りフォーマット設定（真偽値）の永続化"""

    def __init__(self, db_path: str = PREFERENCES_DB_PATH):
        db_dir = os.path.dirname(db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        self.db_path = db_path
        self._init_schema()

    def _init_schema(self):
        with sqlite3.connect(self.db_path) as conn:
            c = conn.cursor()
            c.execute("""
                CREATE TABLE IF NOT EXISTS preferences (
                    key TEXT PRIMARY KEY,
                    value INTEGER NOT NULL
                )
            """)
            conn.commit()

    def get_boolean(self, key: str, default: bool = False) -> bool:
        with sqlite3.connect(self.db_path) as conn:
            c = conn.cursor()
            c.execute("SELECT value FROM preferences WHERE key = ?", (key,))
            row = c.fetchone()
        return bool(row[0]) if row else default

    def set_boolean(self, key: str, value: bool):
        self.set_many({key: value})

    def set_many(self, values):
        with sqlite3.connect(self.db_path) as conn:
            c = conn.cursor()
            c.executemany(
                "INSERT OR REPLACE INTO preferences (key, value) VALUES (?, ?)",
                [(key, int(bool(value))) for key, value in values.items()],
            )
            conn.commit()

    def as_mapping(self) -> dict:
        with sqlite3.connect(self.db_path) as conn:
            c = conn.cursor()
            c.execute("SELECT key, value FROM preferences")
            return {key: bool(value) for key, value in c.fetchall()}

    def load_format_preferences(self) -> FormatPreferences:
        prefs = FormatPreferences.from_mapping(self.as_mapping())
        logger.info(f"Loaded format preferences: {sorted(f.value for f in prefs.enabled_formats())}")
        return prefs

    def save_format_preferences(self, prefs: FormatPreferences):
        values = prefs.as_mapping()
        self.set_many({fmt.value: values[fmt.value] for fmt in BarcodeFormat})
