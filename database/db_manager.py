import sqlite3
import os
from utils.constants import DB_FILE, DEFAULT_SETTINGS
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.db")


class DatabaseManager:
    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or DB_FILE
        self._conn: sqlite3.Connection | None = None

    @classmethod
    def in_folder(cls, db_folder: str | None) -> "DatabaseManager":
        """Place finance.db inside db_folder (created if missing), else the CWD."""
        if not db_folder:
            return cls(DB_FILE)
        os.makedirs(db_folder, exist_ok=True)
        return cls(os.path.join(db_folder, DB_FILE))

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode = WAL")
        return self._conn

    def initialize(self):
        """Create schema and seed default settings. Safe to call repeatedly."""
        conn = self.get_connection()
        self._create_schema(conn)
        self._seed_defaults(conn)
        conn.commit()
        logger.debug("Database ready at %s", self.db_path)

    def _create_schema(self, conn: sqlite3.Connection):
        # No CHECK on amount: positivity is an entry-validation rule.
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS transactions (
                id         TEXT PRIMARY KEY,
                category   TEXT NOT NULL DEFAULT '',
                amount     TEXT NOT NULL DEFAULT '0',
                date       TEXT NOT NULL,
                is_income  INTEGER NOT NULL DEFAULT 0,
                notes      TEXT
            );

            CREATE TABLE IF NOT EXISTS budgets (
                id        TEXT PRIMARY KEY,
                category  TEXT NOT NULL DEFAULT '',
                amount    TEXT NOT NULL DEFAULT '0',
                month     TEXT NOT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_transactions_date     ON transactions(date);
            CREATE INDEX IF NOT EXISTS idx_transactions_category ON transactions(category);
            CREATE INDEX IF NOT EXISTS idx_budgets_month         ON budgets(month);

            CREATE TABLE IF NOT EXISTS app_settings (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)

    def _seed_defaults(self, conn: sqlite3.Connection):
        for key, value in DEFAULT_SETTINGS:
            conn.execute(
                "INSERT OR IGNORE INTO app_settings(key, value) VALUES (?, ?)",
                (key, value),
            )

    def get_setting(self, key: str, default: str = "") -> str:
        conn = self.get_connection()
        row = conn.execute(
            "SELECT value FROM app_settings WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else default

    def set_setting(self, key: str, value: str):
        conn = self.get_connection()
        conn.execute(
            "INSERT OR REPLACE INTO app_settings(key, value) VALUES (?, ?)",
            (key, value),
        )
        conn.commit()

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
