from __future__ import annotations

import json
import os
import re
import secrets
import sqlite3
import threading
from functools import lru_cache
from typing import Any

from app.core.config import settings

_FIELD_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def new_document_id() -> str:
    return secrets.token_hex(12)


class DocumentStore:
    """JSON documents in SQLite, addressed by (collection, id).

    Writes replace the whole document; there is no version check, so two
    writers on the same id resolve as last-write-wins.
    """

    def __init__(self, db_path: str):
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn

        if self._db_path != ":memory:":
            directory = os.path.dirname(self._db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

        conn = sqlite3.connect(
            self._db_path,
            check_same_thread=False,
            timeout=5,
            isolation_level=None,
        )
        if self._db_path != ":memory:":
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute("PRAGMA synchronous=NORMAL;")
        conn.execute("PRAGMA busy_timeout=5000;")
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS documents (
                collection TEXT NOT NULL,
                id TEXT NOT NULL,
                body_json TEXT NOT NULL,
                PRIMARY KEY (collection, id)
            );
            """
        )
        self._conn = conn
        return conn

    def init(self) -> None:
        with self._lock:
            self._connection()

    def create(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        doc = dict(document)
        doc["id"] = doc.get("id") or new_document_id()
        with self._lock:
            conn = self._connection()
            conn.execute(
                "INSERT INTO documents (collection, id, body_json) VALUES (?, ?, ?)",
                (collection, doc["id"], json.dumps(doc, ensure_ascii=False)),
            )
        return doc

    def find_by_id(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        with self._lock:
            conn = self._connection()
            row = conn.execute(
                "SELECT body_json FROM documents WHERE collection = ? AND id = ?",
                (collection, doc_id),
            ).fetchone()
        if not row:
            return None
        return json.loads(row[0])

    def _select_one(self, conn: sqlite3.Connection, collection: str, filters: dict[str, Any]) -> dict[str, Any] | None:
        clauses = ["collection = ?"]
        params: list[Any] = [collection]
        for field, value in filters.items():
            if not _FIELD_RE.match(field):
                raise ValueError(f"Invalid filter field '{field}'")
            clauses.append(f"json_extract(body_json, '$.{field}') = ?")
            params.append(value)

        query = f"SELECT body_json FROM documents WHERE {' AND '.join(clauses)} ORDER BY rowid LIMIT 1"
        row = conn.execute(query, params).fetchone()
        if not row:
            return None
        return json.loads(row[0])

    def find_one(self, collection: str, filters: dict[str, Any]) -> dict[str, Any] | None:
        with self._lock:
            return self._select_one(self._connection(), collection, filters)

    def create_unless_exists(
        self,
        collection: str,
        document: dict[str, Any],
        filters: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Insert `document` only if no document matches `filters`; None when one does.

        Lookup and insert share one write transaction (`BEGIN IMMEDIATE`).
        """
        doc = dict(document)
        doc["id"] = doc.get("id") or new_document_id()
        with self._lock:
            conn = self._connection()
            conn.execute("BEGIN IMMEDIATE")
            try:
                if self._select_one(conn, collection, filters) is not None:
                    conn.execute("ROLLBACK")
                    return None
                conn.execute(
                    "INSERT INTO documents (collection, id, body_json) VALUES (?, ?, ?)",
                    (collection, doc["id"], json.dumps(doc, ensure_ascii=False)),
                )
            except Exception:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        return doc

    def save(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        if not document.get("id"):
            raise ValueError("Cannot save a document without an id")
        with self._lock:
            conn = self._connection()
            conn.execute(
                """
                INSERT INTO documents (collection, id, body_json) VALUES (?, ?, ?)
                ON CONFLICT (collection, id) DO UPDATE SET body_json = excluded.body_json
                """,
                (collection, document["id"], json.dumps(document, ensure_ascii=False)),
            )
        return document

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


@lru_cache(maxsize=1)
def get_document_store() -> DocumentStore:
    return DocumentStore(settings.document_db_path)
