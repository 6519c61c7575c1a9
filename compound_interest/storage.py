"""SQLite key/value store for the calculator's form state.

One row per key; saving the same key again replaces the previous state.
"""

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from compound_interest.schemas.interest import FormState

logger = logging.getLogger(__name__)


class FormStateStore:
    def __init__(self, db_path: Union[str, Path]):
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                create table if not exists form_state (
                    key text primary key,
                    state text not null,
                    updated_at text not null
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def save(self, key: str, state: FormState) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                insert into form_state (key, state, updated_at)
                values (?, ?, ?)
                on conflict(key) do update set
                    state = excluded.state,
                    updated_at = excluded.updated_at
                """,
                (
                    key,
                    json.dumps(state.model_dump()),
                    datetime.now(timezone.utc).isoformat(timespec="seconds"),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("form state saved", extra={"state_key": key})

    def load(self, key: str) -> Optional[FormState]:
        conn = self._connect()
        try:
            row = conn.execute(
                "select state from form_state where key = ?",
                (key,),
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            logger.debug("no stored form state", extra={"state_key": key})
            return None
        return FormState.model_validate(json.loads(row["state"]))
