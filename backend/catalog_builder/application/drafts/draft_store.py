"""
Per-user draft storage with a debounce policy.

Editors call ``save`` on every change; only values that have been left
untouched for ``debounce_seconds`` are written by ``flush``. The store is
an ordinary object owned by whoever creates it.
"""
import copy
import time
from typing import Any, Callable, Dict, Optional, Tuple

from flask import current_app

from catalog_builder.extensions import db
from catalog_builder.models.base import utc_now
from catalog_builder.models.draft import Draft
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


class DraftStore:
    def __init__(
        self,
        user_id: str,
        *,
        debounce_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if debounce_seconds is None:
            debounce_seconds = current_app.config["DRAFT_DEBOUNCE_SECONDS"]
        if debounce_seconds < 0:
            raise ValueError("debounce_seconds cannot be negative")

        self.user_id = user_id
        self.debounce_seconds = debounce_seconds
        self._clock = clock
        self._pending: Dict[str, Tuple[float, Dict[str, Any]]] = {}

    def _row(self, key: str) -> Optional[Draft]:
        return Draft.query.filter_by(user_id=self.user_id, key=key).first()

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        """Most recent value for ``key``: staged first, then persisted."""
        if key in self._pending:
            return copy.deepcopy(self._pending[key][1])

        row = self._row(key)
        return copy.deepcopy(row.snapshot) if row else None

    def save(self, key: str, value: Dict[str, Any]) -> None:
        if not key:
            raise ValueError("Draft key is required")
        self._pending[key] = (self._clock(), copy.deepcopy(value))

    def has_pending(self, key: str) -> bool:
        return key in self._pending

    def flush(self, force: bool = False) -> int:
        """
        Persist staged values that have settled. Returns how many were written.
        """
        now = self._clock()
        due = [
            key for key, (staged_at, _) in self._pending.items()
            if force or now - staged_at >= self.debounce_seconds
        ]
        if not due:
            return 0

        with transactional():
            for key in due:
                _, value = self._pending[key]
                row = self._row(key)
                if row is None:
                    row = Draft()
                    row.user_id = self.user_id
                    row.key = key
                    db.session.add(row)

                row.snapshot = value
                row.updated_at = utc_now()

            log_action(
                actor_id=self.user_id,
                action="draft.save",
                entity_type="draft",
                entity_id=None,
                payload={"keys": due},
            )

        for key in due:
            self._pending.pop(key, None)

        current_app.logger.debug("Flushed %d drafts for user %s", len(due), self.user_id)
        return len(due)

    def clear(self, key: str) -> None:
        self._pending.pop(key, None)

        row = self._row(key)
        if row is None:
            return

        with transactional():
            db.session.delete(row)
