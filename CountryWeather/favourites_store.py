"""Per-user favourite countries, stored as JSON snapshots."""
import json
import logging
import os
import uuid
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from country_data import CountryRecord


@dataclass
class Favourite:
    id: str
    user_id: str
    country_name: str
    country_data: Dict[str, Any]
    created_at: str
    updated_at: str


class FavouritesStore:
    """
    Favourites keyed by (user_id, country_name), one row per pair.

    Every call is made on behalf of a user and only ever sees that user's rows.
    The snapshot is whatever the record looked like when it was saved; it is
    refreshed only by saving the same country again.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._rows: Dict[str, Favourite] = {}
        if path and os.path.exists(path):
            self._read()

    def add(self, user_id: str, record: CountryRecord) -> Favourite:
        """Save (or refresh) a favourite for this user."""
        self._require_user(user_id)
        now = datetime.now(timezone.utc).isoformat()
        # round-trip through JSON so only serializable snapshots are stored
        snapshot = json.loads(json.dumps(record.to_dict()))
        existing = self._find(user_id, record.common_name)
        if existing is not None:
            existing.country_data = snapshot
            existing.updated_at = now
            logging.info(f"Refreshed favourite {record.common_name} for user {user_id}")
            self._write()
            return existing

        favourite = Favourite(
            id=str(uuid.uuid4()),
            user_id=user_id,
            country_name=record.common_name,
            country_data=snapshot,
            created_at=now,
            updated_at=now,
        )
        self._rows[favourite.id] = favourite
        logging.info(f"Added favourite {record.common_name} for user {user_id}")
        self._write()
        return favourite

    def list(self, user_id: str) -> List[Favourite]:
        self._require_user(user_id)
        return sorted(
            (row for row in self._rows.values() if row.user_id == user_id),
            key=lambda row: row.created_at,
        )

    def is_favourite(self, user_id: str, country_name: str) -> bool:
        self._require_user(user_id)
        return self._find(user_id, country_name) is not None

    def remove(self, user_id: str, country_name: str) -> bool:
        """Remove a favourite by country name. Returns False if it was not saved."""
        self._require_user(user_id)
        row = self._find(user_id, country_name)
        if row is None:
            return False
        del self._rows[row.id]
        logging.info(f"Removed favourite {country_name} for user {user_id}")
        self._write()
        return True

    def delete(self, user_id: str, favourite_id: str) -> None:
        """
        Remove a favourite by row id.

        Raises:
            KeyError: If no such row exists
            PermissionError: If the row belongs to another user
        """
        self._require_user(user_id)
        row = self._rows.get(favourite_id)
        if row is None:
            raise KeyError(favourite_id)
        if row.user_id != user_id:
            raise PermissionError("Users can only manage their own favourites")
        del self._rows[favourite_id]
        self._write()

    def _find(self, user_id: str, country_name: str) -> Optional[Favourite]:
        for row in self._rows.values():
            if row.user_id == user_id and row.country_name == country_name:
                return row
        return None

    @staticmethod
    def _require_user(user_id: str) -> None:
        if not user_id:
            raise PermissionError("Please login to see your favourites")

    def _read(self) -> None:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        self._rows = {row["id"]: Favourite(**row) for row in data}
        logging.debug(f"Loaded {len(self._rows)} favourites from {self.path}")

    def _write(self) -> None:
        if not self.path:
            return
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([asdict(row) for row in self._rows.values()], f, indent=2, ensure_ascii=False)
