"""JSON file store used as the local profile fallback."""

import json
import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from pathlib import Path

from diet_hub.adapters.profile_rows import parse_profile, profile_to_row
from diet_hub.domain.profiles import HealthProfile
from diet_hub.services.profiles import LocalProfileStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileProfileStore(LocalProfileStore):
    """Keeps all profiles in one JSON object keyed by user id."""

    path: Path

    def load(self, user_id: str) -> HealthProfile | None:
        """Return the stored profile for a user, if any."""
        row = (self._read() or {}).get(user_id)
        if not isinstance(row, dict):
            return None
        return parse_profile(row)

    def store(self, profile: HealthProfile) -> HealthProfile:
        """Write a profile, keeping the original creation time."""
        rows = self._read()
        if rows is None:
            self._set_aside()
            rows = {}
        now = datetime.now(tz=UTC)
        existing = rows.get(profile.user_id)
        created_at = (
            parse_profile(existing).created_at if isinstance(existing, dict) else None
        )
        stored = replace(profile, created_at=created_at or now, updated_at=now)
        rows[profile.user_id] = profile_to_row(stored)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(rows, indent=2), encoding="utf-8")
        return stored

    def _read(self) -> dict[str, object] | None:
        """Return the stored rows; None means the file exists but is unreadable."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            _logger.warning("Ignoring unreadable profile store at %s", self.path)
            return None
        if not isinstance(data, dict):
            _logger.warning("Ignoring malformed profile store at %s", self.path)
            return None
        return data

    def _set_aside(self) -> None:
        backup = self.path.with_name(f"{self.path.name}.corrupt")
        _logger.warning(
            "Replacing unreadable profile store %s, previous file kept at %s",
            self.path,
            backup,
        )
        self.path.replace(backup)
