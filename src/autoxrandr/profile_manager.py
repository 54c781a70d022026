"""Profile management: save, load, delete and list profiles."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ProfileNotFound
from .models import Profile
from .utils import profiles_path, read_json, write_json

log = logging.getLogger(__name__)


class ProfileManager:
    """Manages named layout profiles stored together in one JSON file.

    Every mutating call is a load, modify, save cycle on the whole file.
    There is no locking: two autoxrandr processes changing profiles at the
    same time can lose one of the updates.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        # Raw JSON of entries that could not be read, kept so a later
        # write does not drop them
        self._unreadable: dict[str, object] = {}

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = profiles_path()
        return self._path

    def load_all(self) -> dict[str, Profile]:
        """Load every profile. A missing or unreadable file yields no profiles.

        Entries that cannot be read are skipped but preserved verbatim on
        the next write.
        """
        self._unreadable = {}
        data = read_json(self.path)
        if data is None:
            log.debug("No readable profile store at %s", self.path)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring profile store %s: not a JSON object", self.path)
            return {}

        profiles: dict[str, Profile] = {}
        for name, entry in data.items():
            if not isinstance(entry, dict):
                log.warning("Skipping profile %s: not a JSON object", name)
                self._unreadable[name] = entry
                continue
            try:
                profiles[name] = Profile.from_dict(entry)
            except (TypeError, ValueError, AttributeError) as e:
                log.warning("Skipping unreadable profile %s: %s", name, e)
                self._unreadable[name] = entry
        log.debug("Loaded %d profile(s) from %s", len(profiles), self.path)
        return profiles

    def save_all(self, profiles: dict[str, Profile]) -> None:
        """Overwrite the store with *profiles* and any unreadable entries."""
        data: dict[str, object] = {
            name: entry for name, entry in self._unreadable.items() if name not in profiles
        }
        data.update((name, p.to_dict()) for name, p in profiles.items())
        write_json(self.path, dict(sorted(data.items())))
        log.debug("Wrote %d profile(s) to %s", len(profiles), self.path)

    def save(self, name: str, profile: Profile) -> Path:
        """Add or replace a profile. Returns the store path."""
        profiles = self.load_all()
        profiles[name] = profile
        self.save_all(profiles)
        return self.path

    def load(self, name: str) -> Profile:
        """Load a profile by name."""
        profiles = self.load_all()
        if name not in profiles:
            raise ProfileNotFound(name)
        return profiles[name]

    def delete(self, name: str) -> None:
        """Delete a profile. Unreadable entries can be deleted too."""
        profiles = self.load_all()
        if name in profiles:
            del profiles[name]
        elif name in self._unreadable:
            del self._unreadable[name]
        else:
            raise ProfileNotFound(name)
        self.save_all(profiles)

    def list_profiles(self) -> list[str]:
        """Return sorted list of profile names."""
        return sorted(self.load_all())
