"""Profile discovery and caching."""

from __future__ import annotations

from pathlib import Path

from tri_lens.models.loaded_profile import LoadedProfile

PACKAGED_PROFILES_DIR = Path(__file__).resolve().parent / "profiles"


class ProfileRegistry:
    def __init__(self, profile_roots: list[Path]):
        self.profile_roots = profile_roots
        self._cache: dict[str, LoadedProfile] = {}
        self._index: dict[str, Path] | None = None

    def _build_index(self) -> dict[str, Path]:
        index: dict[str, Path] = {}
        for root in self.profile_roots:
            if not root.exists():
                continue
            for path in sorted(root.rglob("*.md")):
                # Earlier roots shadow later ones.
                index.setdefault(path.stem, path)
        return index

    def _get_index(self) -> dict[str, Path]:
        if self._index is None:
            self._index = self._build_index()
        return self._index

    def list_profiles(self) -> list[str]:
        return sorted(self._get_index().keys())

    def get(self, profile_id: str) -> LoadedProfile:
        if profile_id in self._cache:
            return self._cache[profile_id]
        path = self._get_index().get(profile_id)
        if path is None:
            raise FileNotFoundError(f"Profile not found: {profile_id} (searched: {self.profile_roots})")
        loaded = LoadedProfile(path)
        self._cache[profile_id] = loaded
        return loaded
