"""
Key-value stores backing the custom tag blob.

The custom tag store only needs ``get``/``set``/``remove`` of string values
under a fixed key, the same contract a browser's localStorage offers.
"""
import json
import logging
import re
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)

# User IDs become file names; anything else could escape the data directory
SAFE_UID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,128}")


def is_safe_uid(uid: Optional[str]) -> bool:
    return isinstance(uid, str) and SAFE_UID_PATTERN.fullmatch(uid) is not None


class UserDataError(Exception):
    """A user file exists but cannot be decoded, so it must not be rewritten."""


class KeyValueStore(Protocol):
    """Minimal string key-value interface."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Process-local store; contents are lost on restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore:
    """Per-user store kept in ``<user_data_dir>/<uid>.json`` under ``"storage"``.

    Other fields of the user file are preserved on write. A user file that
    exists but cannot be decoded reads as empty and is never overwritten.
    """

    def __init__(self, uid: str, user_data_dir: Path):
        if not is_safe_uid(uid):
            raise ValueError(f"Unsafe user id: {uid!r}")
        self.uid = uid
        self.user_data_dir = user_data_dir
        self._user_file = user_data_dir / f"{uid}.json"

    def _load(self, for_write: bool = False) -> Dict:
        try:
            data = json.loads(self._user_file.read_text(encoding="utf-8"))
        except FileNotFoundError:
            data = {}
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            if for_write:
                raise UserDataError(f"Refusing to overwrite unreadable user file {self._user_file}: {e}") from e
            logger.warning(f"User file {self._user_file} is unreadable, treating storage as empty: {e}")
            return {"storage": {}}

        if not isinstance(data, dict):
            if for_write:
                raise UserDataError(f"Refusing to overwrite user file {self._user_file}: not a JSON object")
            return {"storage": {}}
        if not isinstance(data.get("storage"), dict):
            data["storage"] = {}
        return data

    def _save(self, data: Dict) -> None:
        self.user_data_dir.mkdir(parents=True, exist_ok=True)
        self._user_file.write_text(
            json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
        )

    def get(self, key: str) -> Optional[str]:
        value = self._load()["storage"].get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load(for_write=True)
        data["storage"][key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load(for_write=True)
        if data["storage"].pop(key, None) is not None:
            self._save(data)
