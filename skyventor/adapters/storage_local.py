from __future__ import annotations

import json
import os
import tempfile
from typing import Dict, Optional

from skyventor.domain.ports import SettingsStoragePort


class StorageLocal(SettingsStoragePort):
    """Local filesystem storage for user settings (JSON)."""

    FILENAME = "settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILENAME)

    def save_settings(self, payload: Dict) -> None:
        """Write settings through a temp file so readers never see a partial file."""
        os.makedirs(self.root, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix="settings_", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load_settings(self) -> Optional[Dict]:
        if not os.path.exists(self.path):
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path}: settings must be a JSON object")
        return data
