from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

from skyventor.domain.entities import Settings
from skyventor.domain.ports import BackendPort

from .error_mapping import map_api_error


@dataclass
class LoadSettings:
    backend: BackendPort
    timeout_s: Optional[float] = None

    async def __call__(self) -> Settings:
        try:
            return await asyncio.wait_for(self.backend.load_settings(), timeout=self.timeout_s)
        except Exception as exc:
            raise map_api_error(exc, default_code="LOAD_SETTINGS_FAILED") from exc


@dataclass
class SaveSettings:
    backend: BackendPort
    timeout_s: Optional[float] = None

    async def __call__(self, settings: Settings) -> None:
        try:
            await asyncio.wait_for(
                self.backend.save_settings(settings.theme, settings.language),
                timeout=self.timeout_s,
            )
        except Exception as exc:
            raise map_api_error(exc, default_code="SAVE_SETTINGS_FAILED") from exc
