from __future__ import annotations

from dataclasses import asdict, replace
from typing import Optional

from .model import AppSettings, AppSettingsPatch


class InMemoryAppSettingsRepository:
    def __init__(self):
        self._settings: Optional[AppSettings] = None

    def get(self) -> Optional[AppSettings]:
        return self._settings

    def save(self, settings: AppSettings) -> AppSettings:
        self._settings = settings
        return settings

    def update(self, patch: AppSettingsPatch) -> Optional[AppSettings]:
        if self._settings is None:
            return None
        changes = {k: v for k, v in asdict(patch).items() if v is not None}
        self._settings = replace(self._settings, **changes)
        return self._settings
