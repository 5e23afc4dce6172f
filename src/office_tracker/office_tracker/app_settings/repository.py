from __future__ import annotations

from typing import Optional, Protocol

from .model import AppSettings, AppSettingsPatch


class AppSettingsRepository(Protocol):
    def get(self) -> Optional[AppSettings]:
        raise NotImplementedError

    def save(self, settings: AppSettings) -> AppSettings:
        raise NotImplementedError

    def update(self, patch: AppSettingsPatch) -> Optional[AppSettings]:
        """Apply the non-None fields of ``patch``; None before settings exist."""

        raise NotImplementedError
