from __future__ import annotations

import uuid
from typing import Callable, Optional

from ..common.logging_utils import get_logger
from ..common.validators import require_quarter_label
from ..core.exceptions import NotFoundError
from .model import AppSettings, AppSettingsPatch
from .repository import AppSettingsRepository

logger = get_logger("app_settings")


def app_settings_to_dict(s: AppSettings) -> dict:
    return {
        "id": s.settings_id,
        "currentQuarter": s.current_quarter,
        "darkMode": s.dark_mode,
        "notifications": s.notifications,
    }


class AppSettingsService:
    def __init__(self, settings: AppSettingsRepository, *, id_factory: Optional[Callable[[], str]] = None):
        self._settings = settings
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def find(self) -> Optional[AppSettings]:
        return self._settings.get()

    def get(self) -> AppSettings:
        current = self._settings.get()
        if not current:
            raise NotFoundError("App settings not found")
        return current

    def create(self, *, current_quarter: str, dark_mode: bool = False, notifications: bool = True) -> AppSettings:
        """Replace the singleton with a fresh record."""
        settings = AppSettings(
            settings_id=self._new_id(),
            current_quarter=require_quarter_label(current_quarter, "currentQuarter"),
            dark_mode=bool(dark_mode),
            notifications=bool(notifications),
        )
        self._settings.save(settings)
        logger.info("Created app settings (currentQuarter=%s)", settings.current_quarter)
        return settings

    def update(self, patch: AppSettingsPatch) -> AppSettings:
        clean = AppSettingsPatch(
            current_quarter=(
                require_quarter_label(patch.current_quarter, "currentQuarter")
                if patch.current_quarter is not None
                else None
            ),
            dark_mode=None if patch.dark_mode is None else bool(patch.dark_mode),
            notifications=None if patch.notifications is None else bool(patch.notifications),
        )
        settings = self._settings.update(clean)
        if settings is None:
            logger.warning("Update before app settings exist")
            raise NotFoundError("App settings not found")
        logger.info("Updated app settings (currentQuarter=%s)", settings.current_quarter)
        return settings
