from __future__ import annotations

from dataclasses import asdict, replace
from typing import Optional

from .model import QuarterSettings, QuarterSettingsPatch


class InMemoryQuarterSettingsRepository:
    def __init__(self):
        self._by_quarter: dict[str, QuarterSettings] = {}

    def list_all(self) -> list[QuarterSettings]:
        return list(self._by_quarter.values())

    def get_by_quarter(self, quarter: str) -> Optional[QuarterSettings]:
        return self._by_quarter.get(quarter)

    def upsert(self, settings: QuarterSettings) -> QuarterSettings:
        self._by_quarter[settings.quarter] = settings
        return settings

    def update(self, quarter: str, patch: QuarterSettingsPatch) -> Optional[QuarterSettings]:
        current = self._by_quarter.get(quarter)
        if current is None:
            return None
        changes = {k: v for k, v in asdict(patch).items() if v is not None}
        updated = replace(current, **changes)
        self._by_quarter[quarter] = updated
        return updated
