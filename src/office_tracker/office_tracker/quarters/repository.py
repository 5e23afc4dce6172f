from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import QuarterSettings, QuarterSettingsPatch


class QuarterSettingsRepository(Protocol):
    def list_all(self) -> Sequence[QuarterSettings]:
        raise NotImplementedError

    def get_by_quarter(self, quarter: str) -> Optional[QuarterSettings]:
        raise NotImplementedError

    def upsert(self, settings: QuarterSettings) -> QuarterSettings:
        raise NotImplementedError

    def update(self, quarter: str, patch: QuarterSettingsPatch) -> Optional[QuarterSettings]:
        """Apply the non-None fields of ``patch``; None when ``quarter`` is not configured."""

        raise NotImplementedError
