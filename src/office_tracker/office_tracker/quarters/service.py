from __future__ import annotations

import uuid
from typing import Callable, Optional

from ..common.logging_utils import get_logger
from ..common.validators import require_quarter_label
from ..core.exceptions import NotFoundError, ValidationError
from ..periods.classifier import parse_month_label, parse_quarter_label, quarter_to_months, work_days_in_month
from ..periods.policy import CALENDAR_POLICY, FiscalPolicy
from .model import QuarterSettings, QuarterSettingsPatch
from .repository import QuarterSettingsRepository

logger = get_logger("quarters")


def quarter_settings_to_dict(s: QuarterSettings) -> dict:
    return {
        "id": s.settings_id,
        "quarter": s.quarter,
        "year": s.year,
        "month1WorkDays": s.month1_work_days,
        "month2WorkDays": s.month2_work_days,
        "month3WorkDays": s.month3_work_days,
    }


class QuarterSettingsService:
    def __init__(
        self,
        quarters: QuarterSettingsRepository,
        *,
        policy: FiscalPolicy = CALENDAR_POLICY,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._quarters = quarters
        self._policy = policy
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def list_all(self) -> list[QuarterSettings]:
        return list(self._quarters.list_all())

    def find(self, quarter: str) -> Optional[QuarterSettings]:
        return self._quarters.get_by_quarter(quarter)

    def get(self, quarter: str) -> QuarterSettings:
        settings = self._quarters.get_by_quarter(quarter)
        if not settings:
            raise NotFoundError("Quarter settings not found")
        return settings

    def save(
        self,
        *,
        quarter: str,
        month1_work_days: int,
        month2_work_days: int,
        month3_work_days: int,
        year: Optional[int] = None,
    ) -> QuarterSettings:
        """Create settings for ``quarter``; an existing row is replaced."""
        quarter = require_quarter_label(quarter)
        year = self._check_year(quarter, year)

        existing = self._quarters.get_by_quarter(quarter)
        settings = QuarterSettings(
            settings_id=existing.settings_id if existing else self._new_id(),
            quarter=quarter,
            year=year,
            month1_work_days=int(month1_work_days),
            month2_work_days=int(month2_work_days),
            month3_work_days=int(month3_work_days),
        )
        self._quarters.upsert(settings)
        logger.info(
            "Saved %s work days %d/%d/%d",
            quarter,
            settings.month1_work_days,
            settings.month2_work_days,
            settings.month3_work_days,
        )
        return settings

    def update(self, quarter: str, patch: QuarterSettingsPatch) -> QuarterSettings:
        def as_int(value):
            return None if value is None else int(value)

        clean = QuarterSettingsPatch(
            year=self._check_year(quarter, patch.year) if patch.year is not None else None,
            month1_work_days=as_int(patch.month1_work_days),
            month2_work_days=as_int(patch.month2_work_days),
            month3_work_days=as_int(patch.month3_work_days),
        )
        settings = self._quarters.update(quarter, clean)
        if settings is None:
            logger.warning("Update for unconfigured quarter %s", quarter)
            raise NotFoundError("Quarter settings not found")
        logger.info("Updated %s", quarter)
        return settings

    def default_work_days(self, quarter: str) -> tuple[int, int, int]:
        """Weekday counts (Mon-Fri) of the quarter's three months."""
        months = quarter_to_months(quarter, self._policy)
        if len(months) != 3:
            raise ValidationError(f"quarter must look like 'Q3-2025', got {quarter!r}")
        counts = []
        for label in months:
            parsed = parse_month_label(label)
            if parsed is None:
                raise ValidationError(f"no calendar dates exist for {label!r} in {quarter!r}")
            month, year = parsed
            counts.append(work_days_in_month(year, month))
        return counts[0], counts[1], counts[2]

    def ensure_defaults(self, quarter: str) -> QuarterSettings:
        """Settings for ``quarter``, created from weekday counts when missing."""
        existing = self._quarters.get_by_quarter(quarter)
        if existing:
            return existing
        m1, m2, m3 = self.default_work_days(quarter)
        return self.save(quarter=quarter, month1_work_days=m1, month2_work_days=m2, month3_work_days=m3)

    @staticmethod
    def _check_year(quarter: str, year: Optional[int]) -> int:
        parsed = parse_quarter_label(quarter)
        if parsed is None:
            raise ValidationError(f"quarter must look like 'Q3-2025', got {quarter!r}")
        label_year = parsed[1]
        if year is None:
            return label_year
        if int(year) != label_year:
            raise ValidationError(f"year {year} does not match quarter {quarter!r}")
        return int(year)
