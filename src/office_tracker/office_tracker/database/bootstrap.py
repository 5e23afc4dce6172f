from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.logging_utils import get_logger
from ..container import Container
from ..periods.classifier import current_quarter

logger = get_logger("bootstrap")


def seed_defaults(container: Container, *, quarter: Optional[str] = None, today: Optional[date] = None) -> str:
    """Seed quarter settings and app settings for ``quarter`` (default: today's quarter).

    Existing rows are left alone. Returns the seeded quarter label.
    """
    quarter = quarter or current_quarter(container.policy, today=today)

    settings = container.quarter_settings_service.ensure_defaults(quarter)
    if container.app_settings_service.find() is None:
        container.app_settings_service.create(current_quarter=quarter)

    logger.info(
        "Seeded %s (work days %d/%d/%d)",
        quarter,
        settings.month1_work_days,
        settings.month2_work_days,
        settings.month3_work_days,
    )
    return quarter
