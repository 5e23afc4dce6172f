from __future__ import annotations

from dataclasses import dataclass

from .app_settings.memory_app_settings_repository import InMemoryAppSettingsRepository
from .app_settings.service import AppSettingsService
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_TARGET_RATIO
from .periods.policy import FiscalPolicy, get_policy
from .progress.calculator.standard_calculator import StandardProgressCalculator
from .progress.service import ProgressService
from .quarters.memory_quarter_repository import InMemoryQuarterSettingsRepository
from .quarters.service import QuarterSettingsService


@dataclass(frozen=True)
class Container:
    policy: FiscalPolicy

    attendance_repo: InMemoryAttendanceRepository
    quarters_repo: InMemoryQuarterSettingsRepository
    app_settings_repo: InMemoryAppSettingsRepository

    attendance_service: AttendanceService
    quarter_settings_service: QuarterSettingsService
    app_settings_service: AppSettingsService
    progress_service: ProgressService


def build_container(*, fiscal_policy: str = "calendar", target_ratio: float = DEFAULT_TARGET_RATIO) -> Container:
    """Wire a fresh, empty in-memory store and the services over it."""
    policy = get_policy(fiscal_policy)

    attendance_repo = InMemoryAttendanceRepository()
    quarters_repo = InMemoryQuarterSettingsRepository()
    app_settings_repo = InMemoryAppSettingsRepository()

    attendance_service = AttendanceService(attendance_repo, policy=policy)
    quarter_settings_service = QuarterSettingsService(quarters_repo, policy=policy)
    app_settings_service = AppSettingsService(app_settings_repo)
    progress_service = ProgressService(
        attendance_repo,
        quarters_repo,
        app_settings_repo,
        policy=policy,
        calculator=StandardProgressCalculator(target_ratio=target_ratio),
    )

    return Container(
        policy=policy,
        attendance_repo=attendance_repo,
        quarters_repo=quarters_repo,
        app_settings_repo=app_settings_repo,
        attendance_service=attendance_service,
        quarter_settings_service=quarter_settings_service,
        app_settings_service=app_settings_service,
        progress_service=progress_service,
    )
