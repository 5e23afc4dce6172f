from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppSettings:
    """Cấu hình chung của ứng dụng (singleton)."""

    settings_id: str
    current_quarter: str
    dark_mode: bool = False
    notifications: bool = True


@dataclass(frozen=True)
class AppSettingsPatch:
    current_quarter: Optional[str] = None
    dark_mode: Optional[bool] = None
    notifications: Optional[bool] = None
