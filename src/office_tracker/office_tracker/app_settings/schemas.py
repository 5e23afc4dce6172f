from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class AppSettingsCreate(BaseModel):
    current_quarter: str = Field(alias="currentQuarter")
    dark_mode: bool = Field(default=False, alias="darkMode")
    notifications: bool = True

    model_config = {"populate_by_name": True}


class AppSettingsUpdate(BaseModel):
    current_quarter: Optional[str] = Field(default=None, alias="currentQuarter")
    dark_mode: Optional[bool] = Field(default=None, alias="darkMode")
    notifications: Optional[bool] = None

    model_config = {"populate_by_name": True}
