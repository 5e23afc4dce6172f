from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class QuarterSettingsCreate(BaseModel):
    quarter: str
    year: Optional[int] = None
    month1_work_days: int = Field(alias="month1WorkDays", ge=0, le=31)
    month2_work_days: int = Field(alias="month2WorkDays", ge=0, le=31)
    month3_work_days: int = Field(alias="month3WorkDays", ge=0, le=31)

    model_config = {"populate_by_name": True}


class QuarterSettingsUpdate(BaseModel):
    # Path carries the quarter; a body value must agree with it
    quarter: Optional[str] = None
    year: Optional[int] = None
    month1_work_days: Optional[int] = Field(default=None, alias="month1WorkDays", ge=0, le=31)
    month2_work_days: Optional[int] = Field(default=None, alias="month2WorkDays", ge=0, le=31)
    month3_work_days: Optional[int] = Field(default=None, alias="month3WorkDays", ge=0, le=31)

    model_config = {"populate_by_name": True}
