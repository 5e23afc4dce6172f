from __future__ import annotations

import pytest

from src.office_tracker.office_tracker.core.exceptions import NotFoundError, ValidationError
from src.office_tracker.office_tracker.periods.policy import FISCAL_POLICY
from src.office_tracker.office_tracker.quarters.memory_quarter_repository import InMemoryQuarterSettingsRepository
from src.office_tracker.office_tracker.quarters.model import QuarterSettingsPatch
from src.office_tracker.office_tracker.quarters.service import QuarterSettingsService, quarter_settings_to_dict


def _service(policy=None):
    kwargs = {"id_factory": lambda: "qs-1"}
    if policy is not None:
        kwargs["policy"] = policy
    return QuarterSettingsService(InMemoryQuarterSettingsRepository(), **kwargs)


def test_save_defaults_year_from_label():
    svc = _service()

    s = svc.save(quarter="Q3-2025", month1_work_days=23, month2_work_days=21, month3_work_days=21)

    assert quarter_settings_to_dict(s) == {
        "id": "qs-1",
        "quarter": "Q3-2025",
        "year": 2025,
        "month1WorkDays": 23,
        "month2WorkDays": 21,
        "month3WorkDays": 21,
    }
    assert s.total_work_days == 65


def test_save_rejects_bad_label_and_year():
    svc = _service()

    with pytest.raises(ValidationError):
        svc.save(quarter="Q9-2025", month1_work_days=1, month2_work_days=1, month3_work_days=1)
    with pytest.raises(ValidationError):
        svc.save(quarter="Q3-2025", year=2024, month1_work_days=1, month2_work_days=1, month3_work_days=1)


def test_save_twice_keeps_one_row():
    svc = _service()
    svc.save(quarter="Q3-2025", month1_work_days=23, month2_work_days=21, month3_work_days=21)

    svc.save(quarter="Q3-2025", month1_work_days=20, month2_work_days=20, month3_work_days=20)

    assert len(svc.list_all()) == 1
    assert svc.get("Q3-2025").month1_work_days == 20


def test_update_applies_only_given_fields():
    svc = _service()
    svc.save(quarter="Q3-2025", month1_work_days=23, month2_work_days=21, month3_work_days=21)

    s = svc.update("Q3-2025", QuarterSettingsPatch(month2_work_days=19))

    assert (s.month1_work_days, s.month2_work_days, s.month3_work_days) == (23, 19, 21)
    assert s.settings_id == "qs-1"


def test_update_and_get_missing_quarter():
    svc = _service()

    with pytest.raises(NotFoundError):
        svc.update("Q1-2025", QuarterSettingsPatch(month1_work_days=1))
    with pytest.raises(NotFoundError):
        svc.get("Q1-2025")
    assert svc.find("Q1-2025") is None


def test_default_work_days_follow_policy():
    assert _service().default_work_days("Q3-2025") == (23, 21, 22)
    # Nov 2025, Dec 2025, Jan 2026
    assert _service(FISCAL_POLICY).default_work_days("Q4-2025") == (20, 23, 22)


def test_ensure_defaults_does_not_overwrite():
    svc = _service()
    svc.save(quarter="Q3-2025", month1_work_days=1, month2_work_days=2, month3_work_days=3)

    assert svc.ensure_defaults("Q3-2025").month1_work_days == 1
    assert svc.ensure_defaults("Q4-2025").quarter == "Q4-2025"


@pytest.mark.parametrize(
    "quarter, policy",
    [("Q1-0000", None), ("Q4-0000", FISCAL_POLICY), ("Q4-9999", FISCAL_POLICY)],
)
def test_default_work_days_rejects_quarters_outside_the_calendar(quarter, policy):
    with pytest.raises(ValidationError):
        _service(policy).default_work_days(quarter)


def test_update_rejects_year_for_malformed_quarter():
    with pytest.raises(ValidationError):
        _service().update("third", QuarterSettingsPatch(year=2025))
