import pytest

from src.office_tracker.office_tracker.core.exceptions import ValidationError
from src.office_tracker.office_tracker.periods.policy import CALENDAR_POLICY, FISCAL_POLICY, get_policy


def test_get_policy_by_name():
    assert get_policy("calendar") is CALENDAR_POLICY
    assert get_policy(" Fiscal ") is FISCAL_POLICY


def test_get_policy_unknown_name():
    with pytest.raises(ValidationError):
        get_policy("lunar")


def test_only_fiscal_policy_shifts_january_year():
    assert CALENDAR_POLICY.quarter_year(1, 2026) == 2026
    assert FISCAL_POLICY.quarter_year(1, 2026) == 2025
    assert FISCAL_POLICY.quarter_year(2, 2026) == 2026
