from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class FiscalPolicy:
    """How calendar months are bucketed into quarters.

    ``quarter_of_month`` maps month number (1..12) to quarter index (1..4).
    When ``january_in_prior_year`` is set, January is labelled with the
    previous year's quarter (Q4 wraps into the next January).
    """

    name: str
    quarter_of_month: Mapping[int, int]
    january_in_prior_year: bool = False

    def quarter_index(self, month: int) -> int:
        return self.quarter_of_month[month]

    def quarter_year(self, month: int, year: int) -> int:
        if month == 1 and self.january_in_prior_year:
            return year - 1
        return year

    def months_of_quarter(self, index: int, year: int) -> list[tuple[int, int]]:
        """(month, calendar year) pairs of a quarter, in chronological order."""
        pairs = []
        for month in range(1, 13):
            if self.quarter_of_month[month] != index:
                continue
            # January of a wrapping quarter falls in the following calendar year
            cal_year = year + 1 if (month == 1 and self.january_in_prior_year) else year
            pairs.append((month, cal_year))
        pairs.sort(key=lambda p: (p[1], p[0]))
        return pairs


CALENDAR_POLICY = FiscalPolicy(
    name="calendar",
    quarter_of_month={
        1: 1, 2: 1, 3: 1,
        4: 2, 5: 2, 6: 2,
        7: 3, 8: 3, 9: 3,
        10: 4, 11: 4, 12: 4,
    },
)

FISCAL_POLICY = FiscalPolicy(
    name="fiscal",
    quarter_of_month={
        2: 1, 3: 1, 4: 1,
        5: 2, 6: 2, 7: 2,
        8: 3, 9: 3, 10: 3,
        11: 4, 12: 4, 1: 4,
    },
    january_in_prior_year=True,
)

_POLICIES = {p.name: p for p in (CALENDAR_POLICY, FISCAL_POLICY)}


def get_policy(name: str) -> FiscalPolicy:
    policy = _POLICIES.get((name or "").strip().lower())
    if policy is None:
        raise ValidationError(f"Unknown fiscal policy: {name!r} (expected one of {sorted(_POLICIES)})")
    return policy
