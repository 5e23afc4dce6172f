from datetime import date

import pytest

from src.office_tracker.office_tracker.core.exceptions import ValidationError
from src.office_tracker.office_tracker.database.bootstrap import seed_defaults
from src.office_tracker.office_tracker.main import create_app


def test_seed_defaults_for_today(container):
    quarter = seed_defaults(container, today=date(2025, 7, 15))

    assert quarter == "Q3-2025"
    settings = container.quarter_settings_service.get("Q3-2025")
    assert (settings.month1_work_days, settings.month2_work_days, settings.month3_work_days) == (23, 21, 22)
    assert container.app_settings_service.get().current_quarter == "Q3-2025"


def test_seed_keeps_existing_app_settings(container):
    container.app_settings_service.create(current_quarter="Q1-2025", dark_mode=True)

    seed_defaults(container, quarter="Q2-2025")

    assert container.app_settings_service.get().current_quarter == "Q1-2025"
    assert container.quarter_settings_service.find("Q2-2025") is not None


def test_create_app_seeds_when_enabled(monkeypatch):
    monkeypatch.setenv("DEFAULT_QUARTER", "Q4-2025")
    monkeypatch.setenv("AUTO_SEED_DB", "1")
    import importlib

    import config.development

    importlib.reload(config.development)
    try:
        client = create_app("config.development").test_client()

        res = client.get("/api/quarter-settings/Q4-2025")
        assert res.status_code == 200
        assert client.get("/api/app-settings").get_json()["currentQuarter"] == "Q4-2025"
    finally:
        monkeypatch.delenv("DEFAULT_QUARTER")
        importlib.reload(config.development)


def test_seed_rejects_quarter_before_year_one(container):
    with pytest.raises(ValidationError):
        seed_defaults(container, quarter="Q1-0000")

    assert container.quarter_settings_service.list_all() == []
    assert container.app_settings_service.find() is None
