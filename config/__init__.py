import importlib
import os
from types import ModuleType
from typing import Optional

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def get_settings_module() -> str:
    # Unknown APP_ENV values fall back to development
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")


def load_settings(module_name: Optional[str] = None) -> ModuleType:
    """Import the settings module named by ``module_name`` or by APP_ENV."""
    return importlib.import_module(module_name or get_settings_module())
