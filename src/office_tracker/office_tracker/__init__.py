"""Office Tracker package.

Personal office-attendance tracker organized by feature modules (attendance,
quarters, app_settings, progress, ...) with a thin Flask JSON controller layer
over service/repository layers.
"""
