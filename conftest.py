"""
pytest configuration for the Oslo bathing spots project.

Initializes Django with the test settings before any tests are collected,
so app modules and model_bakery can import models safely.
"""

import os
import django


def pytest_configure():
    """Initialize Django with test settings before pytest collects tests."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.test_settings")
    django.setup()
