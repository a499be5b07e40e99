"""Test settings for ShareIt project.

Runs against an in-memory SQLite database and keeps booking logs quiet
unless something fails.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

LOGGING["loggers"]["apps"]["level"] = "WARNING"  # noqa: F405
