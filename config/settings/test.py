"""Settings for the test suite."""

import dj_database_url

from .base import *  # noqa: F401,F403

DATABASE_URL = "sqlite://:memory:"

DATABASES = {"default": dj_database_url.parse(DATABASE_URL)}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
