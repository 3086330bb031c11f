"""
Pytest configuration for RPG service tests.

Points the service at a throwaway SQLite file and a signing secret before
any service module reads its settings.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_rpg.db")
os.environ.setdefault(
    "APP_SETTINGS_TOKEN",
    "test-signing-secret-that-is-long-enough-for-hmac-sha512-signatures-0123456789",
)
os.environ.setdefault("LOG_DIR", "./logs")
