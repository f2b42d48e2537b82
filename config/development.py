import os

from config.config import rule_settings

RULES = rule_settings()

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
