"""
Runtime settings for JSON SQL Explorer.

Every value reads from an environment variable with a default, so the app
runs with zero configuration.
"""
import os

# --- Dataset ---
DEFAULT_ALIAS = os.getenv("JSQL_DEFAULT_ALIAS", "table")
PREVIEW_ROWS = int(os.getenv("JSQL_PREVIEW_ROWS", "5"))

# --- Logging ---
LOG_LEVEL = os.getenv("JSQL_LOG_LEVEL", "INFO").upper()

# --- Server ---
SERVER_NAME = os.getenv("JSQL_SERVER_NAME", "127.0.0.1")
SERVER_PORT = int(os.getenv("JSQL_SERVER_PORT", "7860"))
