"""Persistent storage for dehydrated settings.

Stands in for the browser's local storage: a single JSON object of string
keys to string values under the user's home folder, with the dehydrated
settings kept under one well-known key.

Design goals:
  * Atomic writes (no corrupted storage on crash)
  * Resilient loads (backup and fall back to defaults)
  * Other keys in the file are left alone
"""

from .store import SETTINGS_STORAGE_KEY, SettingsStore

__all__ = ["SETTINGS_STORAGE_KEY", "SettingsStore"]
