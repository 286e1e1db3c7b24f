"""Notifier configuration."""

from .directory import ensure_delivery_directory, is_writable_directory
from .notifier import NotifierConfig, is_true, load_notifier_config

__all__ = [
    "NotifierConfig",
    "ensure_delivery_directory",
    "is_true",
    "is_writable_directory",
    "load_notifier_config",
]
