"""Notifier configuration, read once when the delivery method is initialized."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from ..errors import ConfigurationError

TARGET_DIRECTORY_KEY = "targetDirectory"
LEGACY_DIRECTORY_KEY = "deliveryDirectory"
INCLUDE_RECEIPT_CONTENT_KEY = "includeReceiptContent"

TRUE_VALUES = frozenset({"yes", "y", "true", "1"})


def is_true(value: Any) -> bool:
    """Interpret a setting value as a boolean flag."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).lower() in TRUE_VALUES


@dataclass(frozen=True)
class NotifierConfig:
    """Immutable settings shared by every notification."""
    target_directory: Path
    include_receipt_content: bool = False   # only the first Receipt child by default

    @classmethod
    def from_settings(cls, settings: Optional[Mapping[str, Any]]) -> "NotifierConfig":
        """
        Create the configuration from the gateway's settings map.

        Args:
            settings: Mapping holding targetDirectory (or deliveryDirectory)
                and optionally includeReceiptContent

        Returns:
            NotifierConfig instance

        Raises:
            ConfigurationError: If no usable directory is specified
        """
        settings = settings or {}
        directory = settings.get(TARGET_DIRECTORY_KEY, settings.get(LEGACY_DIRECTORY_KEY))

        if not isinstance(directory, (str, Path)) or not str(directory).strip():
            raise ConfigurationError(
                "Configuration error! No directory specified!",
                setting=TARGET_DIRECTORY_KEY,
                context={"value": directory}
            )

        return cls(
            target_directory=Path(directory),
            include_receipt_content=is_true(settings.get(INCLUDE_RECEIPT_CONTENT_KEY)),
        )


def load_notifier_config(path: Union[str, Path]) -> NotifierConfig:
    """
    Load notifier settings from a YAML file.

    The settings may be at the top level or in a ``notifier`` section.
    """
    config_file = Path(path)

    try:
        with open(config_file) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file {config_file}", context={"error": str(e)}
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file {config_file}", context={"error": str(e)}
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")

    section = data.get("notifier", data)
    if not isinstance(section, dict):
        raise ConfigurationError("The notifier section must be a mapping", setting="notifier")

    return NotifierConfig.from_settings(section)
