"""Factory creating file notifiers from the gateway's delivery settings."""

from typing import Any, Mapping, Optional

from ..config.directory import ensure_delivery_directory
from ..config.notifier import NotifierConfig
from ..errors import ConfigurationError
from ..logging import get_delivery_logger
from .file_delivery import FileSignalNotifier


class SignalNotifierFactory:
    """
    Sets up the file notification delivery method.

    Settings:
        targetDirectory: directory where the SMD files are written; created
            when it does not exist yet
        includeReceiptContent: include the complete Receipt content instead
            of only its first child element (default false)
    """

    def __init__(self):
        self.config: Optional[NotifierConfig] = None
        self.logger = get_delivery_logger(__name__)

    def init(self, settings: Optional[Mapping[str, Any]]) -> NotifierConfig:
        """
        Initialize the factory, checking the delivery directory once.

        Raises:
            ConfigurationError: If the settings are invalid or the directory is not available
        """
        config = NotifierConfig.from_settings(settings)
        ensure_delivery_directory(config.target_directory)
        self.config = config

        self.logger.info(
            "Signal notifier initialized",
            directory=str(config.target_directory),
            include_receipt_content=config.include_receipt_content
        )
        return config

    def create_deliverer(self) -> FileSignalNotifier:
        """Create a notifier using the initialized configuration."""
        if self.config is None:
            raise ConfigurationError("Signal notifier factory is not initialized")
        return FileSignalNotifier(self.config)
