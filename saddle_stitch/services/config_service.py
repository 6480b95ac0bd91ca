"""
Configuration Service - Manages export settings persistence.

This service handles loading and saving user configuration to/from config.json,
with proper validation and defaults.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..models import ExportOptions, LengthUnit, Orientation
from ..config import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_PAGE_FORMAT,
    DEFAULT_ORIENTATION,
    DEFAULT_UNIT,
)

logger = logging.getLogger(__name__)


class ConfigService:
    """
    Manages export configuration persistence.

    Handles loading configuration from config.json, saving changes,
    and providing sensible defaults when config doesn't exist.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config service.

        Args:
            config_path: Optional custom config file path.
                        If None, uses config.json in project root.
        """
        if config_path is None:
            config_path = Path(__file__).parent.parent.parent / "config.json"

        self.config_path = Path(config_path)

    def load(self) -> ExportOptions:
        """
        Load configuration from file.

        Returns:
            ExportOptions with loaded settings, or defaults if file doesn't exist

        Note:
            A missing, corrupted or invalid config file yields default options.
        """
        if not self.config_path.exists():
            return ExportOptions()

        try:
            with open(self.config_path) as f:
                data = json.load(f)

            return ExportOptions(
                page_format=data.get('page_format', DEFAULT_PAGE_FORMAT),
                orientation=Orientation(data.get('orientation', DEFAULT_ORIENTATION)),
                unit=LengthUnit(data.get('unit', DEFAULT_UNIT)),
                output_name=data.get('output_name', DEFAULT_OUTPUT_NAME),
                output_folder=data.get('output_folder', ''),
                mark_blanks=bool(data.get('mark_blanks', False)),
                max_workers=int(data.get('max_workers', DEFAULT_MAX_WORKERS))
            )

        except (json.JSONDecodeError, IOError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Failed to load config from %s: %s. Using default configuration",
                           self.config_path, e)
            return ExportOptions()

    def save(self, options: ExportOptions):
        """
        Save configuration to file.

        Args:
            options: ExportOptions to save

        Note:
            Saving is best-effort; failures are logged, not raised.
        """
        data = {
            'page_format': options.page_format,
            'orientation': options.orientation.value,
            'unit': options.unit.value,
            'output_name': options.output_name,
            'output_folder': options.output_folder,
            'mark_blanks': options.mark_blanks,
            'max_workers': options.max_workers
        }

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w') as f:
                json.dump(data, f, indent=2)

        except (IOError, OSError) as e:
            logger.warning("Failed to save config to %s: %s", self.config_path, e)

    def reset_to_defaults(self) -> bool:
        """
        Delete config file to reset to defaults.

        Returns:
            True if config was deleted, False if it didn't exist or couldn't be deleted
        """
        try:
            if self.config_path.exists():
                self.config_path.unlink()
                return True
            return False

        except (IOError, OSError) as e:
            logger.warning("Failed to delete config file %s: %s", self.config_path, e)
            return False

    def get_config_path(self) -> Path:
        """
        Get the path to the configuration file.

        Returns:
            Path to config file (may not exist yet)
        """
        return self.config_path
