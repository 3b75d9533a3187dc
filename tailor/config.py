"""Configuration and environment variable handling for tailor.

This module delegates to tailor.core.config_service for layered config
resolution. It loads a ``.env`` file from the working directory so that
TAILOR_* variables can be kept next to the project being customized.
"""
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


class Config:
    """Central configuration for tailor.

    Delegates to ConfigService for layered resolution.
    """

    @staticmethod
    def get_max_depth() -> int:
        """Get the structure walker's depth limit."""
        from tailor.core.config_service import get_config_service
        return get_config_service().get_max_depth()

    @staticmethod
    def get_max_reported_files() -> int:
        """Get the cap on files listed in a structure report."""
        from tailor.core.config_service import get_config_service
        return get_config_service().get_max_reported_files()

    @staticmethod
    def get_ignore_match() -> str:
        """Get the ignore-list matching mode ("segment" or "substring")."""
        from tailor.core.config_service import get_config_service
        return get_config_service().get_ignore_match()

    @staticmethod
    def get_log_level() -> str:
        """Get the configured log level name."""
        from tailor.core.config_service import get_config_service
        return get_config_service().get_log_level()

    @staticmethod
    def get_default_project_path() -> Optional[Path]:
        """Get the project path used when callers omit one."""
        from tailor.core.config_service import get_config_service
        return get_config_service().get_default_path()
