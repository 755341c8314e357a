"""
EnvHelper - Read environment variables with .env file support
Laravel-style environment variable access
"""

import os
from pathlib import Path
from typing import Any, List, Optional, Union
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        # Read
        cache = EnvHelper.get('BLADE_CACHE_PATH', 'storage/framework/views')

        # Read an os.pathsep separated list
        paths = EnvHelper.get_list('BLADE_VIEW_PATHS')

        # Load a specific file
        EnvHelper.load('/path/to/.env')
    """

    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was found and loaded
        """
        if env_path is not None:
            cls._env_path = Path(env_path)
        elif cls._env_path is None:
            cls._env_path = Path(os.getcwd()) / '.env'

        cls._loaded = True

        if not cls._env_path.exists():
            return False

        return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            cache = EnvHelper.get('BLADE_CACHE_PATH', '/tmp/views')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_list(cls, key: str, default: Optional[List[str]] = None) -> List[str]:
        """
        Get an os.pathsep separated environment variable as a list

        Example:
            # BLADE_VIEW_PATHS=resources/views:vendor/views
            paths = EnvHelper.get_list('BLADE_VIEW_PATHS')
        """
        value = cls.get(key)
        if not value:
            return list(default or [])

        return [item for item in value.split(os.pathsep) if item]

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            debug = EnvHelper.get_bool('BLADE_DEBUG', False)
        """
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def path(cls) -> Optional[Path]:
        """Get the .env file path last used by load()"""
        return cls._env_path

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded state so the next get() reloads"""
        cls._env_path = None
        cls._loaded = False
