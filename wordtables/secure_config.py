#!/usr/bin/env python3
"""
Secure Configuration Management for Word Tables
Supports environment variables, a JSON config file and development defaults
"""

import os
import json
import logging
from urllib.parse import quote
from typing import Dict, Optional, Any
from pathlib import Path
from dataclasses import dataclass

from .errors import ConfigError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
CONFIG_ENV_VAR = 'WORDTABLES_CONFIG'


@dataclass
class DatabaseConfig:
    """Database configuration with validation"""
    host: str
    port: int
    database: str
    user: str
    password: str
    schema: str = 'public'
    pool_size: int = 1
    timeout: int = 30

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not self.host:
            raise ConfigError("Database host is required")
        if not self.user:
            raise ConfigError("Database user is required")
        if not self.password:
            raise ConfigError("Database password is required")
        if not self.database:
            raise ConfigError("Database name is required")
        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            raise ConfigError(f"Database port must be an integer, got {self.port!r}")
        if not (1 <= self.port <= 65535):
            raise ConfigError("Database port must be between 1 and 65535")

    def get_connection_string(self, hide_password: bool = True) -> str:
        """Get connection string representation"""
        password = "***" if hide_password else self.password
        conninfo = (
            f"postgresql://{self.user}:{password}@{self.host}:{self.port}/{self.database}"
        )
        if self.schema:
            conninfo += "?options=" + quote(f"-c search_path={self.schema}", safe="")
        return conninfo


def _database_section(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """Accept both {"db": {...}} and {"database": {...}} layouts."""
    section = config_data.get('db') or config_data.get('database') or {}
    if not isinstance(section, dict):
        raise ConfigError("Database section of config file must be an object")
    db_data = dict(section)
    if 'dbname' in db_data:
        db_data['database'] = db_data.pop('dbname')
    known = DatabaseConfig.__dataclass_fields__
    return {key: value for key, value in db_data.items() if key in known}


class SecureConfigManager:
    """Configuration manager with environment variable support"""

    def __init__(self, config_file: Optional[Path] = None):
        self._db_config: Optional[DatabaseConfig] = None
        if config_file is None and os.getenv(CONFIG_ENV_VAR):
            config_file = Path(os.environ[CONFIG_ENV_VAR])
        self._config_file = Path(config_file) if config_file else PROJECT_ROOT / 'config.json'

    @property
    def config_file(self) -> Path:
        return self._config_file

    def get_database_config(self) -> DatabaseConfig:
        """
        Get database configuration from multiple sources in priority order:
        1. Environment variables
        2. config.json file
        3. Default hardcoded values (development only)
        """
        if self._db_config is None:
            self._db_config = self._load_database_config()

        return self._db_config

    def _load_database_config(self) -> DatabaseConfig:
        """Load database configuration from available sources"""

        # Priority 1: Environment variables
        if self._has_env_config():
            logger.info("Loading database config from environment variables")
            return self._load_from_environment()

        # Priority 2: Configuration file
        if self._config_file.exists():
            logger.info(f"Loading database config from {self._config_file}")
            return self._load_from_file()

        # Priority 3: Default configuration (development/fallback)
        logger.warning("Using default database configuration - not recommended for production")
        return self._load_default_config()

    def _has_env_config(self) -> bool:
        """Check if required environment variables are set"""
        required_vars = ['DB_HOST', 'DB_USER', 'DB_PASSWORD', 'DB_NAME']
        return all(os.getenv(var) for var in required_vars)

    def _load_from_environment(self) -> DatabaseConfig:
        """Load configuration from environment variables"""
        try:
            return DatabaseConfig(
                host=os.getenv('DB_HOST', 'localhost'),
                port=int(os.getenv('DB_PORT', '5432')),
                database=os.getenv('DB_NAME', 'words'),
                user=os.getenv('DB_USER', 'postgres'),
                password=os.getenv('DB_PASSWORD', ''),
                schema=os.getenv('DB_SCHEMA', 'public'),
                pool_size=int(os.getenv('DB_POOL_SIZE', '1')),
                timeout=int(os.getenv('DB_TIMEOUT', '30'))
            )
        except ValueError as e:
            if isinstance(e, ConfigError):
                raise
            raise ConfigError(f"Invalid numeric database setting in environment: {e}") from e

    def _load_from_file(self) -> DatabaseConfig:
        """Load configuration from JSON file"""
        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Error loading config file {self._config_file}: {e}") from e

        try:
            return DatabaseConfig(**_database_section(config_data))
        except TypeError as e:
            raise ConfigError(f"Incomplete database section in {self._config_file}: {e}") from e

    def _load_default_config(self) -> DatabaseConfig:
        """Load default configuration (fallback)"""
        return DatabaseConfig(
            host='localhost',
            port=5432,
            database='words',
            user='postgres',
            password='postgres',
            schema='public',
            pool_size=1,
            timeout=30
        )


# Global configuration manager instance
config_manager = SecureConfigManager()


def configure(config_file: Optional[Path] = None) -> SecureConfigManager:
    """Replace the global manager, e.g. when --config is given on the command line"""
    global config_manager
    config_manager = SecureConfigManager(config_file)
    return config_manager


def get_database_config() -> DatabaseConfig:
    """
    Get database configuration as structured object

    Returns:
        DatabaseConfig object with validation and methods
    """
    return config_manager.get_database_config()
