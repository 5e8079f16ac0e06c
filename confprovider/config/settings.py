"""
Settings and Configuration Management

Pydantic models describing where settings are stored and how the
application logs, loaded from YAML files.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional
import yaml
import os
from pathlib import Path


STORE_KINDS = ('database', 'yaml', 'memory')


class StoreConfig(BaseModel):
    """Backing store configuration."""
    kind: str = Field('database', description="Backing store type (database, yaml or memory)")
    url: Optional[str] = Field(None, description="SQLAlchemy database URL")
    table: str = Field('ConfigurationSource', min_length=1, description="Settings table name")
    path: Optional[str] = Field(None, description="YAML settings file path")
    section: str = Field('AppSettings', min_length=1, description="Section holding application settings")
    provider_name: str = Field('sqlalchemy', min_length=1, description="Provider reported with connection info")

    @field_validator('kind')
    @classmethod
    def validate_kind(cls, v):
        if v.lower() not in STORE_KINDS:
            raise ValueError(f"Invalid store kind: {v}. Must be one of {list(STORE_KINDS)}")
        return v.lower()

    @model_validator(mode='after')
    def check_location(self):
        if self.kind == 'database' and not self.url:
            raise ValueError("A database store requires a url")
        if self.kind == 'yaml' and not self.path:
            raise ValueError("A yaml store requires a path")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field('INFO', description="Log level")
    format: str = Field('json', description="Log format (json or text)")
    file: Optional[str] = Field(None, description="Log file path")
    max_bytes: int = Field(10485760, ge=1024, description="Max log file size")
    backup_count: int = Field(5, ge=1, le=20, description="Number of backup log files")
    console: bool = Field(True, description="Log to console")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator('format')
    @classmethod
    def validate_format(cls, v):
        valid_formats = ['json', 'text']
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()


class Settings(BaseModel):
    """Main configuration settings."""
    model_config = ConfigDict(validate_assignment=True)

    environment: str = Field('dev', description="Environment name")
    store: StoreConfig = StoreConfig(kind='memory')
    logging: LoggingConfig = LoggingConfig()


def find_config_dir() -> Path:
    """Locate the config directory, preferring the current working directory."""
    config_dir = Path('config')
    if not config_dir.exists():
        # Relative to the project root when running from a checkout
        config_dir = Path(__file__).parent.parent.parent / 'config'
    return config_dir


def load_config(env: Optional[str] = None, config_dir: Optional[Path] = None) -> Settings:
    """
    Load configuration from YAML files.

    Loads base.yaml and merges environment-specific overrides. The
    CONFIG_PROVIDER_STORE_URL environment variable, when set, replaces
    store.url.

    Args:
        env: Environment name ('dev', 'prod'). Default from CONFIG_PROVIDER_ENV or 'dev'
        config_dir: Directory holding the YAML files. Default is located by find_config_dir()

    Returns:
        Validated Settings object

    Raises:
        FileNotFoundError: If config files not found
        ValidationError: If configuration is invalid
    """
    if env is None:
        env = os.getenv('CONFIG_PROVIDER_ENV', 'dev')

    config_dir = Path(config_dir) if config_dir is not None else find_config_dir()
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")

    base_file = config_dir / 'base.yaml'
    if not base_file.exists():
        raise FileNotFoundError(f"Base config not found: {base_file}")

    with open(base_file) as f:
        config = yaml.safe_load(f) or {}

    env_file = config_dir / f'{env}.yaml'
    if env_file.exists():
        with open(env_file) as f:
            env_config = yaml.safe_load(f) or {}
            config = deep_merge(config, env_config)

    config.setdefault('environment', env)

    store_url = os.getenv('CONFIG_PROVIDER_STORE_URL')
    if store_url:
        config = deep_merge(config, {'store': {'url': store_url}})

    return Settings(**config)


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override values

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# Global config instance (lazy loaded)
_config: Optional[Settings] = None


def get_config() -> Settings:
    """
    Get global config instance (singleton pattern).

    Returns:
        Settings instance
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config
