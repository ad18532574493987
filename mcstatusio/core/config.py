"""
Configuration management with YAML and validation
"""

import yaml
import logging
from typing import Dict, Any, Optional, Union, get_args, get_origin
from pathlib import Path
from dataclasses import asdict, fields

from .exceptions import ConfigError
from .config_types import ClientConfig, LoggingConfig, UIConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

class ConfigManager:
    """Configuration manager with validation and defaults"""
    
    def __init__(self, config_path: Optional[str] = "mcstatusio.yaml"):
        self.config_path = Path(config_path) if config_path else None
        self.raw_config = self._load_config()
        
        # Parse configuration sections
        self.client = self._parse_section('client', ClientConfig)
        self.logging = self._parse_section('logging', LoggingConfig)
        self.ui = self._parse_section('ui', UIConfig)
        
        self._validate_config()
        logger.debug(f"Configuration loaded from {self.config_path}")
    
    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if self.config_path is None:
            return {}
        
        if not self.config_path.exists():
            logger.warning(f"Config file {self.config_path} not found, using defaults")
            return {}
        
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e
        
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {self.config_path} must contain a mapping")
        return loaded
    
    def _parse_section(self, name: str, section_type):
        """Parse one configuration section into its dataclass"""
        section = self.raw_config.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Config section '{name}' must be a mapping")
        try:
            parsed = section_type(**section)
        except TypeError as e:
            raise ConfigError(f"Invalid keys in config section '{name}': {e}") from e
        
        self._check_types(name, parsed)
        return parsed
    
    def _check_types(self, name: str, parsed) -> None:
        """Reject values whose type does not match the section field"""
        for f in fields(parsed):
            value = getattr(parsed, f.name)
            expected = f.type
            if get_origin(expected) is Union:
                if value is None:
                    continue
                expected = next(arg for arg in get_args(expected) if arg is not type(None))
            
            if expected is float and isinstance(value, int) and not isinstance(value, bool):
                setattr(parsed, f.name, float(value))
                continue
            if expected is not bool and isinstance(value, bool):
                valid = False
            else:
                valid = isinstance(value, expected)
            if not valid:
                raise ConfigError(
                    f"Config value {name}.{f.name} must be {expected.__name__}, got {type(value).__name__}"
                )
    
    def _validate_config(self) -> None:
        """Validate configuration values"""
        if not str(self.client.api_base).startswith(('http://', 'https://')):
            raise ConfigError(f"Invalid API base URL: {self.client.api_base}")
        if self.client.timeout <= 0:
            raise ConfigError("Client timeout must be positive")
        if self.client.timeout_margin < 0:
            raise ConfigError("Timeout margin cannot be negative")
        
        if str(self.logging.level).upper() not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.logging.level}")
        
        if self.ui.max_list_items <= 0:
            raise ConfigError("max_list_items must be positive")
    
    def to_dict(self) -> Dict[str, Any]:
        """Current configuration as plain dictionaries"""
        return {
            'client': asdict(self.client),
            'logging': asdict(self.logging),
            'ui': asdict(self.ui)
        }
    
    @staticmethod
    def create_default(config_path: str) -> Path:
        """Write a default configuration file"""
        path = Path(config_path)
        default_config = {
            'client': asdict(ClientConfig()),
            'logging': asdict(LoggingConfig()),
            'ui': asdict(UIConfig())
        }
        
        try:
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(default_config, f, default_flow_style=False, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to write config: {e}") from e
        
        logger.info(f"Default configuration written to {path}")
        return path
