import json
import os
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from .exceptions import ConfigError

PAYSTACK_BASE_URL = "https://api.paystack.co"

ENV_PREFIX = "PAYSTACK_"

class Config:
    def __init__(self, config_path: Optional[Path] = None):
        self._config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_environment_variables()
        if config_path:
            self.load(config_path)
        self.validate(self._config)

    def _load_defaults(self) -> None:
        """Load default configuration values"""
        self._config = {
            "api": {
                "base_url": PAYSTACK_BASE_URL,
                "secret_key": None,
                "timeout": 30.0,
                "verify_ssl": True,
                "user_agent": "paystack-client/0.1.0"
            },
            "logging": {
                "level": "INFO",
                "file": None,
                "console_output": False,
                "max_size": 1024 * 1024,
                "backup_count": 3
            }
        }

    def load(self, path: Path) -> None:
        """Load configuration from JSON file"""
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
                self.update(file_config)
        except Exception as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}")

    def save(self, path: Path) -> None:
        """Save configuration to JSON file, without the secret key"""
        data = json.loads(json.dumps(self._config))
        data.get("api", {}).pop("secret_key", None)
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

    def _load_environment_variables(self) -> None:
        """Load configuration from environment variables"""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                # PAYSTACK_API_SECRET_KEY -> api.secret_key
                parts = key[len(ENV_PREFIX):].lower().split('_')

                if len(parts) > 2:
                    config_key = f"{parts[0]}.{'_'.join(parts[1:])}"
                else:
                    config_key = '.'.join(parts)

                # secret keys look like sk_test_..., never coerce them
                if config_key == "api.secret_key":
                    self.set(config_key, value)
                else:
                    self.set(config_key, self._convert_value(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        try:
            value = self._config
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by dot notation key"""
        keys = key.split('.')
        d = self._config
        for k in keys[:-1]:
            if not isinstance(d.get(k), dict):
                d[k] = {}
            d = d[k]
        d[keys[-1]] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with dictionary"""
        def update_recursive(d1, d2):
            for k, v in d2.items():
                if isinstance(v, dict):
                    if not isinstance(d1.get(k), dict):
                        d1[k] = {}
                    update_recursive(d1[k], v)
                else:
                    d1[k] = v
            return d1

        update_recursive(self._config, config_dict)

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        if "api" in config:
            api_config = config["api"]
            if "timeout" in api_config:
                timeout = api_config["timeout"]
                if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                    raise ConfigError("timeout must be a positive number")
            if "base_url" in api_config:
                parsed = urlparse(str(api_config["base_url"]))
                if parsed.scheme not in ("http", "https") or not parsed.netloc:
                    raise ConfigError(f"base_url must be an http(s) URL: {api_config['base_url']}")
        if "logging" in config:
            level = config["logging"].get("level")
            if level is not None and not isinstance(level, str):
                raise ConfigError("logging level must be a level name")

    @staticmethod
    def _convert_value(value: str) -> Any:
        """Convert string value to appropriate type"""
        # Handle boolean values
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False

        # Handle numeric values
        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            return value
