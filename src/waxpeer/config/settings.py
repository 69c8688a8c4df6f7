"""Configuration settings for the Waxpeer client."""

import os
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ApiConfig:
    """REST API configuration."""
    base_url: str = "https://api.waxpeer.com/v1"
    request_timeout_seconds: float = 60.0
    # Ignoring these limits might cause 429 responses or an IP ban.
    prices_rate_limit: int = 60
    prices_dopplers_rate_limit: int = 60
    rate_limit_window_seconds: float = 60.0


@dataclass
class TradeSocketConfig:
    """Trade websocket configuration."""
    url: str = "wss://wssex.waxpeer.com"
    heartbeat_interval_seconds: float = 25.0
    reconnect_step_seconds: float = 1.0
    reset_backoff_on_open: bool = False
    open_timeout_seconds: float = 10.0
    client_source: str = "py_waxpeer"
    client_version: str = "1.3.0"


@dataclass
class WebsiteSocketConfig:
    """Website (socket.io) feed configuration."""
    url: str = "wss://waxpeer.com"
    socketio_path: str = "/socket.io/"
    transports: List[str] = field(default_factory=lambda: ["websocket"])
    reconnect_step_seconds: float = 1.0


@dataclass
class CredentialsConfig:
    """Account credentials."""
    api_key: str = ""
    steam_id: str = ""
    trade_url: str = ""
    website_events: List[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "text"
    output: str = "stdout"


@dataclass
class WaxpeerConfig:
    """Main configuration for the Waxpeer client."""
    api: ApiConfig = field(default_factory=ApiConfig)
    trade_socket: TradeSocketConfig = field(default_factory=TradeSocketConfig)
    website_socket: WebsiteSocketConfig = field(default_factory=WebsiteSocketConfig)
    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_file: str) -> WaxpeerConfig:
    """Load configuration from YAML file."""

    with open(config_file, 'r') as f:
        config_data = yaml.safe_load(f) or {}

    # Environment variable substitution
    config_data = _substitute_env_vars(config_data)

    return config_from_dict(config_data)


def config_from_dict(config_data: Dict[str, Any]) -> WaxpeerConfig:
    """Build a WaxpeerConfig from a plain mapping; missing sections use defaults."""
    return WaxpeerConfig(
        api=ApiConfig(**(config_data.get('api') or {})),
        trade_socket=TradeSocketConfig(**(config_data.get('trade_socket') or {})),
        website_socket=WebsiteSocketConfig(**(config_data.get('website_socket') or {})),
        credentials=CredentialsConfig(**(config_data.get('credentials') or {})),
        logging=LoggingConfig(**(config_data.get('logging') or {})),
    )


def _substitute_env_vars(data: Any) -> Any:
    """Recursively substitute environment variables in configuration."""
    if isinstance(data, dict):
        return {key: _substitute_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_substitute_env_vars(item) for item in data]
    elif isinstance(data, str) and data.startswith('${') and data.endswith('}'):
        env_spec = data[2:-1]  # Remove ${ and }

        if ':' in env_spec:
            env_name, default_value = env_spec.split(':', 1)
        else:
            env_name, default_value = env_spec, None

        return os.getenv(env_name, default_value)
    else:
        return data
