from .settings import (
    ApiConfig,
    TradeSocketConfig,
    WebsiteSocketConfig,
    CredentialsConfig,
    LoggingConfig,
    WaxpeerConfig,
    load_config,
    config_from_dict,
)

__all__ = [
    'ApiConfig',
    'TradeSocketConfig',
    'WebsiteSocketConfig',
    'CredentialsConfig',
    'LoggingConfig',
    'WaxpeerConfig',
    'load_config',
    'config_from_dict',
]
