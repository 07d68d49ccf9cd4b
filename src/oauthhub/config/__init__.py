"""Configuration models and loading for oauthhub."""

from .loader import CONFIG_ENV_VAR, config_from_dict, load_config, resolve_env_references
from .models import HttpTransportConfigModel, OAuthConfigModel, ProviderConfigModel

__all__ = [
    "CONFIG_ENV_VAR",
    "HttpTransportConfigModel",
    "OAuthConfigModel",
    "ProviderConfigModel",
    "config_from_dict",
    "load_config",
    "resolve_env_references",
]
