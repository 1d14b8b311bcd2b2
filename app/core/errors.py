from enum import Enum


class ErrorKind(str, Enum):
    PROVIDER_ERROR = "ProviderError"
    EMPTY_RESPONSE = "EmptyResponse"


class ConfigError(RuntimeError):
    """Provider credential or other required setting is missing."""


class ClientDisconnected(Exception):
    pass
