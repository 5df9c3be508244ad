import os
from dataclasses import dataclass

DEFAULT_PORT = 3000
DEFAULT_HOST = '0.0.0.0'
DEFAULT_VERSION = '1.0.0'
DEFAULT_ENVIRONMENT = 'development'


class ConfigError(ValueError):
    pass


def _get(environ, name, default):
    # Empty values fall back to the default, same as unset.
    return environ.get(name) or default


def _parse_port(raw):
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f'PORT must be an integer, got {raw!r}') from None
    if not 0 <= port <= 65535:
        raise ConfigError(f'PORT must be between 0 and 65535, got {port}')
    return port


@dataclass(frozen=True)
class Config:
    """Settings read once from the environment at startup."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    version: str = DEFAULT_VERSION
    environment: str = DEFAULT_ENVIRONMENT

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            environ = os.environ
        return cls(
            port=_parse_port(_get(environ, 'PORT', DEFAULT_PORT)),
            host=_get(environ, 'HOST', DEFAULT_HOST),
            version=_get(environ, 'APP_VERSION', DEFAULT_VERSION),
            environment=_get(environ, 'NODE_ENV', DEFAULT_ENVIRONMENT),
        )
