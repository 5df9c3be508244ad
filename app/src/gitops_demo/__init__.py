"""GitOps demo info server."""

from gitops_demo.app import create_app
from gitops_demo.config import Config, ConfigError

__all__ = ['Config', 'ConfigError', 'create_app']
