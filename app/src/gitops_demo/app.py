import socket
import time
from datetime import datetime, timezone

from flask import Flask, current_app, jsonify

from gitops_demo.config import Config

CONFIG_KEY = 'GITOPS_DEMO'

# Reference point for the /health uptime.
STARTED_AT = time.monotonic()

MESSAGE = '🚀 GitOps Demo App — Deployed with ArgoCD!'
GITOPS_INFO = {
    'tool': 'ArgoCD',
    'pattern': 'Pull-based GitOps',
    'repo': 'https://github.com/your-org/gitops-demo-config',
}


def utc_timestamp():
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-13T09:30:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def uptime():
    """Seconds since this module was imported.

    When run as `gitops-demo` or `python -m gitops_demo` that is process start; a WSGI
    runner that imports the app late reports less.
    """
    return time.monotonic() - STARTED_AT


def create_app(config=None):
    if config is None:
        config = Config.from_env()

    app = Flask(__name__)
    app.config[CONFIG_KEY] = config

    @app.route('/health', methods=['GET'])
    def health():
        """Liveness probe for the Kubernetes deployment."""
        return jsonify({'status': 'healthy', 'uptime': uptime()}), 200

    @app.route('/', methods=['GET'])
    def info():
        """Deployment info: which version and pod answered."""
        settings = current_app.config[CONFIG_KEY]
        return jsonify({
            'message': MESSAGE,
            'version': settings.version,
            'environment': settings.environment,
            'hostname': socket.gethostname(),
            'timestamp': utc_timestamp(),
            'gitops': dict(GITOPS_INFO),
        }), 200

    @app.route('/ready', methods=['GET'])
    def ready():
        """Readiness probe. No dependencies to check, so always ready."""
        return jsonify({'ready': True}), 200

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': 'Internal Server Error'}), 500

    return app
