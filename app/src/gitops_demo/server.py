"""Process entry point: bind the configured port and serve until signalled."""

import logging
import signal
import sys
import threading

from werkzeug.serving import make_server as _make_wsgi_server

from gitops_demo.app import create_app
from gitops_demo.config import Config, ConfigError

logger = logging.getLogger(__name__)


def configure_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format='%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stdout,
    )


def make_server(app, config):
    """Bind config.host:config.port and return a threaded WSGI server.

    Werkzeug prints the OS error to stderr and exits with status 1 when the
    port cannot be bound.
    """
    return _make_wsgi_server(config.host, config.port, app, threaded=True)


def serve(config=None):
    if config is None:
        config = Config.from_env()

    app = create_app(config)
    server = make_server(app, config)

    def _shutdown(signum, frame):
        logger.info('Received %s, shutting down', signal.Signals(signum).name)
        # shutdown() blocks until serve_forever() returns, so not from this thread.
        threading.Thread(target=server.shutdown).start()

    signal.signal(signal.SIGTERM, _shutdown)

    logger.info('✅ GitOps Demo App running on port %s', server.port)
    logger.info('   Version : %s', config.version)
    logger.info('   Env     : %s', config.environment)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info('Interrupted, shutting down')
    finally:
        server.server_close()


def main():
    configure_logging()
    try:
        config = Config.from_env()
    except ConfigError as e:
        print(f'Invalid configuration: {e}', file=sys.stderr)
        sys.exit(2)
    serve(config)


if __name__ == '__main__':
    main()
