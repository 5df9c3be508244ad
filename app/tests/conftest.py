import pytest

from gitops_demo import Config, create_app


@pytest.fixture
def config():
    return Config(version='2.3.4', environment='staging')


@pytest.fixture
def app(config):
    app = create_app(config)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Test client for the info server"""
    return app.test_client()
