import os
import sys
import pytest

# Ensure the backend root (containing the `dodgecars` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from dodgecars import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    FRONTEND_URL = '*'
    SOCKETIO_NAMESPACE = '/'
    LEADERBOARD_SIZE = 10
    LEADERBOARD_SEED = []
    LOG_LEVEL = 'DEBUG'


class RecordingTransport:
    """Collects (event, payload, to) tuples instead of sending them."""

    def __init__(self, fail_for=()):
        self.sent = []
        self.fail_for = set(fail_for)

    def send(self, event, payload, to):
        if to in self.fail_for:
            raise ConnectionError(f'{to} is unreachable')
        self.sent.append((event, payload, to))

    def to(self, sid):
        return [(event, payload) for event, payload, dest in self.sent if dest == sid]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def relay(flask_app):
    return flask_app.extensions['relay']


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


@pytest.fixture()
def transport():
    return RecordingTransport()
