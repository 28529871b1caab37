from flask import current_app, request
from dodgecars import socketio
from dodgecars.services import EventRelay


class SocketIOTransport:
    """Delivers relay messages to a single Socket.IO session."""

    def __init__(self, namespace: str = '/'):
        self.namespace = namespace

    def send(self, event, payload, to):
        socketio.emit(event, payload, to=to, namespace=self.namespace)


def _relay() -> EventRelay:
    return current_app.extensions['relay']


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    _relay().connect(_get_sid())


def handle_disconnect(reason=None):
    _relay().disconnect(_get_sid())


def handle_player_moved(data=None):
    _relay().player_moved(_get_sid(), data)


def handle_car_spawned(data=None):
    _relay().car_spawned(_get_sid(), data)


def handle_game_update(data=None):
    _relay().game_update(_get_sid(), data)


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('playerMoved', handle_player_moved, namespace=namespace)
    socketio.on_event('carSpawned', handle_car_spawned, namespace=namespace)
    socketio.on_event('gameUpdate', handle_game_update, namespace=namespace)
