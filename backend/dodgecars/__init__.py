from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('FRONTEND_URL') or '*'
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')

    CORS(flask_app, supports_credentials=allowed_origins != '*', origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Per-app state, so each app (and each test) gets its own registry and leaderboard
    from dodgecars.services import ConnectionRegistry, EventRelay, LeaderboardStore
    from dodgecars.socketio_events import SocketIOTransport, register_socketio_handlers

    leaderboard = LeaderboardStore(
        limit=int(flask_app.config.get('LEADERBOARD_SIZE', 10)),
        seed=flask_app.config.get('LEADERBOARD_SEED') or (),
    )
    flask_app.extensions['relay'] = EventRelay(
        ConnectionRegistry(),
        leaderboard,
        SocketIOTransport(namespace),
        logger=flask_app.logger,
    )

    # Import and register blueprints here
    from dodgecars.routes import main
    flask_app.register_blueprint(main)

    from dodgecars.api.highscores import highscores
    flask_app.register_blueprint(highscores, url_prefix='/api')

    register_socketio_handlers(namespace)

    flask_app.logger.info(f"[startup] origins={allowed_origins} namespace={namespace} leaderboard={len(leaderboard)}")

    return flask_app
