import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Bind address and port for socketio.run
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '10000'))
    # Allowed cross-origin address for HTTP and Socket.IO. '*' is only
    # meant for local testing; production must set FRONTEND_URL.
    FRONTEND_URL = os.environ.get('FRONTEND_URL', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    LEADERBOARD_SIZE = int(os.environ.get('LEADERBOARD_SIZE', '10'))
    # Initial table loaded into the in-memory leaderboard at startup
    LEADERBOARD_SEED = [
        {'name': 'Player1', 'score': 1000},
        {'name': 'Player2', 'score': 800},
        {'name': 'Player3', 'score': 600},
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
