from dodgecars import create_app, socketio

app = create_app()

if __name__ == '__main__':
    app.logger.info(f"Dodge Cars backend running on http://{app.config['HOST']}:{app.config['PORT']}")
    # Use SocketIO server to enable websockets
    socketio.run(
        app,
        host=app.config['HOST'],
        port=app.config['PORT'],
        allow_unsafe_werkzeug=True,
    )
