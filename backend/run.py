from trivia import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # SocketIO server multiplexes connections and hosts the eviction sweeper
    socketio.run(app, host='0.0.0.0', port=app.config['PORT'], allow_unsafe_werkzeug=True)
