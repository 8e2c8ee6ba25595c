from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.exceptions import HTTPException
import click
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config, store=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origins = flask_app.config.get('CORS_ORIGINS') or '*'
    CORS(flask_app, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    # Question bank is loaded once; the store owns every session for this app
    from trivia.questions import QuestionBank
    from trivia.services.quiz.store import SessionStore
    if store is None:
        bank = QuestionBank.load(flask_app.config.get('QUESTIONS_FILE'))
        store = SessionStore(bank)
    flask_app.extensions['session_store'] = store
    flask_app.logger.info(f"[startup] questions={len(store.bank)} source={store.bank.source}")

    from trivia.main import main
    flask_app.register_blueprint(main)

    from trivia.api.quiz import quiz
    flask_app.register_blueprint(quiz, url_prefix='/api')

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({'error': exc.description}), exc.code

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        flask_app.logger.exception(f"[unhandled] {exc!r}")
        return jsonify({'error': 'Internal server error'}), 500

    @click.command('validate-questions')
    @click.argument('path', required=False)
    def validate_questions_command(path):
        """Checks a question file and reports how many entries are usable."""
        from trivia.errors import BankLoadFailure
        from trivia.questions import read_question_file
        path = path or flask_app.config.get('QUESTIONS_FILE')
        try:
            questions = read_question_file(path)
        except BankLoadFailure as exc:
            raise click.ClickException(f'{exc}; the built-in default questions would be used.')
        click.echo(f'{path}: {len(questions)} valid questions.')

    flask_app.cli.add_command(validate_questions_command)

    from trivia.services.quiz.scheduler import schedule_eviction
    schedule_eviction(flask_app)

    return flask_app
