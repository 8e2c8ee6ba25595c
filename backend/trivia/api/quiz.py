from flask import Blueprint, jsonify, request, current_app

from trivia.errors import InvalidInput, QuizError
from trivia.services.quiz import protocol


quiz = Blueprint('quiz', __name__)


def _store():
    return current_app.extensions['session_store']


@quiz.errorhandler(QuizError)
def handle_quiz_error(exc: QuizError):
    current_app.logger.info(f"[quiz-error] {request.method} {request.path} status={exc.status_code} error={exc.message}")
    return jsonify(exc.to_dict()), exc.status_code


@quiz.route('/start-quiz', methods=['POST'])
def start_quiz():
    data = request.get_json(silent=True)
    if data is None:
        # Empty or non-JSON body means defaults; a JSON body that fails to parse does not
        if request.is_json and request.get_data():
            raise InvalidInput('Request body must be valid JSON')
        data = {}
    if not isinstance(data, dict):
        raise InvalidInput('Request body must be a JSON object')
    default_count = int(current_app.config.get('DEFAULT_QUESTION_COUNT', 10))
    payload = protocol.start_quiz(_store(), data.get('questionCount'), default_count=default_count)
    return jsonify(payload), 201


@quiz.route('/question/<string:session_id>', methods=['GET'])
def get_question(session_id):
    return jsonify(protocol.get_question(_store(), session_id))


@quiz.route('/answer/<string:session_id>', methods=['POST'])
def submit_answer(session_id):
    data = request.get_json(silent=True)
    answer_index = data.get('answerIndex') if isinstance(data, dict) else None
    return jsonify(protocol.submit_answer(_store(), session_id, answer_index))


@quiz.route('/results/<string:session_id>', methods=['GET'])
def get_results(session_id):
    return jsonify(protocol.get_results(_store(), session_id))
