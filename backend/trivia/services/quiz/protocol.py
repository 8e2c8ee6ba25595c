from typing import Any, Dict

from trivia.errors import InvalidInput
from .store import SessionStore


def _is_int(value: Any) -> bool:
    # JSON true/false arrive as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def start_quiz(store: SessionStore, requested_count: Any, default_count: int = 10) -> Dict[str, Any]:
    if requested_count is None:
        requested_count = default_count
    if not _is_int(requested_count) or requested_count < 1:
        raise InvalidInput('questionCount must be a positive integer')
    session_id, total = store.create(requested_count)
    return {
        'sessionId': session_id,
        'totalQuestions': total,
        'message': 'Quiz started successfully',
    }


def get_question(store: SessionStore, session_id: str) -> Dict[str, Any]:
    question, number, total = store.current_question(session_id)
    payload = question.to_dict()
    payload['questionNumber'] = number
    payload['totalQuestions'] = total
    return payload


def submit_answer(store: SessionStore, session_id: str, answer_index: Any) -> Dict[str, Any]:
    """Score one answer. Range against the current question's options is checked by the store."""
    store.get(session_id)
    if not _is_int(answer_index) or answer_index < 0:
        raise InvalidInput('answerIndex must be a non-negative integer')
    correct, correct_index, explanation = store.record_answer(session_id, answer_index)
    return {
        'correct': correct,
        'correctAnswer': correct_index,
        'explanation': explanation,
    }


def get_results(store: SessionStore, session_id: str) -> Dict[str, Any]:
    return store.results(session_id).to_dict()
