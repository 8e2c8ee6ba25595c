import logging
import math
import random
import secrets
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from trivia.errors import InvalidInput, NotFound, QuizAlreadyComplete
from trivia.models import AnswerRecord, Question, QuizResults, Session
from trivia.questions import QuestionBank

logger = logging.getLogger(__name__)

SESSION_ID_BYTES = 16


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def generate_session_id() -> str:
    return secrets.token_urlsafe(SESSION_ID_BYTES)


class SessionStore:
    """In-memory owner of every quiz session.

    The map itself is guarded by a store-wide lock; each session carries its
    own lock so answers to one session are applied one at a time while other
    sessions proceed independently. No lock is held across I/O.
    """

    def __init__(
        self,
        bank: QuestionBank,
        clock: Callable[[], float] = time.time,
        rng: Optional[random.Random] = None,
        id_factory: Callable[[], str] = generate_session_id,
    ):
        self.bank = bank
        self._clock = clock
        self._rng = rng or random.Random()
        self._id_factory = id_factory
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id):
        with self._lock:
            return session_id in self._sessions

    def create(self, question_count: int) -> Tuple[str, int]:
        questions = list(self.bank.all())
        self._rng.shuffle(questions)
        selected = tuple(questions[:min(question_count, len(questions))])

        with self._lock:
            session_id = self._id_factory()
            while session_id in self._sessions:
                logger.warning("[session-id-collision] regenerating session id")
                session_id = self._id_factory()
            self._sessions[session_id] = Session(
                session_id=session_id,
                selected_questions=selected,
                started_at=self._clock(),
            )
        logger.info(f"[session-create] session={session_id} total={len(selected)}")
        return session_id, len(selected)

    def get(self, session_id: str) -> Session:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise NotFound()
        return session

    def current_question(self, session_id: str) -> Tuple[Question, int, int]:
        """Question at the cursor with its 1-based number and the total. Does not advance."""
        session = self.get(session_id)
        with session.lock:
            if session.is_complete:
                raise QuizAlreadyComplete('Quiz completed')
            return session.selected_questions[session.cursor], session.cursor + 1, session.total_questions

    def record_answer(self, session_id: str, answer_index: int) -> Tuple[bool, int, Optional[str]]:
        session = self.get(session_id)
        with session.lock:
            if session.is_complete:
                raise QuizAlreadyComplete('Quiz already completed')
            question = session.selected_questions[session.cursor]
            if not 0 <= answer_index < len(question.options):
                raise InvalidInput(f'answerIndex must be between 0 and {len(question.options) - 1}')

            was_correct = answer_index == question.correct_option_index
            session.answer_log.append(AnswerRecord(
                question_text=question.text,
                user_answer_index=answer_index,
                correct_answer_index=question.correct_option_index,
                was_correct=was_correct,
            ))
            if was_correct:
                session.score += 1
            session.cursor += 1
            position = session.cursor
        logger.info(f"[answer] session={session_id} question={position} correct={was_correct}")
        return was_correct, question.correct_option_index, question.explanation

    def results(self, session_id: str) -> QuizResults:
        session = self.get(session_id)
        with session.lock:
            score = session.score
            total = session.total_questions
            answer_log = tuple(session.answer_log)
        percentage = round_half_up(100 * score / total) if total else 0
        elapsed = round_half_up(max(0.0, self._clock() - session.started_at))
        return QuizResults(
            score=score,
            total_questions=total,
            percentage=percentage,
            elapsed_seconds=elapsed,
            answer_log=answer_log,
        )

    def evict_older_than(self, retention_seconds: float) -> int:
        cutoff = self._clock() - retention_seconds
        with self._lock:
            expired = [sid for sid, s in self._sessions.items() if s.started_at < cutoff]
            for sid in expired:
                del self._sessions[sid]
            remaining = len(self._sessions)
        if expired:
            logger.info(f"[evict] removed={len(expired)} remaining={remaining}")
        return len(expired)
