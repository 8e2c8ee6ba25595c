import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Question:
    text: str
    options: Tuple[str, ...]
    correct_option_index: int
    explanation: Optional[str] = None

    def to_dict(self):
        return {
            'question': self.text,
            'answers': list(self.options),
        }


@dataclass(frozen=True)
class AnswerRecord:
    question_text: str
    user_answer_index: int
    correct_answer_index: int
    was_correct: bool

    def to_dict(self):
        return {
            'question': self.question_text,
            'userAnswer': self.user_answer_index,
            'correctAnswer': self.correct_answer_index,
            'isCorrect': self.was_correct,
        }


@dataclass
class Session:
    """One quiz attempt. Only the session store mutates these."""
    session_id: str
    selected_questions: Tuple[Question, ...]
    started_at: float
    cursor: int = 0
    score: int = 0
    answer_log: List[AnswerRecord] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def total_questions(self) -> int:
        return len(self.selected_questions)

    @property
    def is_complete(self) -> bool:
        return self.cursor >= self.total_questions


@dataclass(frozen=True)
class QuizResults:
    score: int
    total_questions: int
    percentage: int
    elapsed_seconds: int
    answer_log: Tuple[AnswerRecord, ...]

    def to_dict(self):
        return {
            'score': self.score,
            'totalQuestions': self.total_questions,
            'percentage': self.percentage,
            'timeTaken': self.elapsed_seconds,
            'answers': [a.to_dict() for a in self.answer_log],
        }
