"""Question bank: loaded once at startup, read-only afterwards.

The bank reads an optional JSON file of ``{question, answers, correct,
explanation?}`` records. A missing or unusable file is not fatal; the
built-in space trivia set is used instead.
"""
import json
import logging
import os
from typing import Optional, Tuple

from .errors import BankLoadFailure
from .models import Question

logger = logging.getLogger(__name__)

OPTION_COUNT = 4

DEFAULT_QUESTIONS = [
    {
        'question': 'What is the largest planet in our solar system?',
        'answers': ['Earth', 'Jupiter', 'Saturn', 'Neptune'],
        'correct': 1,
    },
    {
        'question': 'Which planet is known as the Red Planet?',
        'answers': ['Venus', 'Mars', 'Jupiter', 'Mercury'],
        'correct': 1,
    },
    {
        'question': 'What is the closest star to Earth?',
        'answers': ['Alpha Centauri', 'Sirius', 'The Sun', 'Betelgeuse'],
        'correct': 2,
    },
    {
        'question': 'How many moons does Earth have?',
        'answers': ['0', '1', '2', '3'],
        'correct': 1,
    },
    {
        'question': "What is the name of NASA's most famous space telescope?",
        'answers': ['Kepler', 'Spitzer', 'Hubble', 'Chandra'],
        'correct': 2,
    },
    {
        'question': 'Which planet has the most moons?',
        'answers': ['Jupiter', 'Saturn', 'Uranus', 'Neptune'],
        'correct': 1,
    },
    {
        'question': 'What is the hottest planet in our solar system?',
        'answers': ['Mercury', 'Venus', 'Mars', 'Jupiter'],
        'correct': 1,
    },
    {
        'question': 'What does NASA stand for?',
        'answers': [
            'National Air and Space Administration',
            'National Aeronautics and Space Administration',
            'North American Space Agency',
            'National Astronomy and Space Association',
        ],
        'correct': 1,
    },
    {
        'question': 'Which galaxy contains our solar system?',
        'answers': ['Andromeda', 'Milky Way', 'Whirlpool', 'Sombrero'],
        'correct': 1,
    },
    {
        'question': 'What is the smallest planet in our solar system?',
        'answers': ['Mercury', 'Venus', 'Mars', 'Pluto'],
        'correct': 0,
    },
    {
        'question': 'How long does it take for light from the Sun to reach Earth?',
        'answers': ['8 seconds', '8 minutes', '8 hours', '8 days'],
        'correct': 1,
    },
    {
        'question': 'What is the Great Red Spot on Jupiter?',
        'answers': ['A moon', 'A storm', 'A crater', 'A mountain'],
        'correct': 1,
    },
    {
        'question': 'Which planet is tilted on its side?',
        'answers': ['Mars', 'Saturn', 'Uranus', 'Neptune'],
        'correct': 2,
    },
    {
        'question': 'What is the name of the first artificial satellite?',
        'answers': ['Explorer 1', 'Sputnik 1', 'Vanguard 1', 'Luna 1'],
        'correct': 1,
    },
    {
        'question': 'How many astronauts have walked on the Moon?',
        'answers': ['6', '8', '10', '12'],
        'correct': 3,
    },
]


def parse_question(raw) -> Question:
    """Build a Question from one JSON record, raising ValueError if malformed."""
    if not isinstance(raw, dict):
        raise ValueError('entry is not an object')
    text = raw.get('question')
    if not isinstance(text, str) or not text.strip():
        raise ValueError('missing question text')
    answers = raw.get('answers')
    if not isinstance(answers, list) or len(answers) != OPTION_COUNT:
        raise ValueError(f'expected exactly {OPTION_COUNT} answers')
    if not all(isinstance(a, str) for a in answers):
        raise ValueError('answers must be strings')
    correct = raw.get('correct')
    # bool is an int subclass; true/false are not indexes
    if isinstance(correct, bool) or not isinstance(correct, int):
        raise ValueError('correct must be an integer')
    if not 0 <= correct < OPTION_COUNT:
        raise ValueError(f'correct index {correct} out of range')
    explanation = raw.get('explanation')
    if explanation is not None and not isinstance(explanation, str):
        raise ValueError('explanation must be a string')
    return Question(
        text=text,
        options=tuple(answers),
        correct_option_index=correct,
        explanation=explanation,
    )


def parse_questions(records) -> Tuple[Question, ...]:
    parsed = []
    for position, raw in enumerate(records):
        try:
            parsed.append(parse_question(raw))
        except ValueError as exc:
            logger.warning(f"[bank-skip] entry={position} reason={exc}")
    return tuple(parsed)


def read_question_file(path: str) -> Tuple[Question, ...]:
    """Read and validate a question file. Raises BankLoadFailure if unusable."""
    try:
        with open(path, encoding='utf-8') as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise BankLoadFailure(f'{path} not found') from exc
    except (OSError, ValueError) as exc:
        raise BankLoadFailure(f'{path} could not be read: {exc}') from exc
    if not isinstance(data, list):
        raise BankLoadFailure(f'{path} must contain a JSON list of questions')
    questions = parse_questions(data)
    if not questions:
        raise BankLoadFailure(f'{path} contains no valid questions')
    return questions


class QuestionBank:
    def __init__(self, questions=None, source='defaults'):
        if questions is None:
            questions = parse_questions(DEFAULT_QUESTIONS)
        self._questions: Tuple[Question, ...] = tuple(questions)
        self.source = source

    @classmethod
    def load(cls, path: Optional[str] = None) -> 'QuestionBank':
        if path:
            try:
                questions = read_question_file(path)
            except BankLoadFailure as exc:
                logger.info(f"[bank-fallback] using default questions ({exc})")
            else:
                logger.info(f"[bank-load] loaded {len(questions)} questions from {path}")
                return cls(questions, source=os.path.abspath(path))
        return cls()

    def all(self) -> Tuple[Question, ...]:
        return self._questions

    def __len__(self):
        return len(self._questions)
