import json
import os
import random
import sys
import pytest

# Ensure the backend root (containing the `trivia` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from trivia import create_app
from trivia.questions import QuestionBank, parse_questions
from trivia.services.quiz.store import SessionStore


RED_PLANET = {
    'question': 'Which planet is known as the Red Planet?',
    'answers': ['Venus', 'Mars', 'Jupiter', 'Mercury'],
    'correct': 1,
}


class TestConfig:
    TESTING = True
    QUESTIONS_FILE = os.path.join(CURRENT_DIR, 'does-not-exist.json')
    DEFAULT_QUESTION_COUNT = 10
    SESSION_RETENTION_SEC = 3600
    EVICTION_INTERVAL_SEC = 3600
    CORS_ORIGINS = ['*']
    LOG_LEVEL = 'DEBUG'


class FakeClock:
    def __init__(self, start=1_000_000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def bank():
    return QuestionBank()


@pytest.fixture()
def store(bank, clock):
    return SessionStore(bank, clock=clock, rng=random.Random(1234))


@pytest.fixture()
def red_planet_store(clock):
    return SessionStore(QuestionBank(parse_questions([RED_PLANET])), clock=clock)


@pytest.fixture()
def flask_app(store):
    application = create_app(TestConfig, store=store)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def red_planet_file(tmp_path):
    path = tmp_path / 'questions.json'
    path.write_text(json.dumps([dict(RED_PLANET, explanation='Iron oxide dust gives Mars its colour.')]))
    return str(path)


@pytest.fixture()
def red_planet_client(red_planet_file):
    class FileConfig(TestConfig):
        QUESTIONS_FILE = red_planet_file

    application = create_app(FileConfig)
    return application.test_client()
