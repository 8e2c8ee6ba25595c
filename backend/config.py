import os

basedir = os.path.abspath(os.path.dirname(__file__))

class Config:
    PORT = int(os.environ.get('PORT', '3000'))
    # Optional external question bank; defaults are used when it is missing or invalid
    QUESTIONS_FILE = os.environ.get('QUESTIONS_FILE') or os.path.join(basedir, 'questions.json')
    DEFAULT_QUESTION_COUNT = int(os.environ.get('DEFAULT_QUESTION_COUNT', '10'))
    # Session eviction (seconds)
    SESSION_RETENTION_SEC = int(os.environ.get('SESSION_RETENTION_SEC', '3600'))
    EVICTION_INTERVAL_SEC = int(os.environ.get('EVICTION_INTERVAL_SEC', '3600'))
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
