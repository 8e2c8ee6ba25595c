"""Error taxonomy for the quiz protocol.

Every error a client can see derives from ``QuizError`` and carries the HTTP
status it maps to plus a message that is safe to return verbatim.
"""


class QuizError(Exception):
    status_code = 400
    default_message = 'Bad request'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class NotFound(QuizError):
    status_code = 404
    default_message = 'Session not found'


class QuizAlreadyComplete(QuizError):
    status_code = 400
    default_message = 'Quiz completed'


class InvalidInput(QuizError):
    status_code = 400
    default_message = 'Invalid input'


class BankLoadFailure(Exception):
    """The external question file could not be used. Never reaches clients."""
