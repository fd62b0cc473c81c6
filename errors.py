class QuestionError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(QuestionError):
    status_code = 400


class NotFoundError(QuestionError):
    status_code = 404


class UnexpectedError(QuestionError):
    status_code = 500
