# errors.py
class AppError(Exception):
    """Base for failures that map onto a fixed HTTP status and error body."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message=None):
        self.message = message or self.code
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, messages):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__(", ".join(self.messages))


class Unauthenticated(AppError):
    status_code = 401
    code = "UNAUTHORIZED"


class Forbidden(AppError):
    status_code = 403
    code = "FORBIDDEN"


class Conflict(AppError):
    status_code = 409
    code = "CONFLICT"


class Internal(AppError):
    status_code = 500
    code = "INTERNAL_ERROR"
