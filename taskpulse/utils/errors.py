# taskpulse/utils/errors.py
# Domain errors raised by services and rendered as {"message": ...} by main.py


class TaskPulseError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(TaskPulseError):
    status_code = 400


class AuthFailed(TaskPulseError):
    status_code = 401


class PermissionDenied(TaskPulseError):
    status_code = 403


class NotFound(TaskPulseError):
    status_code = 404
