"""Module: errors.

API error taxonomy. Every subclass is rendered by the handlers installed in
``main.py`` as ``{"error": message}`` with its status code.
"""


class ApiError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ApiError):
    status_code = 404


# "Already exists / already adopted" is reported as 400 by this API.
class ConflictError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class InternalError(ApiError):
    status_code = 500
