from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    """Caller-fixable failure, rendered with the error's own code and message"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Store or infrastructure failure, rendered as a generic 500"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
