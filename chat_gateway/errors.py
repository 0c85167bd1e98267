from enum import Enum

class ErrorKind(Enum):
    """Ошибки обработчика: HTTP-статус + фиксированный текст для клиента."""

    METHOD_NOT_ALLOWED = (405, "Method Not Allowed")
    INVALID_CONTENT_TYPE = (400, "Invalid content type")
    MISSING_MESSAGES = (400, "Messages array required")
    INVALID_MESSAGE_FORMAT = (400, "Invalid message format")
    INTERNAL_ERROR = (500, "Internal Server Error")

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message

    @property
    def is_client_error(self) -> bool:
        return self.status_code < 500

class RequestError(Exception):
    """Ошибка валидации входящего запроса."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.message)
        self.kind = kind
