"""
Chat Service Exceptions

Custom exceptions raised by the store and router. The API layer maps them to
HTTP status codes; the live channel maps them to error events.
"""


class ChatServiceError(Exception):
    """Base exception for chat service errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(ChatServiceError):
    """Raised when a required field is missing or empty"""
    pass


class NotFoundError(ChatServiceError):
    """Raised when a phone or message id is unknown"""
    pass


class ForbiddenError(ChatServiceError):
    """Raised when someone other than the recipient marks a message seen"""
    pass


class StoreCorruptedError(ChatServiceError):
    """Raised when the users file cannot be parsed at startup"""
    pass
