from starlette import status


class APIErrorResponse(Exception):
    """Base class for other exceptions"""

    def __init__(self):
        pass

    def to_status_code(self) -> int:
        raise NotImplementedError

    def to_code(self) -> str:
        raise NotImplementedError

    def to_message(self) -> str:
        raise NotImplementedError


class InvalidEmailAPIError(APIErrorResponse):
    def __init__(self):
        pass

    def to_status_code(self) -> int:
        return status.HTTP_400_BAD_REQUEST

    def to_code(self) -> str:
        return "invalid_email"

    def to_message(self) -> str:
        return "Invalid email"


class EmailServiceNotConfiguredAPIError(APIErrorResponse):
    """
    Email provider credential is missing, operator needs to set RESEND_API_KEY.
    The caller only gets a generic message.
    """

    def __init__(self):
        pass

    def to_status_code(self) -> int:
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_code(self) -> str:
        return "email_service_not_configured"

    def to_message(self) -> str:
        return "Email service not configured"


class InternalServerAPIError(APIErrorResponse):
    """Raised when an internal server error occurs"""

    def __init__(self):
        pass

    def to_status_code(self) -> int:
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_code(self) -> str:
        return "internal_server_error"

    def to_message(self) -> str:
        return "Server error"
