from dataclasses import dataclass
from typing import List
from typing import Optional


@dataclass(frozen=True)
class WaitlistSignup:
    email: str


@dataclass(frozen=True)
class WaitlistConfig:
    sender: str
    owner_email: Optional[str] = None


@dataclass(frozen=True)
class EmailMessage:
    sender: str
    to: List[str]
    subject: str
    html: str


@dataclass
class WaitlistSignupResult:
    confirmation_id: Optional[str]
    notification_id: Optional[str] = None
    notification_failed: bool = False


class EmailProviderError(Exception):
    """Raised by the email provider repository when a send is rejected"""

    def __init__(self, status_code: Optional[int], message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ConfirmationEmailError(Exception):
    """The confirmation email to the signup address could not be sent"""

    def __init__(self, email: str, reason: str):
        super().__init__(f"Confirmation email to {email} failed: {reason}")
        self.email = email
        self.reason = reason
