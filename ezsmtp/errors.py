"""Exceptions raised by ezsmtp.

Every failure of message building, configuration or delivery is reported
with one of these classes. Delivery errors carry the :class:`SendStep`
that failed together with the SMTP reply, when the server sent one.
"""

from enum import Enum
from typing import Any, Dict


class SendStep(Enum):
    """Steps of a single submission, in the order they run."""

    PRECONDITION = "precondition"
    CONNECT = "connect"
    GREETING = "greeting"
    STARTTLS = "starttls"
    AUTH = "auth"
    MAIL = "mail"
    RCPT = "rcpt"
    DATA = "data"
    QUIT = "quit"


class EzSMTPError(Exception):
    """Base exception for all ezsmtp errors."""

    default_message = "An email error occurred"

    def __init__(self, message: str | None = None, details: Dict[str, Any] | None = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Returns the error as a plain dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


## Configuration


class InvalidURIError(EzSMTPError, ValueError):
    """The connection URI could not be parsed."""

    default_message = "Invalid SMTP URI"


class InvalidSchemeError(InvalidURIError):
    """The URI scheme is neither ``smtp`` nor ``smtps``."""

    default_message = "Invalid scheme"


class HostLookupError(EzSMTPError):
    """The local hostname used in the greeting could not be resolved."""

    default_message = "Unable to determine the local hostname"


## Message


class InvalidAddressError(EzSMTPError, ValueError):
    """One or more addresses failed syntax validation."""

    default_message = "Invalid email address"


class NoRecipientsError(EzSMTPError, ValueError):
    """The message has no To, Cc or Bcc recipient."""

    default_message = "No recipients specified"


## Delivery


class ConnectionFailedError(EzSMTPError):
    """The TCP or TLS connection to the relay could not be opened."""

    default_message = "Failed to connect to the SMTP server"


class ProtocolError(EzSMTPError):
    """The relay rejected a command or the session broke down.

    Attributes:
        step (SendStep): Step that failed.
        code (int | None): SMTP reply code, if a reply was received.
        response (str): SMTP reply text.
        message_accepted (bool): True when the relay had already accepted the
            message data before the failure (a failed QUIT). The send is still
            reported as failed.
    """

    default_message = "SMTP protocol error"

    def __init__(
        self,
        step: SendStep,
        message: str | None = None,
        code: int | None = None,
        response: str = "",
        message_accepted: bool = False,
    ):
        self.step = step
        self.code = code
        self.response = response
        self.message_accepted = message_accepted
        super().__init__(
            message,
            details={
                "step": step.value,
                "code": code,
                "response": response,
                "message_accepted": message_accepted,
            },
        )


class TLSRequiredError(ProtocolError):
    """Encryption was required but the server does not offer STARTTLS."""

    default_message = "Server does not support STARTTLS"


class AuthError(ProtocolError):
    """The relay rejected the credentials or offers no usable mechanism."""

    default_message = "SMTP authentication failed"

    def __init__(self, message: str | None = None, code: int | None = None, response: str = ""):
        super().__init__(SendStep.AUTH, message, code=code, response=response)
