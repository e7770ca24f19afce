from enum import Enum
from typing import Optional
from pydantic import BaseModel


class Mode(str, Enum):
    LOGIN = "login"
    REGISTER = "register"


class SubmitState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class Rejection(str, Enum):
    EMAIL_NOT_FOUND = "email_not_found"
    PASSWORD_MISMATCH = "password_mismatch"
    EMAIL_ALREADY_REGISTERED = "email_already_registered"


REJECTION_MESSAGES = {
    Rejection.EMAIL_NOT_FOUND: "E-mail not found. Check it or create an account.",
    Rejection.PASSWORD_MISMATCH: "Passwords do not match.",
    Rejection.EMAIL_ALREADY_REGISTERED: "This e-mail is already registered. Please log in.",
}


# --- directory records (owned by the caller) ---
class Customer(BaseModel):
    id: Optional[str] = None
    # caller-owned records may lack a name; only the email is required
    name: str = ""
    email: str
    phone: str = ""
    avatar_url: Optional[str] = None


# --- form ---
class FormState(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    confirm_password: str = ""


class RegistrationData(BaseModel):
    """What a successful registration hands to the caller: no id, no avatar."""
    name: str
    email: str
    phone: str


# --- outcomes ---
class LoginSucceeded(BaseModel):
    email: str


class RegisterSucceeded(BaseModel):
    data: RegistrationData


class Rejected(BaseModel):
    reason: Rejection
    message: str
    severity: str = "error"

    @classmethod
    def because(cls, reason):
        return cls(reason=reason, message=REJECTION_MESSAGES[reason])

