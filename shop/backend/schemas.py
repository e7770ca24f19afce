from pydantic import BaseModel


class LoginIn(BaseModel):
    email: str
    password: str = ""


class RegisterIn(BaseModel):
    name: str = ""
    email: str
    phone: str = ""
    password: str = ""
    confirm_password: str = ""


class RejectionOut(BaseModel):
    reason: str
    message: str
    severity: str = "error"
    mode: str
