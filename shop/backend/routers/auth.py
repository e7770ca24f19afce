from fastapi import APIRouter, HTTPException
from shop.auth import AuthForm
from shop.backend import common
from shop.backend.schemas import LoginIn, RegisterIn, RejectionOut
from shop.directory import Directory
from shop.models import Rejected, Rejection

router = APIRouter(prefix="/auth", tags=["auth"])

REJECTION_STATUS = {
    Rejection.EMAIL_NOT_FOUND: 404,
    Rejection.PASSWORD_MISMATCH: 400,
    Rejection.EMAIL_ALREADY_REGISTERED: 409,
}


def _build_form(loaded, toasts, on_login=None, on_register=None):
    def load_directory():
        # read the store after the latency, inside the submit lock
        loaded.update(common.load_data())
        return Directory(loaded["customers"], loaded["users"])

    return AuthForm(
        directory_loader=load_directory,
        on_login=on_login,
        on_register=on_register,
        show_toast=lambda message, severity="success": toasts.append((message, severity)),
    )


def _raise_rejection(form, outcome, toasts):
    message, severity = toasts[-1] if toasts else (outcome.message, outcome.severity)
    detail = RejectionOut(reason=outcome.reason.value, message=message,
                          severity=severity, mode=form.mode.value)
    raise HTTPException(status_code=REJECTION_STATUS[outcome.reason], detail=detail.model_dump())


@router.post("/login")
async def api_login(payload: LoginIn):
    loaded = {}
    toasts = []

    def on_login(email):
        common.session.sign_in(email, loaded["customers"], loaded["users"])

    form = _build_form(loaded, toasts, on_login=on_login)
    form.set_field("email", payload.email)
    form.set_field("password", payload.password)
    async with common.submit_lock():
        outcome = await form.submit()
    if isinstance(outcome, Rejected):
        _raise_rejection(form, outcome, toasts)
    kind = "customer" if common.find_customer(loaded, outcome.email) else "staff"
    return {"success": True, "email": outcome.email, "kind": kind}


@router.post("/register", status_code=201)
async def api_register(payload: RegisterIn):
    loaded = {}
    toasts = []
    created = {}

    def on_register(registration):
        customer = common.new_customer(registration)
        common.upsert_customer(customer)
        common.session.sign_in(customer["email"], [customer], [])
        created["customer"] = customer

    form = _build_form(loaded, toasts, on_register=on_register)
    form.toggle_mode()
    for field, value in payload.model_dump().items():
        form.set_field(field, value)
    # held across check and save so overlapping registrations see each other
    async with common.submit_lock():
        outcome = await form.submit()
    if isinstance(outcome, Rejected):
        _raise_rejection(form, outcome, toasts)
    return {"success": True, "customer": created["customer"]}
