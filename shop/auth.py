import asyncio
from shop.config import get_submit_delay
from shop.directory import Directory
from shop.models import (
    FormState,
    LoginSucceeded,
    Mode,
    RegisterSucceeded,
    RegistrationData,
    Rejected,
    Rejection,
    SubmitState,
)

# the page's input names map onto FormState fields
FIELD_ALIASES = {"confirmPassword": "confirm_password"}


def validate_submission(mode, form, directory):
    """
    Decide the outcome of one submit. Pure: no state changes, no callbacks.
    directory: anything with contains(email), e.g. Directory or DirectoryIndex
    """
    if mode == Mode.LOGIN:
        if directory.contains(form.email):
            return LoginSucceeded(email=form.email)
        return Rejected.because(Rejection.EMAIL_NOT_FOUND)

    # register: password check comes before any directory lookup
    if form.password != form.confirm_password:
        return Rejected.because(Rejection.PASSWORD_MISMATCH)
    if directory.contains(form.email):
        return Rejected.because(Rejection.EMAIL_ALREADY_REGISTERED)
    return RegisterSucceeded(data=RegistrationData(name=form.name, email=form.email, phone=form.phone))


class AuthForm:
    """Login/registration form: mode, field values and the submit state machine."""

    def __init__(self, customers=None, users=None, on_login=None, on_register=None,
                 show_toast=None, directory=None, directory_loader=None, delay=None):
        self.customers = customers if customers is not None else []
        self.users = users if users is not None else []
        self.directory = directory
        # called once per submit, after the latency
        self.directory_loader = directory_loader
        self.on_login = on_login or (lambda email: None)
        self.on_register = on_register or (lambda data: None)
        self.show_toast = show_toast or (lambda message, severity="success": None)
        self.delay = get_submit_delay() if delay is None else delay

        self.mode = Mode.LOGIN
        self.form = FormState()
        self.is_loading = False
        self.state = SubmitState.IDLE

    @property
    def is_login(self):
        return self.mode == Mode.LOGIN

    def set_field(self, name, value):
        field = FIELD_ALIASES.get(name, name)
        if field not in FormState.model_fields:
            raise ValueError(f"Unknown form field '{name}'")
        setattr(self.form, field, value)

    def toggle_mode(self):
        self.mode = Mode.REGISTER if self.is_login else Mode.LOGIN
        # a typed password never survives a mode switch
        self.form.password = ""
        self.form.confirm_password = ""

    def _directory(self):
        # re-read on every submit so caller updates are seen
        if self.directory is not None:
            return self.directory
        if self.directory_loader is not None:
            return self.directory_loader()
        return Directory(self.customers, self.users)

    async def simulate_latency(self):
        """Stand-in for the network round trip; replace to talk to a real service."""
        await asyncio.sleep(self.delay)

    async def submit(self):
        if self.is_loading:
            # submit button is disabled while a pass is in flight
            return None
        self.is_loading = True
        self.state = SubmitState.SUBMITTING
        try:
            await self.simulate_latency()
            outcome = validate_submission(self.mode, self.form, self._directory())
            self._dispatch(outcome)
            return outcome
        finally:
            self.is_loading = False
            self.state = SubmitState.IDLE

    def _dispatch(self, outcome):
        if isinstance(outcome, LoginSucceeded):
            self.on_login(outcome.email)
        elif isinstance(outcome, RegisterSucceeded):
            self.on_register(outcome.data.model_dump())
        else:
            print(f"auth: {self.mode.value} rejected ({outcome.reason.value})")
            if outcome.reason == Rejection.EMAIL_ALREADY_REGISTERED:
                # send the user to the login form, fields kept as typed
                self.mode = Mode.LOGIN
            self.show_toast(outcome.message, outcome.severity)
