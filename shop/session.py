from typing import Optional
from pydantic import BaseModel
from shop.directory import Directory, field_of


def first_name(name):
    return (name or "").split(" ")[0]


class ShopSession:
    """Who is signed in: a shop customer, a staff user, or nobody."""

    def __init__(self):
        self.current_customer = None
        self.staff_email = None

    @property
    def is_logged_in(self):
        # staff (CRM) login, distinct from a shop customer session
        return self.staff_email is not None

    def sign_in(self, email, customers, users):
        self.sign_out()
        customer = Directory(customers=customers).find(email)
        if customer is not None:
            self.current_customer = customer
            return customer
        user = Directory(users=users).find(email)
        if user is not None:
            self.staff_email = field_of(user, "email")
            return user
        print(f"session: no record for {email}, nobody signed in")
        return None

    def sign_out(self):
        self.current_customer = None
        self.staff_email = None


class HeaderView(BaseModel):
    greeting: Optional[str] = None
    show_logout: bool = False
    show_menu_button: bool = False
    search_placeholder: str = "Search products..."
    theme_icon: str = "moon"


def header_view(session, is_dark_mode=False):
    customer = session.current_customer
    greeting = None
    if customer is not None:
        greeting = f"Hello, {first_name(field_of(customer, 'name'))}"
    return HeaderView(
        greeting=greeting,
        show_logout=customer is not None,
        show_menu_button=session.is_logged_in,
        search_placeholder="Global search..." if session.is_logged_in else "Search products...",
        theme_icon="sun" if is_dark_mode else "moon",
    )
