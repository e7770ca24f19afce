import asyncio
from shop.auth import AuthForm
from shop.data_store import add_customer, load_data, upsert_customer
from shop.session import ShopSession, header_view


def show_toast(message, severity="success"):
    print(f"[{severity}] {message}")


def print_header(session, dark_mode):
    view = header_view(session, is_dark_mode=dark_mode)
    print("-"*40)
    print(f"Search: {view.search_placeholder} | Theme: {view.theme_icon}")
    if view.greeting:
        print(view.greeting)
    print("-"*40)


def fill_form(form):
    if not form.is_login:
        form.set_field("name", input("Full name: ").strip())
        form.set_field("phone", input("Phone: ").strip())
    form.set_field("email", input("User / Email: " if form.is_login else "Email: ").strip())
    form.set_field("password", input("Password: ").strip())
    if not form.is_login:
        form.set_field("confirm_password", input("Confirm password: ").strip())


def auth_page(session):
    """Login/registration screen. Returns once somebody is signed in or the user backs out."""
    # directories are reloaded into the same lists before every submit
    data = load_data()
    customers, users = data["customers"], data["users"]

    def on_login(email):
        session.sign_in(email, customers, users)
        show_toast("Welcome back!")

    def on_register(registration):
        customer = add_customer(data, registration)
        upsert_customer(customer)
        session.sign_in(customer["email"], customers, users)
        show_toast("Account created!")

    form = AuthForm(customers, users, on_login=on_login, on_register=on_register, show_toast=show_toast)

    while True:
        title = "Login" if form.is_login else "Create Account"
        print("="*8, f" {title} ", "="*8)
        print(
            f'''1. {"Sign in" if form.is_login else "Create account"}
        2. {"No account? Sign up" if form.is_login else "Already registered? Log in"}
        3. Back'''
        )
        try:
            choice = int(input("Enter your choice: "))
        except ValueError:
            print("Invalid input. Please enter a number.")
            continue
        if choice == 1:
            fill_form(form)
            fresh = load_data()
            customers[:] = fresh["customers"]
            users[:] = fresh["users"]
            print("Processing...")
            asyncio.run(form.submit())
            if session.current_customer is not None or session.is_logged_in:
                return
        elif choice == 2:
            form.toggle_mode()
        elif choice == 3:
            return
        else:
            print("Invalid choice, please try again.")


def home():
    session = ShopSession()
    dark_mode = False
    while True:
        print_header(session, dark_mode)
        print("="*8, " Mari Zap Shop ", "="*8)
        signed_in = session.current_customer is not None or session.is_logged_in
        print(
            f'''1. {"Logout" if signed_in else "Login / Register"}
        2. Toggle theme
        3. Exit'''
        )
        try:
            choice = int(input("enter your choice:\t"))
            if choice == 1:
                if signed_in:
                    session.sign_out()
                    print("Logging out...")
                else:
                    auth_page(session)
            elif choice == 2:
                dark_mode = not dark_mode
            elif choice == 3:
                print("Thank you for shopping with us")
                print("-"*8)
                break
            else:
                print("Invalid choice , please try again")
        except ValueError:
            print("Invalid input. Please enter a number.")


if __name__ == "__main__":
    home()
