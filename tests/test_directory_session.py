from types import SimpleNamespace
from shop.directory import Directory, DirectoryIndex, field_of
from shop.models import Customer
from shop.session import ShopSession, first_name, header_view

CUSTOMERS = [
    {"id": "c1", "name": "Ana Souza", "email": "Ana@X.com"},
    Customer(id="c2", name="Bruno", email="bruno@x.com"),
    {"id": "c3", "name": "No Email"},
]
USERS = [SimpleNamespace(email="staff@x.com", role="admin"), {"email": "BOSS@x.com"}]


def test_directory_and_index_agree():
    directory = Directory(CUSTOMERS, USERS)
    index = DirectoryIndex(CUSTOMERS, USERS)
    for email in ["ana@x.com", "ANA@X.COM", "bruno@X.com", "staff@x.com", "boss@x.com",
                  "nobody@x.com", "", " ana@x.com"]:
        assert directory.contains(email) == index.contains(email), email


def test_record_without_email_never_matches():
    assert not Directory(CUSTOMERS, USERS).contains(None)
    assert len(DirectoryIndex(CUSTOMERS, USERS)) == 4


def test_index_find_prefers_customer_record():
    shared = [{"email": "both@x.com", "name": "Customer side"}]
    index = DirectoryIndex(customers=shared, users=[{"email": "BOTH@x.com"}])
    assert index.find("both@X.COM")["name"] == "Customer side"


def test_first_name():
    assert first_name("Ana Maria Souza") == "Ana"
    assert first_name("") == ""


def test_header_for_customer_session():
    session = ShopSession()
    session.sign_in("ana@x.com", CUSTOMERS, USERS)

    view = header_view(session, is_dark_mode=True)

    assert view.greeting == "Hello, Ana"
    assert view.show_logout is True
    assert view.show_menu_button is False
    assert view.search_placeholder == "Search products..."
    assert view.theme_icon == "sun"


def test_header_for_staff_session():
    session = ShopSession()
    session.sign_in("STAFF@x.com", CUSTOMERS, USERS)

    view = header_view(session)

    assert view.greeting is None
    assert view.show_menu_button is True
    assert view.search_placeholder == "Global search..."
    assert view.theme_icon == "moon"


def test_sign_out_clears_everything():
    session = ShopSession()
    session.sign_in("bruno@x.com", CUSTOMERS, USERS)
    assert header_view(session).greeting == "Hello, Bruno"

    session.sign_out()
    assert session.current_customer is None
    assert header_view(session).show_logout is False


def test_sign_in_unknown_email_leaves_nobody():
    session = ShopSession()
    assert session.sign_in("ghost@x.com", CUSTOMERS, USERS) is None
    assert not session.is_logged_in


def test_field_of_reads_dicts_and_objects():
    assert field_of({"name": "Ana"}, "name") == "Ana"
    assert field_of(SimpleNamespace(name="Bruno"), "name") == "Bruno"
    assert field_of({"email": "a@x.com"}, "name") is None
    assert field_of(SimpleNamespace(), "name") is None
