import builtins
from shop import interface_cli
from shop.data_store import load_data


def feed(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))


def test_login_then_greeting_then_exit(monkeypatch, capsys, seeded):
    feed(monkeypatch, "1", "1", "ANA@X.COM", "pw", "3")
    interface_cli.home()
    out = capsys.readouterr().out
    assert "[success] Welcome back!" in out
    assert "Hello, Ana" in out


def test_register_existing_email_returns_to_login(monkeypatch, capsys, seeded):
    feed(monkeypatch,
         "1",                      # Login / Register
         "2",                      # switch to register
         "1", "Staff", "000", "staff@x.com", "a", "a",
         "3",                      # back (form is on login now)
         "3")                      # exit
    interface_cli.home()
    out = capsys.readouterr().out
    assert "[error] This e-mail is already registered. Please log in." in out
    assert out.count("=  Login  =") == 2


def test_register_saves_customer(monkeypatch, capsys, seeded):
    feed(monkeypatch, "1", "2", "1", "Bia Lima", "555", "bia@new.com", "a", "a", "3")
    interface_cli.home()
    assert "Hello, Bia" in capsys.readouterr().out
    assert [c["email"] for c in load_data()["customers"]] == ["ana@x.com", "bia@new.com"]


def test_invalid_menu_input(monkeypatch, capsys):
    feed(monkeypatch, "x", "3")
    interface_cli.home()
    assert "Invalid input. Please enter a number." in capsys.readouterr().out
