from __future__ import annotations

from pathlib import Path

import pytest

from cbc.auth import LOGIN_NAMES, LoginError, SessionStore, check_login


@pytest.mark.parametrize(
    "name,password,message",
    [
        ("", "wheaton", "Please select your name"),
        ("Somebody Else", "wheaton", "Please select your name"),
        ("Juanny Smit", "", "Please enter your password"),
        ("", "", "Please select your name"),
        ("Juanny Smit", "Wheaton", "Incorrect password. Please try again."),
    ],
)
def test_login_gate_messages(name, password, message):
    with pytest.raises(LoginError) as exc:
        check_login(name, password, expected_password="wheaton")
    assert str(exc.value) == message


def test_login_gate_accepts_shared_password():
    assert check_login(" RickDa Stick ", "wheaton", expected_password="wheaton") == "RickDa Stick"


def test_session_lifecycle(tmp_path: Path):
    sessions = SessionStore(tmp_path)
    assert sessions.current() is None
    assert sessions.logout() is False

    sessions.login(LOGIN_NAMES[0])
    assert SessionStore(tmp_path).current() == LOGIN_NAMES[0]

    assert sessions.logout() is True
    assert sessions.current() is None


def test_tampered_session_is_ignored(tmp_path: Path):
    sessions = SessionStore(tmp_path)
    sessions.path.write_text('{"partner": "Mallory"}')
    assert sessions.current() is None
    sessions.path.write_text("garbage")
    assert sessions.current() is None
