from __future__ import annotations

from dataclasses import dataclass

from pytstore._redact import redact_for_log
from pytstore.store import MutationEvent


def test_credential_fields_are_masked() -> None:
    payload = {
        "user": "alice",
        "password": "pw",
        "access_token": "tok",
        "nested": {"api-key": "k", "id": 3},
        "items": [{"Session": "s"}],
    }

    redacted = redact_for_log(payload)
    assert redacted["user"] == "alice"
    assert redacted["password"] == "***"
    assert redacted["access_token"] == "***"
    assert redacted["nested"] == {"api-key": "***", "id": 3}
    assert redacted["items"] == [{"Session": "***"}]


def test_long_text_is_clipped() -> None:
    rendered = redact_for_log("x" * 500)
    assert rendered.startswith("x" * 120)
    assert rendered.endswith("(500 chars)")


def test_long_sequences_are_shortened() -> None:
    rendered = redact_for_log(list(range(25)))
    assert rendered[:20] == list(range(20))
    assert rendered[-1] == "... (+5 more)"


def test_records_are_rendered_as_fields() -> None:
    @dataclass
    class Login:
        user: str
        password: str

    event = MutationEvent(type="auth/login", payload={"token": "t"})

    assert redact_for_log(event) == {"type": "auth/login", "payload": {"token": "***"}}
    assert redact_for_log(Login(user="bob", password="pw")) == {"user": "bob", "password": "***"}


def test_deep_nesting_and_opaque_objects() -> None:
    payload: dict = {"v": 1}
    for _ in range(10):
        payload = {"child": payload}

    flattened = redact_for_log(payload)
    for _ in range(6):
        flattened = flattened["child"]
    assert flattened == "..."
    assert redact_for_log(b"abc") == "<bytes>"
    assert redact_for_log(object()) == "<object>"
