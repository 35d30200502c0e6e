"""Unit tests for the event name and identity capabilities."""

from dataclasses import dataclass

import pytest

from kissmetrics.core.naming import (
    EventName,
    Identity,
    is_event_name,
    is_identity,
    render_event_name,
    render_identity,
)


@dataclass(frozen=True)
class UserId:
    value: int

    def to_identity(self) -> bytes:
        return b"user-%d" % self.value


@dataclass(frozen=True)
class Signup:
    plan: str

    def to_event_name(self) -> bytes:
        return b"Signed Up (" + self.plan.encode("utf-8") + b")"


class UserKey(str):
    """Typed user id that is also a plain string."""

    def to_identity(self) -> bytes:
        return b"uid:" + self.encode("utf-8")


class EventLabel(bytes):
    def to_event_name(self) -> bytes:
        return self.upper()


BYTE_SAMPLES = [b"", b"user-42", b"with,comma:colon", b"\x00\xff\xfe", bytes(range(256))]


class TestBuiltinRendering:
    @pytest.mark.parametrize("value", BYTE_SAMPLES)
    def test_identity_is_identity_function(self, value):
        assert render_identity(value) is value

    @pytest.mark.parametrize("value", BYTE_SAMPLES)
    def test_event_name_is_identity_function(self, value):
        assert render_event_name(value) is value

    def test_str_is_utf8_encoded(self):
        assert render_identity("zoë") == "zoë".encode("utf-8")
        assert render_event_name("Viewed Café") == "Viewed Café".encode("utf-8")


class TestCustomTypes:
    def test_custom_identity(self):
        assert render_identity(UserId(42)) == b"user-42"

    def test_custom_event_name(self):
        assert render_event_name(Signup("pro")) == b"Signed Up (pro)"

    def test_rendering_is_deterministic(self):
        assert render_identity(UserId(7)) == render_identity(UserId(7))

    def test_protocols_are_runtime_checkable(self):
        assert isinstance(UserId(1), Identity)
        assert not isinstance(UserId(1), EventName)
        assert isinstance(Signup("free"), EventName)
        assert not isinstance(Signup("free"), Identity)


class TestRenderingPrecedence:
    def test_str_subclass_uses_its_rendering(self):
        assert render_identity(UserKey("42")) == b"uid:42"

    def test_bytes_subclass_uses_its_rendering(self):
        assert render_event_name(EventLabel(b"signed up")) == b"SIGNED UP"

    def test_plain_str_subclass_is_encoded(self):
        class Name(str):
            pass

        assert render_identity(Name("bob")) == b"bob"

    def test_unrenderable_value(self):
        with pytest.raises(TypeError, match="as an identity"):
            render_identity(42)


class TestCapabilityChecks:
    @pytest.mark.parametrize("value", [b"x", "x", UserId(1)])
    def test_is_identity(self, value):
        assert is_identity(value)

    @pytest.mark.parametrize("value", [42, None, Signup("pro"), ["user"]])
    def test_is_not_identity(self, value):
        assert not is_identity(value)

    @pytest.mark.parametrize("value", [b"x", "x", Signup("pro")])
    def test_is_event_name(self, value):
        assert is_event_name(value)

    @pytest.mark.parametrize("value", [42, None, UserId(1)])
    def test_is_not_event_name(self, value):
        assert not is_event_name(value)
