"""Unit tests for the call types."""

from collections import OrderedDict
from dataclasses import FrozenInstanceError, dataclass
from datetime import datetime, timezone

import pytest

from kissmetrics.core.calls import Alias, Record, SetProps, as_properties
from kissmetrics.core.timestamp import AUTOMATIC, Manual

T0 = datetime(2024, 3, 15, 9, 0, 0, tzinfo=timezone.utc)


@dataclass(frozen=True)
class UserId:
    value: int

    def to_identity(self) -> bytes:
        return b"user-%d" % self.value


class TestRecord:
    def test_defaults(self):
        record = Record(event_name=b"Signed Up", identity=b"user-42")

        assert record.timestamp == AUTOMATIC
        assert record.properties == ()

    def test_properties_are_frozen_to_a_tuple(self):
        props = [(b"item", "Widget")]
        record = Record(b"Purchased", b"user-42", Manual(T0), props)
        props.append((b"extra", "value"))

        assert record.properties == ((b"item", "Widget"),)

    def test_heterogeneous_field_types(self):
        record = Record(event_name="Purchased", identity=UserId(42))

        assert record.event_name == "Purchased"
        assert record.identity == UserId(42)

    def test_is_immutable(self):
        record = Record(b"Purchased", b"user-42")
        with pytest.raises(FrozenInstanceError):
            record.identity = b"user-43"

    def test_rejects_non_identity(self):
        with pytest.raises(TypeError, match="Record.identity"):
            Record(event_name=b"Purchased", identity=42)

    def test_rejects_identity_only_type_as_event_name(self):
        with pytest.raises(TypeError, match="Record.event_name"):
            Record(event_name=UserId(1), identity=b"user-1")

    def test_rejects_bad_timestamp(self):
        with pytest.raises(TypeError, match="Record.timestamp"):
            Record(b"Purchased", b"user-42", timestamp=T0)

    def test_rejects_malformed_property(self):
        with pytest.raises(TypeError, match="Record.properties"):
            Record(b"Purchased", b"user-42", properties=["item=Widget"])

    @pytest.mark.parametrize(
        "prop,message",
        [
            ((b"item", b"Widget"), "must have a str value"),
            (("seats", 5), "must have a str value"),
            (("seats", None), "must have a str value"),
            ((42, "x"), "property names must be bytes or str"),
        ],
    )
    def test_rejects_badly_typed_property(self, prop, message):
        with pytest.raises(TypeError, match=message):
            Record(b"Purchased", b"user-42", properties=[prop])

    def test_equality(self):
        assert Record(b"e", b"p", Manual(T0)) == Record(b"e", b"p", Manual(T0))


class TestSetProps:
    def test_defaults(self):
        call = SetProps(identity=b"user-42")

        assert call.timestamp == AUTOMATIC
        assert call.properties == ()

    def test_custom_identity(self):
        assert SetProps(UserId(3), properties=[("plan", "pro")]).identity == UserId(3)

    def test_rejects_non_identity(self):
        with pytest.raises(TypeError, match="SetProps.identity"):
            SetProps(identity=None)

    def test_rejects_non_text_property_value(self):
        with pytest.raises(TypeError, match="SetProps property"):
            SetProps(identity=b"user-42", properties=[("plan", 3)])


class TestAlias:
    def test_fields(self):
        call = Alias(identity=b"anon-1", identity2=UserId(42))

        assert call.identity == b"anon-1"
        assert call.identity2 == UserId(42)

    def test_rejects_non_identity(self):
        with pytest.raises(TypeError, match="Alias.identity2"):
            Alias(identity=b"anon-1", identity2=3.14)

    def test_has_no_timestamp_or_properties(self):
        call = Alias(b"a", b"b")

        assert not hasattr(call, "timestamp")
        assert not hasattr(call, "properties")


class TestAsProperties:
    def test_none(self):
        assert as_properties(None) == ()

    def test_mapping_keeps_order(self):
        props = OrderedDict([("seats", "5"), ("plan", "pro")])
        assert as_properties(props) == (("seats", "5"), ("plan", "pro"))

    def test_dict(self):
        assert as_properties({"plan": "pro"}) == (("plan", "pro"),)

    def test_pairs(self):
        assert as_properties([(b"plan", "pro")]) == ((b"plan", "pro"),)
