from dataclasses import dataclass, field
from typing import Optional

import pytest

from corekernel.errors import FormatError, JsonError
from corekernel.serializer import Bincode, Json, System


@dataclass
class Data:
    name: str
    value: int


@dataclass
class Nested:
    title: str
    tags: list[str]
    note: Optional[str]
    scores: dict[str, float]
    raw: bytes
    items: list[Data] = field(default_factory=list)
    active: bool = False


def _sample():
    return Nested(
        title="tiêu đề",
        tags=["a", "b"],
        note=None,
        scores={"x": 1.5, "y": -2.0},
        raw=b"\x00\xff",
        items=[Data("one", 1), Data("two", -2)],
        active=True,
    )


def test_json():
    serializer = Json()
    data = Data(name="test", value=42)
    assert serializer.deserialize(serializer.serialize(data), Data) == data


def test_bincode():
    serializer = Bincode()
    data = Data(name="test", value=42)
    assert serializer.deserialize(serializer.serialize(data), Data) == data


def test_system():
    system = System()
    data = Data(name="test", value=42)
    assert system.parse(system.json(data), Data) == data
    assert system.decode(system.encode(data), Data) == data


def test_json_is_compact():
    assert Json().serialize(Data("test", 42)) == b'{"name":"test","value":42}'


def test_bincode_layout():
    encoded = Bincode().serialize(Data("test", 42))
    assert encoded == b"\x04" + b"\x00" * 7 + b"test" + b"\x2a" + b"\x00" * 7


@pytest.mark.parametrize("serializer", [Json(), Bincode()])
def test_nested_round_trip(serializer):
    sample = _sample()
    assert serializer.deserialize(serializer.serialize(sample), Nested) == sample


@pytest.mark.parametrize("serializer", [Json(), Bincode()])
def test_optional_present_round_trip(serializer):
    sample = _sample()
    sample.note = "remember"
    assert serializer.deserialize(serializer.serialize(sample), Nested).note == "remember"


def test_json_without_kind_returns_plain_value():
    assert System().parse(b"[1,2,3]") == [1, 2, 3]


def test_json_missing_field():
    with pytest.raises(JsonError):
        Json().deserialize(b'{"name":"test"}', Data)


def test_json_wrong_type():
    with pytest.raises(JsonError):
        Json().deserialize(b'{"name":"test","value":"42"}', Data)


def test_json_invalid_utf8():
    with pytest.raises(JsonError):
        Json().deserialize(b"\xff\xfe", Data)


def test_json_invalid_text():
    with pytest.raises(JsonError):
        System().parse(b"{oops", Data)


def test_bincode_truncated():
    encoded = Bincode().serialize(Data("test", 42))
    with pytest.raises(FormatError):
        Bincode().deserialize(encoded[:-1], Data)


def test_bincode_needs_kind():
    with pytest.raises(FormatError):
        System().decode(Bincode().serialize(Data("test", 42)))


def test_bincode_integer_out_of_range():
    with pytest.raises(FormatError):
        Bincode().serialize(Data("big", 2**70))


def test_bincode_plain_values():
    system = System()
    assert system.decode(system.encode([1, 2, 3]), list[int]) == [1, 2, 3]
    assert system.decode(system.encode("héllo"), str) == "héllo"