import pytest
from eth_abi import encode
from eth_utils import to_checksum_address

from abilens.abi.specs import Event, Method, Parameter
from abilens.core.errors import DecodeError
from abilens.decoding.payload import assemble_event_parameters, decode_event_fields, decode_method_inputs

from samples import ALICE, BOB, address_topic


@pytest.fixture
def mixed_method() -> Method:
    return Method(
        name="mixed",
        signature="mixed(address,uint256[],bytes,string,bool,int8)",
        selector=b"\x00\x00\x00\x00",
        inputs=(
            Parameter("who", "address"),
            Parameter("ids", "uint256[]"),
            Parameter("blob", "bytes"),
            Parameter("note", "string"),
            Parameter("flag", "bool"),
            Parameter("delta", "int8"),
        ),
    )


@pytest.fixture
def order_event() -> Event:
    # indexed and non-indexed inputs interleaved
    return Event(
        name="Order",
        signature="Order(address,uint256,address,bytes32)",
        topic=b"\x01" * 32,
        inputs=(
            Parameter("maker", "address", indexed=True),
            Parameter("amount", "uint256"),
            Parameter("taker", "address", indexed=True),
            Parameter("ref", "bytes32"),
        ),
    )


def test_decode_method_inputs_round_trip(mixed_method: Method) -> None:
    values = (ALICE, (1, 2, 3), b"\x00\xff", "hello", False, -8)
    payload = encode(mixed_method.input_types, list(values))

    decoded = decode_method_inputs(mixed_method, payload)

    assert len(decoded) == len(mixed_method.inputs)
    # raw addresses are not guaranteed to be checksummed
    assert to_checksum_address(decoded[0]) == ALICE
    assert tuple(decoded[1]) == (1, 2, 3)
    assert decoded[2:] == values[2:]


def test_decode_method_inputs_truncated(mixed_method: Method) -> None:
    payload = encode(mixed_method.input_types, [ALICE, [1], b"", "", True, 0])

    with pytest.raises(DecodeError) as exc_info:
        decode_method_inputs(mixed_method, payload[:-40])

    assert exc_info.value.__cause__ is not None


def test_decode_method_inputs_unsupported_type() -> None:
    method = Method(name="odd", signature="odd(uint7)", selector=b"\x00" * 4, inputs=(Parameter("x", "uint7"),))

    with pytest.raises(DecodeError):
        decode_method_inputs(method, b"\x00" * 32)


def test_decode_event_fields(order_event: Event) -> None:
    topics = [order_event.topic, address_topic(ALICE), address_topic(BOB)]
    data = encode(["uint256", "bytes32"], [42, b"\x07" * 32])

    fields = decode_event_fields(order_event, topics, data)

    assert fields == {
        "maker": "0x" + address_topic(ALICE).hex(),
        "amount": 42,
        "taker": "0x" + address_topic(BOB).hex(),
        "ref": b"\x07" * 32,
    }
    params = assemble_event_parameters(order_event, fields)
    assert [p.name for p in params] == ["maker", "amount", "taker", "ref"]
    assert [p.indexed for p in params] == [True, False, True, False]
    assert params[3].value == "07" * 32


def test_decode_event_fields_topic_shortfall(order_event: Event) -> None:
    fields = decode_event_fields(order_event, [order_event.topic], encode(["uint256", "bytes32"], [1, b"\x00" * 32]))

    assert set(fields) == {"amount", "ref"}
    params = assemble_event_parameters(order_event, fields)
    assert [p.name for p in params] == ["amount", "ref"]


def test_decode_event_fields_bad_data_aborts(order_event: Event) -> None:
    topics = [order_event.topic, address_topic(ALICE), address_topic(BOB)]

    with pytest.raises(DecodeError):
        decode_event_fields(order_event, topics, b"\x00" * 40)


def test_decode_event_fields_ignores_data_without_data_inputs() -> None:
    event = Event(
        name="Ping",
        signature="Ping(address)",
        topic=b"\x02" * 32,
        inputs=(Parameter("who", "address", indexed=True),),
    )

    fields = decode_event_fields(event, [event.topic, address_topic(ALICE)], b"\xff" * 3)

    assert list(fields) == ["who"]
