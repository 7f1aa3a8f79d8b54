import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from icmpwire.packets.icmp import (TimestampMessage, checksum, new_timestamp_reply,
                                   new_timestamp_request, validate)
from icmpwire.packets.icmp.checksum import zero_checksum
from icmpwire.packets.icmp.timestamp import MS_PER_DAY, ms_since_midnight_utc


def test_timestamp_request_known_vector() -> None:
    msg = new_timestamp_request(1, 1, 1, 2, 3)
    assert msg.pack() == bytes.fromhex("0d00f2f7000100010000000100000002" "00000003")
    assert msg.checksum == 0xF2F7
    assert len(msg.pack()) == 20


def test_timestamp_reply_known_vector() -> None:
    msg = new_timestamp_reply(1, 1, 1, 2, 3)
    assert msg.pack() == bytes.fromhex("0e00f1f7000100010000000100000002" "00000003")


def test_timestamp_field_offsets() -> None:
    wire = new_timestamp_request(0x0102, 0x0304, 0x11111111, 0x22222222, 0x33333333).pack()
    assert wire[4:6] == b"\x01\x02"
    assert wire[6:8] == b"\x03\x04"
    assert wire[8:12] == b"\x11\x11\x11\x11"
    assert wire[12:16] == b"\x22\x22\x22\x22"
    assert wire[16:20] == b"\x33\x33\x33\x33"


@pytest.mark.parametrize("ident, seq", [(0, 0), (1, 1), (0xFFFF, 0xFFFF)])
def test_timestamp_variant_type_and_code(ident: int, seq: int) -> None:
    request = new_timestamp_request(ident, seq, 0, 0, 0)
    reply = new_timestamp_reply(ident, seq, 0, 0, 0)
    assert (request.type, request.code) == (13, 0)
    assert (reply.type, reply.code) == (14, 0)
    assert request.is_request
    assert not reply.is_request


@pytest.mark.parametrize("stamps", [(0, 0, 0), (1, 2, 3), (0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF),
                                    (MS_PER_DAY - 1, 0, 12345678)])
def test_timestamp_checksum_recomputes_from_wire(stamps) -> None:
    msg = new_timestamp_request(0xBEEF, 9, *stamps)
    wire = msg.pack()
    assert checksum(zero_checksum(wire)) == msg.checksum
    assert validate(wire) is None
    assert msg.verify() is None


def test_timestamp_corrupted_field_fails_validation() -> None:
    wire = bytearray(new_timestamp_reply(1, 1, 10, 20, 30).pack())
    wire[13] ^= 0x80
    assert validate(bytes(wire)) is not None


def test_timestamp_serialization_is_deterministic() -> None:
    msg = new_timestamp_request(1, 2, 3, 4, 5)
    assert bytes(msg) == bytes(msg)


def test_timestamp_replace_requires_rechecksum() -> None:
    msg = new_timestamp_request(1, 1, 1, 2, 3)
    changed = dataclasses.replace(msg, transmit=4)
    assert changed.verify() is not None
    assert changed.rechecksum() == new_timestamp_request(1, 1, 1, 2, 4)


def test_timestamp_make_reply_echoes_originate() -> None:
    request = new_timestamp_request(7, 8, originate=1000)
    reply = request.make_reply(receive=2000, transmit=2001)
    assert reply == TimestampMessage.reply(7, 8, 1000, 2000, 2001)


def test_ms_since_midnight_utc_aware() -> None:
    now = datetime(2024, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
    assert ms_since_midnight_utc(now) == 43_200_123


def test_ms_since_midnight_utc_naive_is_utc() -> None:
    assert ms_since_midnight_utc(datetime(2024, 1, 1, 0, 0, 1)) == 1000


def test_ms_since_midnight_utc_converts_timezone() -> None:
    plus_two = timezone(timedelta(hours=2))
    assert ms_since_midnight_utc(datetime(2024, 1, 2, 1, 0, tzinfo=plus_two)) == 23 * 3600 * 1000


def test_ms_since_midnight_utc_default_in_range() -> None:
    assert 0 <= ms_since_midnight_utc() < MS_PER_DAY


def test_timestamp_fields_truncated_to_width() -> None:
    msg = new_timestamp_request(0x10001, 1, -1, 0x100000002, 3)
    assert msg == new_timestamp_request(1, 1, 0xFFFFFFFF, 2, 3)
    assert msg.verify() is None
