from icmpwire.packets.icmp.checksum import (ChecksumMismatch, checksum, is_valid, validate,
                                            zero_checksum)


def test_checksum_known_value() -> None:
    data = bytes.fromhex("0001f203f4f5f6f7")
    assert checksum(data) == 0x220D


def test_checksum_odd_length_pads_low_byte() -> None:
    assert checksum(b"abc") == 0x3B9D
    assert checksum(b"a") == 0xFFFF - 0x6100


def test_checksum_folds_carries() -> None:
    assert checksum(b"\xff\xff\xff\xff") == 0x0000
    assert checksum(b"\xff\xff\x00\x02") == 0xFFFF - 0x0002


def test_checksum_of_empty_buffer() -> None:
    assert checksum(b"") == 0xFFFF


def test_checksum_accepts_memoryview() -> None:
    data = bytes.fromhex("08000000000100016162")
    assert checksum(memoryview(data)) == 0x969B
    assert checksum(bytearray(data)) == 0x969B


def test_zero_checksum() -> None:
    assert zero_checksum(bytes.fromhex("0800969b00010001")) == bytes.fromhex("0800000000010001")


def test_validate_accepts_correct_packet() -> None:
    packet = bytes.fromhex("0800969b000100016162")
    assert validate(packet) is None
    assert is_valid(packet)


def test_validate_reports_mismatch() -> None:
    packet = bytes.fromhex("0800969b000100016163")
    assert validate(packet) == ChecksumMismatch(stored=0x969B, computed=0x969A)
    assert not is_valid(packet)


def test_validate_short_packet_is_mismatch() -> None:
    mismatch = validate(b"\x08\x00\x96")
    assert mismatch is not None
    assert mismatch.stored is None
