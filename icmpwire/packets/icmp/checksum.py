"""
    RFC 1071 Internet checksum
"""
import logging
from dataclasses import dataclass
from struct import Struct
from typing import Optional

log = logging.getLogger(__name__)

_WORD = Struct('!H')

# Offset of the checksum field inside the ICMP header
CHECKSUM_OFFSET = 2


@dataclass(frozen=True)
class ChecksumMismatch:
    """
        Result of validating a packet whose stored checksum is wrong
    """
    stored: Optional[int]
    computed: int


def checksum(buf: bytes) -> int:
    """
        One's complement of the one's complement sum of the big endian 16 bit words of `buf`.
        An odd trailing byte is the high byte of a word with a zero low byte.
    """
    if len(buf) % 2:
        buf = bytes(buf) + b'\x00'
    s = sum(word for word, in _WORD.iter_unpack(buf))
    while s >> 16:
        s = (s & 0xFFFF) + (s >> 16)
    return 0xFFFF - s


def zero_checksum(buf: bytes) -> bytes:
    """
        Copy of `buf` with the checksum field set to zero
    """
    end = CHECKSUM_OFFSET + _WORD.size
    return bytes(buf[:CHECKSUM_OFFSET]) + b'\x00\x00' + bytes(buf[end:])


def validate(buf: bytes) -> Optional[ChecksumMismatch]:
    """
        Recompute the checksum of a received ICMP packet.
        Returns None when the stored checksum is correct, a ChecksumMismatch otherwise.
    """
    if len(buf) < CHECKSUM_OFFSET + _WORD.size:
        log.debug('packet of %d bytes has no checksum field', len(buf))
        return ChecksumMismatch(None, checksum(buf))

    stored, = _WORD.unpack_from(buf, CHECKSUM_OFFSET)
    computed = checksum(zero_checksum(buf))
    if stored == computed:
        return None

    log.debug('checksum mismatch: stored=%#06x computed=%#06x', stored, computed)
    return ChecksumMismatch(stored, computed)


def is_valid(buf: bytes) -> bool:
    return validate(buf) is None
