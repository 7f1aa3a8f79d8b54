from dataclasses import dataclass, replace
from enum import IntEnum
from struct import Struct

from icmpwire.packets.icmp.errors import TruncatedPacket


class ICMPType(IntEnum):
    ECHO_REPLY = 0
    ECHO_REQUEST = 8
    TIMESTAMP_REQUEST = 13
    TIMESTAMP_REPLY = 14


@dataclass(frozen=True)
class ICMPHeader:
    """
        type (1 byte), code (1 byte), checksum (2 bytes, big endian)
    """
    FORMAT = Struct('!BBH')
    type: int
    code: int
    checksum: int = 0

    def pack(self) -> bytes:
        return self.FORMAT.pack(self.type, self.code, self.checksum)

    def __bytes__(self):
        return self.pack()

    def with_checksum(self, checksum: int) -> 'ICMPHeader':
        return replace(self, checksum=checksum)

    @classmethod
    def size(cls):
        return cls.FORMAT.size

    @classmethod
    def frombytes(cls, buf: bytes) -> 'ICMPHeader':
        if len(buf) < cls.size():
            raise TruncatedPacket(cls.size(), len(buf))
        return cls(*cls.FORMAT.unpack_from(buf))
