import logging
from dataclasses import dataclass, replace
from struct import Struct
from typing import Optional, Tuple

from icmpwire.packets.icmp.checksum import ChecksumMismatch, checksum
from icmpwire.packets.icmp.errors import TruncatedPacket
from icmpwire.packets.icmp.header import ICMPHeader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ICMPMessage:
    """
        Query message: the ICMP header followed by an identifier and a sequence number.

        Messages are immutable. A copy made with `dataclasses.replace` keeps the old
        checksum until `rechecksum` is called on it.
    """
    FORMAT = Struct('!HH')
    REQUEST_TYPE = None
    REPLY_TYPE = None

    header: ICMPHeader
    id: int
    seq: int

    @property
    def type(self) -> int:
        return self.header.type

    @property
    def code(self) -> int:
        return self.header.code

    @property
    def checksum(self) -> int:
        return self.header.checksum

    @property
    def is_request(self) -> bool:
        return self.header.type == self.REQUEST_TYPE

    def pack_body(self) -> bytes:
        return self.FORMAT.pack(self.id, self.seq)

    def pack(self) -> bytes:
        return self.header.pack() + self.pack_body()

    def __bytes__(self):
        return self.pack()

    def write(self, sink):
        """
            Write the wire bytes to `sink` (anything with a `write(bytes)` method).
            Errors raised by the sink propagate unchanged.
        """
        return sink.write(self.pack())

    def compute_checksum(self) -> int:
        return checksum(self.header.with_checksum(0).pack() + self.pack_body())

    def rechecksum(self):
        return replace(self, header=self.header.with_checksum(self.compute_checksum()))

    def verify(self) -> Optional[ChecksumMismatch]:
        computed = self.compute_checksum()
        if computed == self.header.checksum:
            return None
        log.debug('%s checksum mismatch: stored=%#06x computed=%#06x',
                  type(self).__name__, self.header.checksum, computed)
        return ChecksumMismatch(self.header.checksum, computed)

    @classmethod
    def fit_fields(cls, id: int, seq: int, *rest) -> Tuple:
        """
            Truncate identifier and sequence number to their 16 bit fields
        """
        return (id & 0xFFFF, seq & 0xFFFF) + rest

    @classmethod
    def build(cls, icmp_type: int, *fields):
        """
            Create a message of `icmp_type` (code 0) and fill in its checksum
        """
        msg = cls(ICMPHeader(icmp_type, 0), *cls.fit_fields(*fields)).rechecksum()
        log.debug('built %s type=%d id=%d seq=%d checksum=%#06x',
                  cls.__name__, msg.type, msg.id, msg.seq, msg.checksum)
        return msg

    @classmethod
    def unpack_body(cls, body: bytes) -> Tuple:
        if len(body) < cls.FORMAT.size:
            raise TruncatedPacket(ICMPHeader.size() + cls.FORMAT.size, ICMPHeader.size() + len(body))
        return cls.FORMAT.unpack_from(body)

    @classmethod
    def frombytes(cls, buf: bytes):
        """
            Decode a received message. The stored checksum is kept as is, see `verify`.
        """
        header = ICMPHeader.frombytes(buf)
        return cls(header, *cls.unpack_body(buf[ICMPHeader.size():]))
