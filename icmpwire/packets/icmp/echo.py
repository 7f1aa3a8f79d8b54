"""
    Echo Request / Echo Reply (RFC 792)

    0       1       2               4               6               8
    +-------+-------+---------------+---------------+---------------+-------
    | type  | code  |   checksum    |  identifier   |   sequence    | data...
    +-------+-------+---------------+---------------+---------------+-------
"""
from dataclasses import dataclass
from typing import Tuple

from icmpwire.packets.icmp.header import ICMPType
from icmpwire.packets.icmp.message import ICMPMessage


@dataclass(frozen=True)
class EchoMessage(ICMPMessage):
    REQUEST_TYPE = ICMPType.ECHO_REQUEST
    REPLY_TYPE = ICMPType.ECHO_REPLY

    data: bytes = b''

    def pack_body(self) -> bytes:
        return super().pack_body() + self.data

    @classmethod
    def unpack_body(cls, body: bytes) -> Tuple:
        return super().unpack_body(body) + (bytes(body[cls.FORMAT.size:]),)

    @classmethod
    def request(cls, id: int, seq: int, data: bytes = b'') -> 'EchoMessage':
        return cls.build(cls.REQUEST_TYPE, id, seq, bytes(memoryview(data)))

    @classmethod
    def reply(cls, id: int, seq: int, data: bytes = b'') -> 'EchoMessage':
        return cls.build(cls.REPLY_TYPE, id, seq, bytes(memoryview(data)))

    def make_reply(self) -> 'EchoMessage':
        """
            The reply a host sends back for this request: same identifier, sequence and data
        """
        return self.reply(self.id, self.seq, self.data)


def new_echo_request(id: int, seq: int, data: bytes = b'') -> EchoMessage:
    return EchoMessage.request(id, seq, data)


def new_echo_reply(id: int, seq: int, data: bytes = b'') -> EchoMessage:
    return EchoMessage.reply(id, seq, data)
