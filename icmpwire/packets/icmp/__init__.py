import logging
from typing import Union

from icmpwire.packets.icmp.checksum import ChecksumMismatch, checksum, is_valid, validate
from icmpwire.packets.icmp.echo import EchoMessage, new_echo_reply, new_echo_request
from icmpwire.packets.icmp.errors import ICMPError, TruncatedPacket, UnsupportedMessageType
from icmpwire.packets.icmp.header import ICMPHeader, ICMPType
from icmpwire.packets.icmp.message import ICMPMessage
from icmpwire.packets.icmp.timestamp import (TimestampMessage, ms_since_midnight_utc,
                                             new_timestamp_reply, new_timestamp_request)

log = logging.getLogger(__name__)

Message = Union[EchoMessage, TimestampMessage]

MESSAGE_TYPE = {
    ICMPType.ECHO_REQUEST: {
        0: EchoMessage
    },
    ICMPType.ECHO_REPLY: {
        0: EchoMessage
    },
    ICMPType.TIMESTAMP_REQUEST: {
        0: TimestampMessage
    },
    ICMPType.TIMESTAMP_REPLY: {
        0: TimestampMessage
    },
}


def parse(buf: bytes) -> Message:
    """
        Decode an ICMP message (without its IP header) of one of the supported types
    """
    hdr = ICMPHeader.frombytes(buf)
    try:
        cls = MESSAGE_TYPE[hdr.type][hdr.code]
    except KeyError:
        raise UnsupportedMessageType(hdr.type, hdr.code) from None
    log.debug('parsing %d bytes as %s', len(buf), cls.__name__)
    return cls.frombytes(buf)


def serialize(msg: ICMPMessage) -> bytes:
    return msg.pack()


def write(msg: ICMPMessage, sink):
    return msg.write(sink)


__all__ = [
    'ChecksumMismatch', 'EchoMessage', 'ICMPError', 'ICMPHeader', 'ICMPMessage', 'ICMPType',
    'MESSAGE_TYPE', 'Message', 'TimestampMessage', 'TruncatedPacket', 'UnsupportedMessageType',
    'checksum', 'is_valid', 'ms_since_midnight_utc', 'new_echo_reply', 'new_echo_request',
    'new_timestamp_reply', 'new_timestamp_request', 'parse', 'serialize', 'validate', 'write',
]
