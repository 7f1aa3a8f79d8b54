"""
    Timestamp Request / Timestamp Reply (RFC 792)

    0       1       2               4               6               8
    +-------+-------+---------------+---------------+---------------+
    | type  | code  |   checksum    |  identifier   |   sequence    |
    +-------+-------+---------------+---------------+---------------+
    |                    originate timestamp                        |  8
    +---------------------------------------------------------------+
    |                     receive timestamp                         | 12
    +---------------------------------------------------------------+
    |                    transmit timestamp                         | 16
    +---------------------------------------------------------------+

    Timestamps are 32 bit values, by convention milliseconds since midnight UTC.
    The factories take them as given; use `ms_since_midnight_utc` to read the clock.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from struct import Struct
from typing import Optional, Tuple

from icmpwire.packets.icmp.header import ICMPType
from icmpwire.packets.icmp.message import ICMPMessage

MS_PER_DAY = 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class TimestampMessage(ICMPMessage):
    FORMAT = Struct('!HHIII')
    REQUEST_TYPE = ICMPType.TIMESTAMP_REQUEST
    REPLY_TYPE = ICMPType.TIMESTAMP_REPLY

    originate: int = 0
    receive: int = 0
    transmit: int = 0

    @classmethod
    def fit_fields(cls, id: int, seq: int, *stamps) -> Tuple:
        return super().fit_fields(id, seq) + tuple(stamp & 0xFFFFFFFF for stamp in stamps)

    def pack_body(self) -> bytes:
        return self.FORMAT.pack(self.id, self.seq, self.originate, self.receive, self.transmit)

    @classmethod
    def request(cls, id: int, seq: int, originate: int = 0, receive: int = 0,
                transmit: int = 0) -> 'TimestampMessage':
        return cls.build(cls.REQUEST_TYPE, id, seq, originate, receive, transmit)

    @classmethod
    def reply(cls, id: int, seq: int, originate: int = 0, receive: int = 0,
              transmit: int = 0) -> 'TimestampMessage':
        return cls.build(cls.REPLY_TYPE, id, seq, originate, receive, transmit)

    def make_reply(self, receive: int, transmit: int) -> 'TimestampMessage':
        """
            Answer this request: the originate timestamp is echoed back
        """
        return self.reply(self.id, self.seq, self.originate, receive, transmit)


def new_timestamp_request(id: int, seq: int, originate: int = 0, receive: int = 0,
                          transmit: int = 0) -> TimestampMessage:
    return TimestampMessage.request(id, seq, originate, receive, transmit)


def new_timestamp_reply(id: int, seq: int, originate: int = 0, receive: int = 0,
                        transmit: int = 0) -> TimestampMessage:
    return TimestampMessage.reply(id, seq, originate, receive, transmit)


def ms_since_midnight_utc(now: Optional[datetime] = None) -> int:
    """
        Milliseconds elapsed since midnight UTC. A naive `now` is taken to be UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    elapsed = now - midnight
    return (elapsed.seconds * 1000 + elapsed.microseconds // 1000) % MS_PER_DAY
