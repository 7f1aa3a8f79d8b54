"""
    Conversion to and from scapy's ICMP layer
"""
from scapy.layers.inet import ICMP
from scapy.packet import Packet

from icmpwire.packets.icmp import Message, parse
from icmpwire.packets.icmp.errors import ICMPError
from icmpwire.packets.icmp.message import ICMPMessage


def to_scapy(msg: ICMPMessage) -> ICMP:
    """
        Dissect the wire bytes with scapy, e.g. to send them as `IP(dst=...) / to_scapy(msg)`
    """
    return ICMP(msg.pack())


def from_scapy(pkt: Packet) -> Message:
    layer = pkt.getlayer(ICMP)
    if layer is None:
        raise ICMPError(f'no ICMP layer in {pkt.summary()}')
    # bytes() fills in a checksum scapy has not computed yet
    return parse(bytes(layer))
