# Minimum IPv4 header: 5 words of 32 bits
IPV4_MIN_HEADER_LEN = 20


def strip_ipv4_header(buf: bytes) -> bytes:
    """
        Raw IPv4 sockets deliver the IP header in front of the ICMP message.
        Skip it when `buf` starts with one, otherwise return `buf` unchanged.
        The check looks at the version nibble of the first byte, so it only tells IPv4 apart
        from echo and timestamp messages, whose type bytes (0, 8, 13, 14) have a zero high nibble.
    """
    if len(buf) < IPV4_MIN_HEADER_LEN:
        return buf
    version, ihl = buf[0] >> 4, buf[0] & 0x0F
    header_len = ihl * 4
    if version != 4 or header_len < IPV4_MIN_HEADER_LEN or len(buf) < header_len:
        return buf
    return buf[header_len:]
