class ICMPError(ValueError):
    """
        Base class for packets that cannot be decoded
    """


class TruncatedPacket(ICMPError):
    def __init__(self, needed: int, got: int):
        super().__init__(f'packet too short: need {needed} bytes, got {got}')
        self.needed = needed
        self.got = got


class UnsupportedMessageType(ICMPError):
    def __init__(self, type: int, code: int):
        super().__init__(f'unsupported ICMP message type={type} code={code}')
        self.type = type
        self.code = code
