from socket import socket
from typing import Optional, Tuple


class SocketSink:
    """
        Adapt a socket created by the caller to the `write(bytes)` interface messages write to.
        Opening the socket (raw, privileged or not) is left to the caller.
    """

    def __init__(self, s: socket, to: Optional[Tuple] = None):
        self._s = s
        self._to = to

    def write(self, data: bytes) -> int:
        if self._to is None:
            self._s.sendall(data)
            return len(data)
        return self._s.sendto(data, self._to)

