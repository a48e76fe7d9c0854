import os
import socket
import logging

logger = logging.getLogger("termseq")

DEFAULT_PORT = 12013


def get_log_port():
    """Get the port from TERMSEQ_LOG_PORT, or the default port."""
    value = os.environ.get("TERMSEQ_LOG_PORT", "")
    if not value:
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError:
        port = -1
    if not 0 < port < 2**16:
        logger.warning(f"Invalid TERMSEQ_LOG_PORT {value!r}, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


class UDPHandler(logging.Handler):
    """Send log records to a local UDP port, so they don't mess up the terminal."""

    def __init__(self, port=None):
        # The base class registers the handler, so be complete before that
        self.udp_address = ("127.0.0.1", get_log_port() if port is None else port)
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        super().__init__()

    def emit(self, record):
        msg = self.format(record)
        bb = msg.encode()
        size = 2**10
        try:
            while bb:
                bb1 = bb[:size]
                bb = bb[size:]
                self._socket.sendto(bb1, self.udp_address)
        except OSError:
            self.handleError(record)

    def close(self):
        self._socket.close()
        super().close()


def enable_udp_logging(port=None):
    """Forward the termseq logs to ``termseq --listen``. Returns the handler."""
    for handler in logger.handlers:
        if isinstance(handler, UDPHandler):
            return handler
    handler = UDPHandler(port)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return handler


def listen_to_logs(port=None):
    """Called from ``termseq --listen``

    This way we can see the logs from another process, so they do not get
    mixed up with the escape sequences that we are writing.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", get_log_port() if port is None else port))

    while True:
        data, addr = sock.recvfrom(2**20)
        print(data.decode())
