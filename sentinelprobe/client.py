import logging
import socket

from .errors import ProbeConnectionError, ProtocolError, ServerError
from .info import parse_info

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 26379

CRLF = b"\r\n"

# Redis refuses bulk strings longer than proto-max-bulk-len (512 MB by default)
MAX_BULK_LENGTH = 512 * 1024 * 1024
READ_CHUNK_SIZE = 65536


def pack_command(*args):
    """Serialize a command as a RESP array of bulk strings."""
    # RESP requires length in BYTES, not characters.
    cmd = f"*{len(args)}\r\n".encode('utf-8')
    for arg in args:
        b_arg = arg if isinstance(arg, bytes) else str(arg).encode('utf-8')
        cmd += f"${len(b_arg)}\r\n".encode('utf-8')
        cmd += b_arg + CRLF
    return cmd


class SentinelClient:
    """One-shot RESP connection to a sentinel.

    The socket is opened on the first command and released by close(), which
    is safe to call at any point, including after a failed connect.
    """

    def __init__(self, host=DEFAULT_HOST, port=DEFAULT_PORT):
        if not 1 <= int(port) <= 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {port}")
        self.host = host
        self.port = int(port)
        self.sock = None
        self.file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def connected(self):
        return self.sock is not None

    def connect(self):
        if self.sock is not None:
            return
        logger.debug("Connecting to %s:%s", self.host, self.port)
        try:
            sock = socket.create_connection((self.host, self.port))
        except OSError as e:
            reason = e.strerror or str(e) or type(e).__name__
            raise ProbeConnectionError(
                f"Error connecting to {self.host}:{self.port}: {reason}"
            ) from e
        self.sock = sock
        self.file = sock.makefile('rb')

    def execute(self, command_name, *args):
        """Send one command and decode exactly one reply.

        Error replies are raised as ServerError rather than returned.
        """
        cmd = pack_command(command_name, *args)
        self.connect()
        logger.debug("Sending %s (%d bytes)", command_name, len(cmd))
        try:
            self.sock.sendall(cmd)
        except OSError as e:
            raise ProbeConnectionError(f"Error sending {command_name}: {e}") from e
        return self._read_response()

    def info(self, section=None):
        args = ["INFO"]
        if section: args.append(section)
        return self.execute(*args)

    def ping(self):
        return self.execute("PING")

    def query_info_fields(self, section=None):
        """Run INFO and return its key:value lines as a dict."""
        reply = self.info(section)
        if reply is None:
            raise ProtocolError("Expected a bulk string reply to INFO, got null")
        if not isinstance(reply, bytes):
            raise ProtocolError(
                f"Expected a bulk string reply to INFO, got {type(reply).__name__}"
            )
        return parse_info(reply.decode('utf-8', errors='replace'))

    def _read_line(self):
        try:
            line = self.file.readline()
        except OSError as e:
            raise ProbeConnectionError(f"Error reading reply: {e}") from e
        if not line:
            raise ProtocolError("Connection closed by server")
        if not line.endswith(b"\n"):
            raise ProtocolError("Connection closed mid-frame")
        if not line.endswith(CRLF):
            raise ProtocolError("Reply line not terminated by CRLF")
        return line[:-2]

    def _read_exact(self, length):
        chunks = []
        remaining = length
        while remaining > 0:
            try:
                chunk = self.file.read(min(remaining, READ_CHUNK_SIZE))
            except OSError as e:
                raise ProbeConnectionError(f"Error reading reply: {e}") from e
            if not chunk:
                raise ProtocolError(
                    f"Connection closed mid-frame: expected {length} bytes, got {length - remaining}"
                )
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    @staticmethod
    def _parse_int(payload):
        try:
            return int(payload)
        except ValueError:
            raise ProtocolError(f"Invalid integer in reply: {payload!r}") from None

    def _read_response(self):
        line = self._read_line()
        prefix = line[0:1]
        payload = line[1:]

        if prefix == b'+': return payload.decode('utf-8', errors='replace')
        if prefix == b'-': raise ServerError(payload.decode('utf-8', errors='replace'))
        if prefix == b':': return self._parse_int(payload)
        if prefix == b'$':
            length = self._parse_int(payload)
            if length < 0: return None
            if length > MAX_BULK_LENGTH:
                raise ProtocolError(f"Bulk string length {length} exceeds {MAX_BULK_LENGTH} bytes")
            data = self._read_exact(length + 2)
            if data[-2:] != CRLF:
                raise ProtocolError("Bulk string is not terminated by CRLF")
            logger.debug("Read bulk string of %d bytes", length)
            return data[:-2]
        if prefix == b'*':
            count = self._parse_int(payload)
            if count < 0: return None
            return [self._read_response() for _ in range(count)]
        raise ProtocolError(f"Unknown RESP type received: {prefix!r}")

    def close(self):
        if self.sock is None:
            return
        logger.debug("Closing connection to %s:%s", self.host, self.port)
        try:
            self.file.close()
        finally:
            self.sock.close()
            self.sock = None
            self.file = None
