class ProbeError(Exception):
    """Base class for every failure the probe turns into a CRITICAL verdict."""


class ProbeConnectionError(ProbeError, ConnectionError):
    """The sentinel could not be reached, refused us, or the socket broke."""


class ProtocolError(ProbeError):
    """The reply stream did not follow RESP framing."""


class ServerError(ProbeError):
    """The server answered with a RESP error reply."""


class PolicyViolation(ProbeError):
    """The INFO fields describe an unhealthy sentinel."""
