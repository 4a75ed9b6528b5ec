from .client import SentinelClient, pack_command
from .info import parse_info
from .status import Severity, Verdict
from .check import evaluate_info, run_check
from .errors import ProbeError, ProbeConnectionError, ProtocolError, ServerError, PolicyViolation
