"""Sentinel health policy.

The check stops at the first problem it finds: a missing masters count means
the target is not a sentinel, a non-zero tilt flag means TILT mode, and a
masters count of zero means nothing is being monitored.
"""

import logging

from .errors import PolicyViolation, ProbeError
from .status import Severity, Verdict

logger = logging.getLogger(__name__)

MASTERS_FIELD = "sentinel_masters"
TILT_FIELD = "sentinel_tilt"


def evaluate_info(info, verdict):
    """Apply the sentinel policy to parsed INFO fields.

    Raises PolicyViolation on the first failing rule, otherwise adds an OK
    message to verdict.
    """
    if MASTERS_FIELD not in info:
        raise PolicyViolation("Redis instance is not configured as a sentinel")
    if info.get(TILT_FIELD, "0") != "0":
        raise PolicyViolation("Sentinel has entered TILT mode")
    masters = info[MASTERS_FIELD]
    if masters == "0":
        raise PolicyViolation("Sentinel is not monitoring any masters")
    verdict.add(Severity.OK, f"Monitoring {masters} masters")
    return verdict


def run_check(client, verdict=None):
    """Query the sentinel through client and return the resulting verdict.

    Never raises: every failure becomes a CRITICAL message. The client is
    closed on the way out.
    """
    if verdict is None:
        verdict = Verdict()
    try:
        info = client.query_info_fields()
        logger.debug("Received %d INFO fields", len(info))
        evaluate_info(info, verdict)
    except ProbeError as e:
        logger.debug("Check failed: %s", e)
        verdict.add(Severity.CRITICAL, str(e))
    except Exception as e:
        logger.debug("Unexpected error during check", exc_info=True)
        verdict.add(Severity.CRITICAL, f"{type(e).__name__}: {e}")
    finally:
        try:
            client.close()
        except Exception:
            logger.debug("Error closing connection", exc_info=True)
    logger.debug("Verdict: %r", verdict)
    return verdict
