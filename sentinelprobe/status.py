from enum import IntEnum


class Severity(IntEnum):
    """Monitoring plugin states. The value doubles as the process exit code."""
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class Verdict:
    """Accumulates the worst severity seen and every message added."""

    def __init__(self):
        self.severity = Severity.OK
        self.messages = []

    def add(self, severity, message):
        """Record a message; the severity only ever moves up."""
        self.severity = max(self.severity, Severity(severity))
        self.messages.append(message)

    @property
    def exit_code(self):
        return int(self.severity)

    def summary(self):
        return f"{self.severity.name} - {'. '.join(self.messages)}"

    def __repr__(self):
        return f"Verdict({self.severity.name}, {self.messages!r})"
