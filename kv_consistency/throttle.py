from dataclasses import dataclass, field


@dataclass
class ErrorThrottle:
    """
        Lets a given message through at most once per wall-clock second.
        Messages must be stable text ("Reading: <cause>"), otherwise every
        distinct string gets printed once.
    """
    last_emit: dict = field(default_factory=dict)

    def should_print(self, message, now):
        second = int(now)
        printable = self.last_emit.get(message) != second
        self.last_emit[message] = second
        return printable
