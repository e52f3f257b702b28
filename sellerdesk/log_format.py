import logging

# passed via `extra=`; shown right after the logger name when present
CONTEXT_FIELDS = ("user", "seller", "collection", "group")


def _quoted(value) -> str:
    text = str(value)
    if not text or any(c.isspace() or c in '"=' for c in text):
        return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return text


class KeyValueFormatter(logging.Formatter):
    """
    time=... level=... logger=... [user=... seller=...] message="..."

    Tracebacks follow the line, unindented, so the key=value line stays
    greppable on its own.
    """

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("time", self.formatTime(record, self.datefmt)),
            ("level", record.levelname),
            ("logger", record.name),
        ]
        pairs += [(f, getattr(record, f)) for f in CONTEXT_FIELDS if getattr(record, f, None) is not None]
        pairs.append(("message", record.getMessage()))

        line = " ".join(f"{k}={_quoted(v)}" for k, v in pairs)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        if record.stack_info:
            line += "\n" + self.formatStack(record.stack_info)
        return line
