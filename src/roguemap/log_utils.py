import logging


class TopicFormatter(logging.Formatter):
    """`LEVEL:topic   : message`, where topic is the last part of the logger name."""

    def format(self, record):
        level_name = record.levelname[:5]
        topic = record.name.split(".")[-1][:8]
        prefix = f"{level_name:<5}:{topic:<8}: "
        s = super().format(record)
        return "\n".join(f"{prefix}{line}" for line in s.split("\n"))


def setup_logging(level=logging.WARNING):
    """Attach a console handler to the `roguemap` logger. Safe to call twice."""
    root_logger = logging.getLogger("roguemap")
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
        h.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(TopicFormatter())
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)
    root_logger.propagate = False
    return root_logger
