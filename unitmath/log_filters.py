import logging
from collections.abc import Mapping


class TruncatingFilter(logging.Filter):
    """Shorten long log messages and their arguments to max_length characters."""

    def __init__(self, name: str = "", max_length: int = 250):
        super().__init__(name)
        self.max_length = max_length

    def _shorten(self, arg):
        s_arg = str(arg)
        if len(s_arg) > self.max_length:
            return s_arg[: self.max_length] + "..."
        return arg  # Keep original object for %d / %f formatting

    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record):
            return False
        if isinstance(record.args, Mapping):
            # logger.debug("%(size)s", {"size": ...}) keeps a single mapping
            record.args = {key: self._shorten(value) for key, value in record.args.items()}
        elif record.args:
            record.args = tuple(self._shorten(arg) for arg in record.args)
        elif isinstance(record.msg, str):
            # For f-strings or literals
            record.msg = self._shorten(record.msg)
        return True
