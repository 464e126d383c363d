from typing import Optional, TextIO


class DebugLog:
    """Verbosity-levelled trace writer.

    Messages are written to `path` only when `level` is greater than zero;
    a message is kept when its own level is at most the configured one.
    The file is opened on the first message so that a quiet run never
    creates it.
    """
    def __init__(self, level: int = 0, path: str = 'debug.txt', stream: Optional[TextIO] = None):
        self.level = level
        self.path = path
        self.fp = stream
        self._owns_fp = stream is None

    def enabled(self, level: int = 1) -> bool:
        return 0 < level <= self.level

    def log(self, level: int, msg: str):
        if not self.enabled(level):
            return
        if self.fp is None:
            self.fp = open(self.path, 'w', encoding='utf-8')
        self.fp.write(msg + '\n')
        self.fp.flush()

    def close(self):
        if self.fp is not None and self._owns_fp:
            self.fp.close()
            self.fp = None
