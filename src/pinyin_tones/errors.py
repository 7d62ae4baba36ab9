class PinyinTonesError(Exception):
    """Base class for errors raised while reading, converting or writing files."""


class InputNotFoundError(PinyinTonesError):
    def __init__(self, path):
        super().__init__(f"Input not found: {path}")
        self.path = path


class MalformedRecordError(PinyinTonesError):
    pass


class WriteError(PinyinTonesError):
    def __init__(self, path, reason):
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path


class ConfigError(PinyinTonesError):
    pass


class ReadError(PinyinTonesError):
    def __init__(self, path, reason):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
