from .pinyin import numbers_to_marks, split

__version__ = "0.1.0"

__all__ = ["numbers_to_marks", "split"]
