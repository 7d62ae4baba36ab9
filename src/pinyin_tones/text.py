import logging
import os

from .config import Settings
from .ebook_reader import read_epub
from .errors import InputNotFoundError, MalformedRecordError, ReadError
from .file_saver import write_text
from .pinyin import numbers_to_marks

logger = logging.getLogger(__name__)


def read_text(file_path: str, encoding: str = "utf-8") -> str:
    """Reads a whole text file, or the text of an EPUB book."""
    if not os.path.isfile(file_path):
        raise InputNotFoundError(file_path)
    try:
        if str(file_path).endswith(".epub"):
            return read_epub(str(file_path))
        with open(file_path, "r", encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"{file_path} is not valid {encoding}: {e}") from e
    except OSError as e:
        raise ReadError(file_path, e.strerror or e) from e


def convert_text_file(input_path: str, output_path: str, settings: Settings | None = None) -> str:
    """
    Converts the numbered pinyin in a text file and writes the result.

    Parameters
    ----------
    input_path : str
        The text or EPUB file to read.
    output_path : str
        Where to write the converted text.
    settings : Settings, optional
        Encoding settings, by default ``Settings()``.

    Returns
    -------
    str
        The converted text.
    """
    settings = settings or Settings()
    content = read_text(input_path, settings.encoding)
    converted = numbers_to_marks(content)
    write_text(output_path, converted, settings.encoding)
    logger.info("Wrote %d characters to %s", len(converted), output_path)
    return converted
