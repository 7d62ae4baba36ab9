import zipfile

import ebooklib
from bs4 import BeautifulSoup
from ebooklib import epub

from .errors import MalformedRecordError


def read_epub(file_path: str) -> str:
    """Returns the text of every document in an EPUB book, one document per line block."""
    try:
        book = epub.read_epub(file_path)
    except (epub.EpubException, zipfile.BadZipFile, KeyError) as e:
        raise MalformedRecordError(f"{file_path} is not a readable EPUB book: {e}") from e
    return "\n".join(
        BeautifulSoup(item.get_content(), "html.parser").get_text()
        for item in book.get_items_of_type(ebooklib.ITEM_DOCUMENT)
    )
