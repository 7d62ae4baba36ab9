import pytest
from ebooklib import epub


def create_test_epub(file_path):
    book = epub.EpubBook()
    book.set_identifier("id123456")
    book.set_title("Test Book")
    book.set_language("zh")
    book.add_author("Author")

    c1 = epub.EpubHtml(title="第一课", file_name="chap_1.xhtml", lang="zh")
    c1.content = "<html><body><h1>第一课</h1><p>Ni3hao3!</p></body></html>"
    c2 = epub.EpubHtml(title="第二课", file_name="chap_2.xhtml", lang="zh")
    c2.content = "<html><body><h1>第二课</h1><p>Xie4xie5.</p></body></html>"

    for c in [c1, c2]:
        book.add_item(c)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", c1, c2]
    epub.write_epub(file_path, book, {})


@pytest.fixture
def test_book_path(tmp_path):
    path = tmp_path / "test_book.epub"
    create_test_epub(str(path))
    return str(path)


@pytest.fixture
def vocabulary_path(tmp_path):
    path = tmp_path / "vocabulary.csv"
    path.write_text(
        "Mandarin,Pinyin,German\n"
        "你好,ni3hao3,hallo\n"
        "妈妈,ma1ma5,Mutter\n"
        "女儿,nü3'er2,Tochter\n",
        encoding="utf-8",
    )
    return str(path)
