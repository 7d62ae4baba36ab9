import logging

import pandas as pd
import pytest

from pinyin_tones.config import Settings
from pinyin_tones.errors import ConfigError, InputNotFoundError, MalformedRecordError
from pinyin_tones.vocabulary import (
    VOCABULARY_COLUMNS,
    convert_vocabulary,
    convert_vocabulary_file,
    find_duplicates,
    read_vocabulary,
)


def test_read_vocabulary(vocabulary_path):
    df = read_vocabulary(vocabulary_path)
    assert list(df.columns) == VOCABULARY_COLUMNS
    assert len(df) == 3
    assert df.iloc[0].tolist() == ["你好", "ni3hao3", "hallo"]


def test_read_vocabulary_without_header(tmp_path):
    path = tmp_path / "vocabulary.tsv"
    path.write_text("你好\tni3hao3\thello\n", encoding="utf-8")
    df = read_vocabulary(str(path), sep="\t", header=False)
    assert df.iloc[0].tolist() == ["你好", "ni3hao3", "hello"]


def test_read_vocabulary_missing_file(tmp_path):
    with pytest.raises(InputNotFoundError):
        read_vocabulary(str(tmp_path / "missing.csv"))


def test_read_vocabulary_malformed(tmp_path):
    path = tmp_path / "extra_field.csv"
    path.write_text("Mandarin,Pinyin,German\n你好,ni3hao3,hallo,extra\n", encoding="utf-8")
    with pytest.raises(MalformedRecordError):
        read_vocabulary(str(path))

    path = tmp_path / "two_columns.csv"
    path.write_text("Mandarin,Pinyin\n你好,ni3hao3\n", encoding="utf-8")
    with pytest.raises(MalformedRecordError):
        read_vocabulary(str(path))

    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(MalformedRecordError):
        read_vocabulary(str(path))


def test_find_duplicates():
    assert find_duplicates(["你好", "世界", "你好", "你好"]) == ["你好", "你好"]
    assert find_duplicates([]) == []


def test_convert_vocabulary(vocabulary_path):
    df = read_vocabulary(vocabulary_path)
    converted = convert_vocabulary(df)
    assert converted["pinyin"].tolist() == ["nǐhǎo", "māma", "nǚ'ér"]
    assert converted["mandarin"].tolist() == df["mandarin"].tolist()
    assert converted["translation"].tolist() == df["translation"].tolist()
    # the input frame is left alone
    assert df["pinyin"].tolist() == ["ni3hao3", "ma1ma5", "nü3'er2"]


def test_convert_vocabulary_warns_on_duplicates(caplog):
    df = pd.DataFrame(
        [["你好", "ni3hao3", "hallo"], ["你好", "ni3 hao3", "guten Tag"]],
        columns=VOCABULARY_COLUMNS,
    )
    with caplog.at_level(logging.WARNING):
        converted = convert_vocabulary(df)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].getMessage() == "Duplicate word: 你好"
    assert converted["pinyin"].tolist() == ["nǐhǎo", "nǐ hǎo"]


def test_convert_vocabulary_file(vocabulary_path, tmp_path, caplog):
    output_path = tmp_path / "output.csv"
    convert_vocabulary_file(vocabulary_path, str(output_path))

    output_df = pd.read_csv(output_path, header=None, dtype=str, keep_default_na=False)
    assert len(output_df) == 3
    assert output_df.iloc[0].tolist() == ["你好", "nǐhǎo", "hallo"]
    assert output_df.iloc[2].tolist() == ["女儿", "nǚ'ér", "Tochter"]
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_convert_vocabulary_file_keeps_duplicate_rows(tmp_path, caplog):
    input_path = tmp_path / "input.csv"
    input_path.write_text(
        "Mandarin,Pinyin,German\n好,hao3,gut\n世界,shi4jie4,Welt\n好,hao4,mögen\n", encoding="utf-8"
    )
    output_path = tmp_path / "output.tsv"
    convert_vocabulary_file(str(input_path), str(output_path), Settings(output_sep="\t"))

    assert output_path.read_text(encoding="utf-8").splitlines() == [
        "好\thǎo\tgut",
        "世界\tshìjiè\tWelt",
        "好\thào\tmögen",
    ]
    assert [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING] == ["Duplicate word: 好"]


def test_read_vocabulary_missing_field(tmp_path):
    path = tmp_path / "short_row.csv"
    path.write_text("Mandarin,Pinyin,German\n你好,ni3hao3\n好,hao3,gut\n", encoding="utf-8")
    with pytest.raises(MalformedRecordError, match="line 2"):
        read_vocabulary(str(path))


def test_read_vocabulary_missing_field_without_header(tmp_path):
    path = tmp_path / "short_row.tsv"
    path.write_text("好\thao3\tgut\n你好\tni3hao3\n", encoding="utf-8")
    with pytest.raises(MalformedRecordError):
        read_vocabulary(str(path), sep="\t", header=False)


def test_read_vocabulary_keeps_empty_and_quoted_fields(tmp_path):
    path = tmp_path / "vocabulary.csv"
    path.write_text('Mandarin,Pinyin,German\n你好,ni3hao3,"hallo, guten Tag"\n好,hao3,\n', encoding="utf-8")
    df = read_vocabulary(str(path))
    assert df["translation"].tolist() == ["hallo, guten Tag", ""]


def test_read_vocabulary_rejects_long_delimiter(vocabulary_path):
    with pytest.raises(ConfigError):
        read_vocabulary(vocabulary_path, sep="||")


def test_convert_vocabulary_file_missing_field_writes_nothing(tmp_path):
    input_path = tmp_path / "input.csv"
    input_path.write_text("Mandarin,Pinyin,German\n你好,ni3hao3\n好,hao3,gut\n", encoding="utf-8")
    output_path = tmp_path / "output.csv"
    with pytest.raises(MalformedRecordError):
        convert_vocabulary_file(str(input_path), str(output_path))
    assert not output_path.exists()
