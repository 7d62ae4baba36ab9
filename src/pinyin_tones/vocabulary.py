import csv
import logging
import os
from typing import Iterable

import pandas as pd
from tqdm import tqdm

from .config import Settings
from .errors import ConfigError, InputNotFoundError, MalformedRecordError
from .file_saver import save_dataframe
from .pinyin import numbers_to_marks

logger = logging.getLogger(__name__)

VOCABULARY_COLUMNS = ["mandarin", "pinyin", "translation"]


def read_vocabulary(
    file_path: str, sep: str = ",", header: bool = True, encoding: str = "utf-8"
) -> pd.DataFrame:
    """
    Reads a vocabulary list of (Mandarin, numbered pinyin, translation) records.

    Parameters
    ----------
    file_path : str
        The delimited file to read.
    sep : str, optional
        The field delimiter, by default ",".
    header : bool, optional
        Whether the first row is a header to skip, by default True.
    encoding : str, optional
        The file encoding, by default "utf-8".

    Returns
    -------
    pd.DataFrame
        One row per record with the columns in ``VOCABULARY_COLUMNS``.
    """
    if not os.path.isfile(file_path):
        raise InputNotFoundError(file_path)
    if len(sep) != 1:
        raise ConfigError(f"Field delimiter must be a single character, got {sep!r}")
    # pandas pads short rows with empty strings, so count the fields first.
    _check_field_counts(file_path, sep, encoding)
    try:
        df = pd.read_csv(
            file_path,
            sep=sep,
            header=0 if header else None,
            dtype=str,
            keep_default_na=False,
            encoding=encoding,
        )
    except pd.errors.EmptyDataError as e:
        raise MalformedRecordError(f"{file_path} is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise MalformedRecordError(f"Malformed record in {file_path}: {e}") from e

    if len(df.columns) != len(VOCABULARY_COLUMNS):
        raise MalformedRecordError(
            f"Expected {len(VOCABULARY_COLUMNS)} fields per record in {file_path}, found {len(df.columns)}"
        )
    df.columns = VOCABULARY_COLUMNS
    return df


def _check_field_counts(file_path: str, sep: str, encoding: str):
    try:
        with open(file_path, newline="", encoding=encoding) as f:
            reader = csv.reader(f, delimiter=sep, strict=True)
            for row in reader:
                if row and len(row) != len(VOCABULARY_COLUMNS):
                    raise MalformedRecordError(
                        f"Expected {len(VOCABULARY_COLUMNS)} fields in {file_path}, "
                        f"line {reader.line_num}, found {len(row)}"
                    )
    except csv.Error as e:
        raise MalformedRecordError(f"Malformed record in {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"{file_path} is not valid {encoding}: {e}") from e


def find_duplicates(terms: Iterable[str]) -> list[str]:
    """Returns every term that was already seen earlier in ``terms``, in order."""
    seen = set()
    duplicates = []
    for term in terms:
        if term in seen:
            duplicates.append(term)
        else:
            seen.add(term)
    return duplicates


def convert_vocabulary(vocabulary: pd.DataFrame, verbose: bool = False) -> pd.DataFrame:
    """
    Converts the pinyin column of a vocabulary list to tone marks.

    Repeated Mandarin terms are reported with a warning; every row is kept.

    Parameters
    ----------
    vocabulary : pd.DataFrame
        The records, as returned by ``read_vocabulary``.
    verbose : bool, optional
        Whether to show a progress bar, by default False.

    Returns
    -------
    pd.DataFrame
        A copy of ``vocabulary`` with converted pinyin.
    """
    converted = vocabulary.copy()
    converted["pinyin"] = [
        numbers_to_marks(pinyin)
        for pinyin in tqdm(
            vocabulary["pinyin"], desc="Converting pinyin", disable=not verbose
        )
    ]
    for term in find_duplicates(vocabulary["mandarin"]):
        logger.warning("Duplicate word: %s", term)
    return converted


def convert_vocabulary_file(
    input_path: str, output_path: str, settings: Settings | None = None, verbose: bool = False
) -> pd.DataFrame:
    """Reads a vocabulary file, converts its pinyin and writes it back out without a header."""
    settings = settings or Settings()
    vocabulary = read_vocabulary(input_path, settings.sep, settings.header, settings.encoding)
    converted = convert_vocabulary(vocabulary, verbose=verbose)
    save_dataframe(converted, output_path, sep=settings.output_sep, encoding=settings.encoding)
    logger.info("Wrote %d records to %s", len(converted), output_path)
    return converted
