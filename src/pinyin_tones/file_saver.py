from pathlib import Path

import pandas as pd

from .errors import WriteError


def save_dataframe(df: pd.DataFrame, output_path: Path, sep: str = ",", encoding: str = "utf-8"):
    """Saves a DataFrame to a delimited file without header or index."""
    try:
        df.to_csv(output_path, sep=sep, index=False, header=False, encoding=encoding)
    except OSError as e:
        raise WriteError(output_path, e.strerror or e) from e


def write_text(output_path: Path, content: str, encoding: str = "utf-8"):
    """Writes a string to a text file."""
    try:
        Path(output_path).write_text(content, encoding=encoding)
    except OSError as e:
        raise WriteError(output_path, e.strerror or e) from e
