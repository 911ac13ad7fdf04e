import csv
from pathlib import Path
from typing import IO, Any, Union

import pandas as pd
import streamlit as st

from hpi_core.errors import UnreadableFileError

Source = Union[str, Path, IO[Any]]


def read_raw_frame(source: Source) -> pd.DataFrame:
    """
    Read a delimited file with every cell kept as the raw string (no NA coercion).
    Lines with more fields than the header (footnotes, notes) are skipped.

    Raises:
        UnreadableFileError: empty file, undetectable delimiter, or a parse failure.
    """
    try:
        return pd.read_csv(
            source,
            sep=None,
            engine="python",
            dtype=str,
            keep_default_na=False,
            on_bad_lines="skip",
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError, csv.Error, UnicodeDecodeError) as e:
        raise UnreadableFileError(f"cannot parse delimited file: {e}") from e


def frame_to_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    return df.to_dict(orient="records")


@st.cache_data(show_spinner=False)
def load_raw_table(source: Source) -> tuple[list[str], list[dict[str, Any]]]:
    """Load a CSV as (header, rows). Cached for speed."""
    df = read_raw_frame(source)
    return [str(c) for c in df.columns], frame_to_rows(df)
