# modules/export.py

"""CSV serialisation of the Monte Carlo result table."""

from __future__ import annotations

import logging
import os
from typing import Union

import pandas as pd

from utils.constants import CSV_FILENAME

logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    """Raised when the result table cannot be written to its destination."""


def result_table_to_csv(table: pd.DataFrame) -> bytes:
    """Encode the table as CSV: an unnamed trial-index column, then the data columns."""
    return table.to_csv(index=True).encode("utf-8")


def write_result_csv(table: pd.DataFrame, path: Union[str, os.PathLike] = CSV_FILENAME) -> str:
    """
    Write the table to ``path`` as CSV.

    A directory path receives a ``ManningMCdata.csv`` file. The table itself is
    never modified, whether or not the write succeeds.

    Raises
    ------
    ExportError
        If the destination cannot be written.
    """
    path = os.fspath(path)
    if os.path.isdir(path):
        path = os.path.join(path, CSV_FILENAME)
    try:
        with open(path, "wb") as handle:
            handle.write(result_table_to_csv(table))
    except OSError as exc:
        logger.error("Could not export results to %s: %s", path, exc)
        raise ExportError(f"Could not write results to {path}: {exc}") from exc
    logger.info("Exported %d rows to %s", len(table), path)
    return path
