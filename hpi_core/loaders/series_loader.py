from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from hpi_core.loaders.data_io import Source, load_raw_table
from hpi_core.normalize.schema import detect
from hpi_core.normalize.series import SeriesIndex, normalize

logger = logging.getLogger(__name__)


def build_series_index(header: Sequence[Any], rows: Sequence[Mapping[str, Any]]) -> SeriesIndex:
    """
    Detect the layout from `header` and normalize `rows` into a SeriesIndex.
    SchemaError / EmptyResultError propagate; nothing partial is returned.
    """
    logger.info("CSV header keys: %s", list(header))
    schema = detect(header, rows)
    index = normalize(rows, schema)
    logger.info("Loaded %d observations across %d regions", len(index), len(index.regions))
    return index


def load_series_index(source: Source) -> SeriesIndex:
    header, rows = load_raw_table(source)
    if not rows:
        logger.warning("CSV is empty: %s", getattr(source, "name", source))
    return build_series_index(header, rows)
