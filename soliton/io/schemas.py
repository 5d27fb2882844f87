"""Parquet schema definitions for simulation artifacts."""

from __future__ import annotations

import pyarrow as pa

RUN_PAYLOAD_SCHEMA_VERSION = 1

SPECIES_LOG_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("species", pa.int64()),
        ("total", pa.float64()),
        ("minimum", pa.float64()),
        ("maximum", pa.float64()),
    ]
)
