"""Column-buffered Parquet persistence for per-step species statistics."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from soliton.domain.field import ConcentrationField
from soliton.io.schemas import SPECIES_LOG_SCHEMA

SpeciesColumns = dict[str, list[int | float]]


def new_species_columns() -> SpeciesColumns:
    """Return an empty column buffer matching ``SPECIES_LOG_SCHEMA``."""
    return {name: [] for name in SPECIES_LOG_SCHEMA.names}


def append_species_rows(columns: SpeciesColumns, step: int, field: ConcentrationField) -> int:
    """Append one row per species for ``step``; return the buffered row count."""
    values = field.values
    totals = values.sum(axis=(0, 1))
    minima = values.min(axis=(0, 1))
    maxima = values.max(axis=(0, 1))
    for z in range(field.species):
        columns["step"].append(step)
        columns["species"].append(z)
        columns["total"].append(float(totals[z]))
        columns["minimum"].append(float(minima[z]))
        columns["maximum"].append(float(maxima[z]))
    return len(columns["step"])


def flush_species_columns(
    columns: SpeciesColumns,
    writer: pq.ParquetWriter | None,
    path: Path,
) -> pq.ParquetWriter | None:
    """Write buffered rows to ``path`` and clear the buffer.

    Opens the writer lazily on first flush and returns it so the caller can
    keep appending row groups and close it when the run ends.
    """
    if not columns["step"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=SPECIES_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(path, SPECIES_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer
