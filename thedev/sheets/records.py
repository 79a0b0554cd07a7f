from collections.abc import Mapping, Sequence
from typing import Any


def rows_to_records(
    matrix: Sequence[Sequence[Any]],
    header_row_index: int = 0,
    first_data_row_index: int = 1,
) -> list[dict[str, str]]:
    """Map each data row onto the field names found in the header row.

    Missing trailing cells become empty strings and cells beyond the header
    are dropped, so every record has exactly the header's keys.
    """
    if len(matrix) <= header_row_index:
        return []

    headers = [str(name) for name in matrix[header_row_index]]
    records = []
    for row in matrix[first_data_row_index:]:
        row = row or []
        records.append(
            {key: str(row[i]) if i < len(row) and row[i] is not None else "" for i, key in enumerate(headers)}
        )
    return records


def record_to_row(
    record: Mapping[str, Any],
    field_order: Sequence[str],
    defaults: Mapping[str, Any] | None = None,
) -> list[Any]:
    """Lay a record out in column order, filling absent fields from defaults"""
    defaults = defaults or {}
    row = []
    for field in field_order:
        value = record.get(field)
        row.append(defaults.get(field, "") if value is None else value)
    return row
