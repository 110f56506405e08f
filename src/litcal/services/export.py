"""ExportService: deterministic season rows for persistence, and drift checks.

Rows are the shape a lectionary store keeps per season:
``{liturgical_year, cycle, name, start_date, end_date, color}``. Regenerating
the same range always yields identical rows in identical order.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from litcal.domain.errors import CalendarDomainError
from litcal.domain.year import generate_liturgical_year
from litcal.domain.years import MAX_ADVENT_YEAR, MIN_ADVENT_YEAR, AdventYear, check_year
from litcal.services._helpers import domain_failure, invalid_range
from litcal.services.base import BaseService
from litcal.services.result import ServiceError, ServiceResult
from litcal.services.telemetry import trace_span, traced

ROW_FIELDS = ("liturgical_year", "cycle", "name", "start_date", "end_date", "color")

RowKey = tuple[int, str]


def _rows_for(start: int, end: int) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for advent_year in range(start, end + 1):
        built = generate_liturgical_year(AdventYear(advent_year))
        for window in built.seasons:
            rows.append(
                {
                    "liturgical_year": built.year,
                    "cycle": str(built.cycle),
                    "name": str(window.name),
                    "start_date": window.start_date.isoformat(),
                    "end_date": window.end_date.isoformat(),
                    "color": str(window.color),
                }
            )
    return rows


def _key(row: Mapping[str, Any]) -> RowKey:
    return int(row["liturgical_year"]), str(row["name"])


class ExportService(BaseService):
    """Season-row export and comparison against persisted rows."""

    def _bounds(self, op: str, start: int, end: int) -> tuple[int, int] | ServiceResult:
        try:
            start = check_year(start, minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR)
            end = check_year(end, minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR)
        except CalendarDomainError as exc:
            return domain_failure(op, exc)
        if end < start:
            return invalid_range(op, start, end)
        return start, end

    @traced
    def season_rows(self, start: int, end: int, *, output: Path | None = None) -> ServiceResult:
        """Season rows for Advent years *start* through *end*, inclusive.

        With *output*, the rows are also written there as a JSON array.
        """
        bounds = self._bounds("export_seasons", start, end)
        if isinstance(bounds, ServiceResult):
            return bounds
        with trace_span("generate"):
            rows = _rows_for(*bounds)
        data: dict[str, Any] = {
            "start": bounds[0],
            "end": bounds[1],
            "rows": rows,
            "count": len(rows),
        }
        if output is not None:
            with trace_span("write"):
                try:
                    output.parent.mkdir(parents=True, exist_ok=True)
                    output.write_text(
                        json.dumps(rows, indent=self.export_config.indent) + "\n",
                        encoding="utf-8",
                    )
                except OSError as exc:
                    return ServiceResult(
                        ok=False,
                        op="export_seasons",
                        error=ServiceError(
                            code="WRITE_FAILED",
                            message=f"Cannot write season rows to {output}: {exc}",
                            detail={"path": str(output)},
                        ),
                    )
            data["output_file"] = str(output)
        return ServiceResult(ok=True, op="export_seasons", data=data)

    @traced
    def diff_season_rows(
        self,
        rows: Iterable[Mapping[str, Any]],
        start: int,
        end: int,
    ) -> ServiceResult:
        """Compare persisted *rows* with freshly generated ones.

        Returns:
            ``missing``: expected rows absent from *rows*.
            ``mismatched``: rows whose fields differ, with both versions.
            ``unexpected``: rows not in the regenerated range, or duplicates.
        """
        op = "export_diff"
        bounds = self._bounds(op, start, end)
        if isinstance(bounds, ServiceResult):
            return bounds

        persisted: dict[RowKey, dict[str, Any]] = {}
        unexpected: list[dict[str, Any]] = []
        for index, row in enumerate(rows):
            try:
                key = _key(row)
            except (KeyError, TypeError, ValueError):
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="INVALID_ROWS",
                        message=f"Row {index} lacks a liturgical_year and name",
                        detail={"index": index},
                    ),
                )
            if key in persisted:
                unexpected.append(dict(row))
                continue
            persisted[key] = dict(row)

        expected = {_key(row): row for row in _rows_for(*bounds)}
        missing = [row for key, row in expected.items() if key not in persisted]
        mismatched = [
            {"expected": row, "actual": persisted[key]}
            for key, row in expected.items()
            if key in persisted
            and any(str(persisted[key].get(f)) != str(row[f]) for f in ROW_FIELDS)
        ]
        unexpected.extend(row for key, row in persisted.items() if key not in expected)

        drift = len(missing) + len(mismatched) + len(unexpected)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start": bounds[0],
                "end": bounds[1],
                "missing": missing,
                "mismatched": mismatched,
                "unexpected": unexpected,
                "count": drift,
                "in_sync": drift == 0,
            },
        )

    def diff_season_file(self, path: Path, start: int, end: int) -> ServiceResult:
        """Load persisted rows from a JSON array file and diff them."""
        try:
            rows = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            return ServiceResult(
                ok=False,
                op="export_diff",
                error=ServiceError(
                    code="INVALID_FILE",
                    message=f"Cannot read season rows from {path}: {exc}",
                    detail={"path": str(path)},
                ),
            )
        if not isinstance(rows, list):
            return ServiceResult(
                ok=False,
                op="export_diff",
                error=ServiceError(
                    code="INVALID_FILE",
                    message=f"{path} does not hold a JSON array of rows",
                    detail={"path": str(path)},
                ),
            )
        return self.diff_season_rows(rows, start, end)
