"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO; the caller pulls
the text out with ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from litcal.output.console import create_console, get_output, style_for_color

if TYPE_CHECKING:
    from rich.console import Console

    from litcal.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


# op -> data key holding the single value ``--quiet`` prints
_QUIET_VALUES: dict[str, str] = {
    "easter": "easter",
    "cycle": "cycle",
    "season_for_date": "name",
    "proper_for_date": "proper",
    "day": "season",
}


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    key = _QUIET_VALUES.get(result.op)
    if key is not None:
        value = result.data.get(key)
        return "-" if value is None else str(value)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="litcal.ok")
    op = Text(f"  {result.op}", style="litcal.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="litcal.key")
    if key == "date" or key.endswith("_date") or key in ("easter", "advent1", "pentecost"):
        v = Text(str(value), style="litcal.date")
    elif key == "color":
        v = Text(str(value), style=style_for_color(str(value)))
    elif key in ("season", "name"):
        v = Text(str(value), style="litcal.season")
    elif key == "proper":
        v = Text("-" if value is None else str(value), style="litcal.proper")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _color_text(color: Any) -> Text:
    return Text(str(color), style=style_for_color(str(color)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _season_table(seasons: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Season", style="litcal.season")
    table.add_column("Start", style="litcal.date", no_wrap=True)
    table.add_column("End", style="litcal.date", no_wrap=True)
    table.add_column("Days", justify="right")
    table.add_column("Color")
    for window in seasons:
        table.add_row(
            str(window.get("name", "")),
            str(window.get("start_date", "")),
            str(window.get("end_date", "")),
            str(window.get("days", "")),
            _color_text(window.get("color", "")),
        )
    return table


def _feast_table(feasts: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", style="litcal.date", no_wrap=True)
    table.add_column("Feast")
    table.add_column("Season", style="litcal.season")
    table.add_column("Color")
    if verbose:
        table.add_column("Rank", style="dim")
        table.add_column("Moveable", style="dim")
    for feast in feasts:
        row: list[Any] = [
            str(feast.get("date", "")),
            str(feast.get("name", "")),
            str(feast.get("season", "")),
            _color_text(feast.get("color", "")),
        ]
        if verbose:
            row.append(str(feast.get("rank", "")))
            row.append("yes" if feast.get("is_moveable") else "no")
        table.add_row(*row)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "litcal.error"), (f"  {result.op}", "litcal.op"), ": ", msg)
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Calendar renderers ────────────────────────────────────────────────


def _render_fields(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Scalar results: easter, cycle, season/proper lookups."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_liturgical_year(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    for key in (
        "year",
        "advent_year",
        "cycle",
        "advent1",
        "christmas",
        "epiphany",
        "ash_wednesday",
        "palm_sunday",
        "easter",
        "pentecost",
        "next_advent1",
    ):
        if key in d:
            _field(console, key, d[key])
    console.print(_season_table(d.get("seasons", [])))
    propers = d.get("ordinary_time", [])
    if propers:
        first, last = propers[0], propers[-1]
        console.print(
            f"  Ordinary Time: Proper {first['proper_number']} ({first['date']})"
            f" to Proper {last['proper_number']} ({last['date']})"
        )
    if verbose:
        console.print(_feast_table(d.get("feasts", []), verbose=True))
        _render_meta(console, result)


def _render_seasons(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(
        f"[bold]Liturgical year {d.get('liturgical_year')}[/bold]"
        f"  (Advent {d.get('advent_year')}, Year {d.get('cycle')})"
    )
    console.print(_season_table(d.get("seasons", [])))
    if verbose:
        _render_meta(console, result)


def _render_propers(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(f"[bold]Ordinary Time {d.get('liturgical_year')}[/bold]")
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Proper", style="litcal.proper", justify="right")
    table.add_column("Sunday", style="litcal.date", no_wrap=True)
    for entry in d.get("propers", []):
        table.add_row(str(entry.get("proper_number", "")), str(entry.get("date", "")))
    console.print(table)
    console.print(f"{d.get('count', 0)} Sundays")
    if verbose:
        _render_meta(console, result)


def _render_feasts(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(f"[bold]Feasts of {d.get('year')}[/bold]")
    console.print(_feast_table(d.get("feasts", []), verbose=verbose))
    if verbose:
        _render_meta(console, result)


def _render_day(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("date", "weekday", "liturgical_year", "cycle", "season", "color", "proper"):
        _field(console, key, d.get(key))
    for feast in d.get("feasts", []):
        _field(console, "feast", feast.get("name", ""))
    if verbose:
        _render_meta(console, result)


# ── Check / export renderers ──────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results with issues grouped by category."""
    issues = result.data.get("issues", [])
    count = result.data.get("count", len(issues))
    years = result.data.get("years_checked", 0)

    if count == 0:
        console.print(f"[litcal.ok]OK[/litcal.ok]  No issues found in {years} years.")
        if verbose:
            _render_meta(console, result)
        return

    by_category: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_category.setdefault(str(issue.get("category", "unknown")), []).append(issue)

    for cat, cat_issues in by_category.items():
        console.print(f"\n[bold]{cat}[/bold]")
        for issue in cat_issues:
            message = escape(str(issue.get("message", "")))
            console.print(f"  [litcal.error]{issue.get('year')}[/litcal.error]: {message}")

    console.print(f"\n{count} issues in {years} years")
    if verbose:
        _render_meta(console, result)


def _render_export_seasons(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    if "output_file" in d:
        _field(console, "output_file", d["output_file"])
    _field(console, "years", f"{d.get('start')}-{d.get('end')}")
    _field(console, "count", d.get("count", 0))
    if verbose or "output_file" not in d:
        console.print(_season_table(d.get("rows", [])))
    if verbose:
        _render_meta(console, result)


def _render_export_diff(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if d.get("in_sync"):
        console.print(
            f"[litcal.ok]OK[/litcal.ok]  Rows match {d.get('start')}-{d.get('end')}."
        )
        if verbose:
            _render_meta(console, result)
        return

    def _label(row: dict[str, Any]) -> str:
        return f"{row.get('liturgical_year')} {row.get('name')}"

    for section in ("missing", "unexpected"):
        rows = d.get(section, [])
        if rows:
            console.print(f"\n[bold]{section}[/bold]")
            for row in rows:
                console.print(f"  {escape(_label(row))}")
    mismatched = d.get("mismatched", [])
    if mismatched:
        console.print("\n[bold]mismatched[/bold]")
        for pair in mismatched:
            expected, actual = pair["expected"], pair["actual"]
            changed = [k for k, v in expected.items() if str(actual.get(k)) != str(v)]
            console.print(f"  {escape(_label(expected))}")
            for key in changed:
                console.print(f"    {key}: {escape(str(actual.get(key)))} -> {expected[key]}")

    console.print(f"\n{d.get('count', 0)} rows drifted")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Calendar
    "easter": _render_fields,
    "cycle": _render_fields,
    "season_for_date": _render_fields,
    "proper_for_date": _render_fields,
    "liturgical_year": _render_liturgical_year,
    "seasons": _render_seasons,
    "propers": _render_propers,
    "feasts": _render_feasts,
    "day": _render_day,
    # Check
    "check": _render_check,
    # Export
    "export_seasons": _render_export_seasons,
    "export_diff": _render_export_diff,
}
