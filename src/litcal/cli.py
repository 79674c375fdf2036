from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from litcal.core.errors import LitcalError
from litcal.core.time import parse_ymd
from litcal.core.types import CalendarDate, Proper


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_date(s: str) -> CalendarDate:
    return CalendarDate.from_date(parse_ymd(s))


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _engine(data: str):
    import litcal

    return litcal.make_engine(litcal.load_tables(data))


def _fmt_proper(p: Proper) -> str:
    color = f" [{p.color.value}]" if p.color is not None else ""
    return f"{p.type:>3}  {p.text}{color}"


def cmd_easter(argv: list[str]) -> int:
    from litcal.engines.season import ChurchYear

    p = argparse.ArgumentParser(prog="litcal easter", description="Easter and the movable anchors of a liturgical year")
    p.add_argument("year", type=int)
    p.add_argument("--anchors", action="store_true", help="also print the season anchors")
    args = p.parse_args(argv)

    cy = ChurchYear.of(args.year)
    print(f"Easter {args.year}: {cy.easter}")
    if args.anchors:
        print(f"  Advent 1       = {cy.advent}")
        print(f"  Christmas      = {cy.christmas}")
        print(f"  Epiphany       = {cy.epiphany}")
        print(f"  Ash Wednesday  = {cy.ash_wednesday}")
        print(f"  Palm Sunday    = {cy.holy_week}")
        print(f"  Pentecost      = {cy.pentecost}")
        print(f"  Next Advent 1  = {cy.next_advent}")
    return 0


def cmd_week(argv: list[str]) -> int:
    from litcal.engines.season import SeasonCalculator

    p = argparse.ArgumentParser(prog="litcal week", description="Gregorian date -> liturgical week key")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    res = SeasonCalculator().resolve_week(_parse_date(args.date))
    print(f"{args.date}  week={res.week_key}  sunday={res.observed_sunday}")
    return 0


def cmd_day(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="litcal day", description="Resolved propers, title and color of one day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--data", required=True, help="directory holding the JSON tables")
    args = p.parse_args(argv)

    eng = _engine(args.data)
    view = eng.view_day(_parse_date(args.date))
    color = view.color.value if view.color is not None else "none"

    print(f"{view.date} ({view.date.weekday_name})  week={view.week_key}  color={color}")
    print(f"Title: {view.title or '-'}")
    sections = (
        ("Lectionary", view.lectionary),
        ("Festivals", view.festivals),
        (f"Daily ({view.daily_title})", view.daily),
    )
    for label, propers in sections:
        if not propers:
            continue
        print(f"{label}:")
        for pr in propers:
            print(f"  {eng.catalog.name(pr.type)}: {_fmt_proper(pr)}")
    if view.commemoration is not None:
        print(f"Commemoration: {view.commemoration.text}")
    return 0


def cmd_month(argv: list[str]) -> int:
    from litcal.engines import day_view

    p = argparse.ArgumentParser(prog="litcal month", description="List the days of a Gregorian month with week keys and colors")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--data", required=True, help="directory holding the JSON tables")
    args = p.parse_args(argv)

    eng = _engine(args.data)
    grid = eng.build_month(args.year, args.month)
    print(f"{args.year}-{args.month:02d}  ({len(grid.weeks)} weeks)")
    for d in grid.days():
        color = day_view.day_color(d)
        title = day_view.day_title(d) or ""
        print(f"{d.date}  {d.date.weekday_name[:2]}  {str(d.week_key):<14} {(color.value if color else 'none'):<7} {title}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `litcal YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["week"] + argv

    p = argparse.ArgumentParser(prog="litcal", description="Liturgical calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("easter", help="Easter date (and season anchors) for a year")
    sub.add_parser("week", help="Gregorian date -> liturgical week key")
    sub.add_parser("day", help="Resolved propers of one day (needs --data)")
    sub.add_parser("month", help="Month listing with week keys and colors (needs --data)")

    # diagnostics
    sub.add_parser("easter-table", help="Print a table of Easter and movable anchors (diagnostics)")
    sub.add_parser("easter-scatter", help="Scatter plot of Easter dates (needs numpy, matplotlib)")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "easter": cmd_easter,
        "week": cmd_week,
        "day": cmd_day,
        "month": cmd_month,
    }
    tool_map = {
        "easter-table": "litcal.diagnostics.easter_table",
        "easter-scatter": "litcal.diagnostics.easter_scatter",
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd in tool_map:
            return _run_module_main(tool_map[args.cmd], rest)
    except LitcalError as e:
        raise SystemExit(f"litcal: {e}") from e

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
