from __future__ import annotations

import argparse
from typing import Callable, List, Tuple

from litcal.core.types import CalendarDate
from litcal.engines.season import ChurchYear


COLUMNS: List[Tuple[str, Callable[[ChurchYear], CalendarDate]]] = [
    ("Advent1", lambda cy: cy.advent),
    ("AshWed", lambda cy: cy.ash_wednesday),
    ("Palm", lambda cy: cy.holy_week),
    ("Easter", lambda cy: cy.easter),
    ("Pentecost", lambda cy: cy.pentecost),
]


def mmdd(d: CalendarDate) -> str:
    return d.mmdd


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Easter and the movable anchors for a range of liturgical years."
    )
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2040)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=3,
        help="After the table, list the Easters that fall in this Gregorian month (default: 3=March).",
    )
    args = p.parse_args(argv)

    def fmt(d: CalendarDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in COLUMNS]
    colw = [5] + [max(10 if args.dates == "iso" else 6, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[CalendarDate] = []

    for Y in range(Y0, Y1 + 1):
        cy = ChurchYear.of(Y)
        row = [str(Y).ljust(colw[0])]
        for (_, get), w in zip(COLUMNS, colw[1:]):
            row.append(fmt(get(cy)).ljust(w))
        print("  ".join(row))
        if cy.easter.month == args.list_month:
            hits.append(cy.easter)

    print(f"\nEaster occurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0
    for d in sorted(hits):
        print(d.isoformat())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
