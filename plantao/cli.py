"""Command-line interface for generating and checking on-call calendars."""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from .config import load_config
from .data_io import read_calendar, read_holidays, read_roster, write_calendar
from .engine import generate_calendar_range
from .holidays import merge_holidays
from .validator import summarize_calendar, unassigned_coverage_days, validate_calendar


def _load_holidays(args: argparse.Namespace, cfg) -> list:
    national = read_holidays(args.holidays) if getattr(args, "holidays", None) else []
    return merge_holidays(national, cfg.custom_holidays())


def _month_index(value: int) -> int:
    if not 1 <= value <= 12:
        raise SystemExit(f"Month must be 1-12, got {value}")
    return value - 1


def _output_path(out: str, year: int, month: int, several: bool) -> Path:
    path = Path(out)
    if not several:
        return path
    return path.with_name(f"{path.stem}_{year:04d}-{month + 1:02d}{path.suffix or '.csv'}")


def _cmd_generate(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    if args.seed is not None:
        cfg.seed = args.seed

    if args.db:
        from .domain.db import get_session
        from .domain.repositories import HolidayRepository, StaffRepository

        session = get_session(args.db)
        try:
            roster = StaffRepository.load_roster(session)
            stored = HolidayRepository.load_holidays(session, year=args.year)
        finally:
            session.close()
        holidays = merge_holidays(_load_holidays(args, cfg), stored)
    else:
        if not args.staff:
            raise SystemExit("Either --staff or --db is required")
        roster = read_roster(args.staff, args.vacations)
        holidays = _load_holidays(args, cfg)

    if not roster:
        print("[WARN] Roster is empty; every day will be unassigned")

    start = _month_index(args.month)
    end = _month_index(args.end_month) if args.end_month else start
    calendars = generate_calendar_range(
        args.year, start, end, roster, holidays, rng=random.Random(cfg.seed), cfg=cfg
    )

    for month, days in calendars.items():
        out = _output_path(args.out, args.year, month, several=len(calendars) > 1)
        write_calendar(out, days)
        print(f"[OK] {args.year:04d}-{month + 1:02d} written to {out}")
        for day in unassigned_coverage_days(days, holidays):
            print(f"[WARN] {day.date.isoformat()} has no eligible staff")
        print(summarize_calendar(days, roster, holidays))


def _cmd_validate(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    roster = read_roster(args.staff, args.vacations)
    holidays = _load_holidays(args, cfg)
    days = read_calendar(args.calendar, roster)
    if not days:
        raise SystemExit(f"No days found in {args.calendar}")
    first = days[0].date
    validate_calendar(days, roster, holidays, year=first.year, month=first.month - 1)
    print("[OK] Validation passed.")


def _cmd_summarize(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    roster = read_roster(args.staff, args.vacations)
    holidays = _load_holidays(args, cfg)
    days = read_calendar(args.calendar, roster)
    print(summarize_calendar(days, roster, holidays))


def _cmd_init_db(args: argparse.Namespace) -> None:
    from .domain.db import init_database

    init_database(args.db)
    print(f"[OK] Database initialized: {args.db}")


def _cmd_import_csv(args: argparse.Namespace) -> None:
    from .domain.db import get_session
    from .io.import_csv import import_holidays_csv, import_staff_csv, import_vacations_csv

    session = get_session(args.db)
    try:
        counts = []
        if args.staff:
            counts.append(("staff", import_staff_csv(session, args.staff, commit=False)))
        if args.vacations:
            counts.append(("vacations", import_vacations_csv(session, args.vacations, commit=False)))
        if args.holidays:
            counts.append(("holidays", import_holidays_csv(session, args.holidays, commit=False)))
        session.commit()
        for what, n in counts:
            print(f"[OK] Imported {n} {what}")
    except Exception as e:
        session.rollback()
        print(f"[ERROR] Import failed: {e}")
        raise
    finally:
        session.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="plantao", description="On-call calendar generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate the on-call calendar for a month")
    g.add_argument("--year", type=int, required=True)
    g.add_argument("--month", type=int, required=True, help="1-12")
    g.add_argument("--end-month", type=int, help="Generate every month up to this one (1-12)")
    g.add_argument("--staff", help="Staff CSV (id,name)")
    g.add_argument("--vacations", help="Vacations CSV (staff_id,start_date,end_date)")
    g.add_argument("--holidays", help="Holidays CSV (date,name[,type])")
    g.add_argument("--db", help="Read roster and custom holidays from this database URL")
    g.add_argument("--config", help="Config YAML/JSON")
    g.add_argument("--seed", type=int, help="Fix the roster shuffle")
    g.add_argument("--out", required=True)
    g.set_defaults(func=_cmd_generate)

    for name, helptext, func in (
        ("validate", "Validate a calendar CSV", _cmd_validate),
        ("summarize", "Summarize a calendar CSV", _cmd_summarize),
    ):
        p = sub.add_parser(name, help=helptext)
        p.add_argument("--calendar", required=True)
        p.add_argument("--staff", required=True)
        p.add_argument("--vacations")
        p.add_argument("--holidays")
        p.add_argument("--config")
        p.set_defaults(func=func)

    i = sub.add_parser("init-db", help="Initialize the roster database")
    i.add_argument("--db", default="sqlite:///plantao.db")
    i.set_defaults(func=_cmd_init_db)

    m = sub.add_parser("import-csv", help="Import staff, vacations or holidays into the database")
    m.add_argument("--db", default="sqlite:///plantao.db")
    m.add_argument("--staff")
    m.add_argument("--vacations")
    m.add_argument("--holidays")
    m.set_defaults(func=_cmd_import_csv)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
