"""Command-line interface for weekly schedule validation and storage."""

from __future__ import annotations

import argparse

from weekplan.config import DEFAULT_DB_URL, load_config
from weekplan.data_io import payload_to_validation_input, read_payload
from weekplan.domain.db import get_session, init_database
from weekplan.domain.repositories import WeeklyScheduleRepository
from weekplan.editor import ScheduleEditor
from weekplan.io.export_csv import export_schedules_csv
from weekplan.services.submission import ScheduleValidationError, submit_schedule
from weekplan.timeslots import format_duration
from weekplan.validator import print_validation_report, summarize_schedule, validate_weekly_schedule


def _db_url(args: argparse.Namespace) -> str:
    if args.db:
        return args.db
    return load_config(getattr(args, "config", None)).db_url


def _cmd_init_db(args: argparse.Namespace) -> None:
    """Initialize the database."""
    init_database(_db_url(args))


def _cmd_validate(args: argparse.Namespace) -> None:
    """Validate a schedule payload JSON file."""
    payload = read_payload(args.file)
    candidate = payload_to_validation_input(payload)
    result = validate_weekly_schedule(candidate["scheduleData"], candidate["dailyNotes"])
    print_validation_report(result)
    if not result.is_valid:
        raise SystemExit(1)


def _cmd_summarize(args: argparse.Namespace) -> None:
    """Summarize a schedule payload JSON file."""
    print(summarize_schedule(read_payload(args.file)))


def _cmd_submit(args: argparse.Namespace) -> None:
    """Validate a schedule payload and persist it."""
    cfg = load_config(args.config)
    payload = read_payload(args.file)

    # The file itself is checked first: from_record skips days it cannot load
    candidate = payload_to_validation_input(payload)
    result = validate_weekly_schedule(candidate["scheduleData"], candidate["dailyNotes"])
    if not result.is_valid:
        for error in result.errors:
            print(f"[ERROR] {error}")
        raise SystemExit(1)

    editor = ScheduleEditor.from_record(payload, cfg.editor)
    session = get_session(args.db or cfg.db_url)

    try:
        submit_schedule(
            session,
            editor,
            employee_id=str(payload["employeeId"]),
            year=int(payload["year"]),
            week_number=int(payload["weekNumber"]),
            tz=cfg.timezone,
            record_id=int(payload["_id"]) if payload.get("_id") else None,
            updated_by=args.user,
        )
        session.close()
    except ScheduleValidationError as e:
        session.close()
        for error in e.errors:
            print(f"[ERROR] {error}")
        raise SystemExit(1)
    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Submission failed: {e}")
        raise


def _cmd_list_week(args: argparse.Namespace) -> None:
    """List approved schedules for a week."""
    session = get_session(_db_url(args))

    try:
        schedules = WeeklyScheduleRepository.get_by_week(session, args.year, args.week)
        print(f"[INFO] {len(schedules)} approved schedule(s) for {args.year}-W{args.week:02d}")
        for schedule in schedules:
            print(f"  {schedule.employee_id}: {format_duration(schedule.total_weekly_minutes)}")
        session.close()
    except Exception as e:
        session.close()
        print(f"[ERROR] Listing failed: {e}")
        raise


def _cmd_export(args: argparse.Namespace) -> None:
    """Export a week's schedules to CSV."""
    session = get_session(_db_url(args))

    try:
        count = export_schedules_csv(session, args.out, args.year, args.week)
        session.close()
        print(f"[OK] Exported {count} slots to {args.out}")
    except Exception as e:
        session.close()
        print(f"[ERROR] Export failed: {e}")
        raise


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="weekplan",
        description="Weekly employee schedules: validation, summaries and storage",
    )

    # Global options
    parser.add_argument("--db", help=f"Database URL (default: from config, {DEFAULT_DB_URL})")

    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init-db", help="Initialize database")
    init.add_argument("--config", help="Path to config YAML")
    init.set_defaults(func=_cmd_init_db)

    val = sub.add_parser("validate", help="Validate a schedule JSON file")
    val.add_argument("--file", required=True, help="Path to schedule payload JSON")
    val.set_defaults(func=_cmd_validate)

    summ = sub.add_parser("summarize", help="Summarize a schedule JSON file")
    summ.add_argument("--file", required=True, help="Path to schedule payload JSON")
    summ.set_defaults(func=_cmd_summarize)

    sbm = sub.add_parser("submit", help="Validate and store a schedule JSON file")
    sbm.add_argument("--file", required=True, help="Path to schedule payload JSON")
    sbm.add_argument("--config", help="Path to config YAML")
    sbm.add_argument("--user", help="Identifier of the submitting user")
    sbm.set_defaults(func=_cmd_submit)

    lst = sub.add_parser("list-week", help="List approved schedules for a week")
    lst.add_argument("--year", type=int, required=True)
    lst.add_argument("--week", type=int, required=True, help="ISO week number (1-53)")
    lst.add_argument("--config", help="Path to config YAML")
    lst.set_defaults(func=_cmd_list_week)

    exp = sub.add_parser("export", help="Export a week's schedules to CSV")
    exp.add_argument("--year", type=int, required=True)
    exp.add_argument("--week", type=int, required=True, help="ISO week number (1-53)")
    exp.add_argument("--out", required=True, help="Path to output CSV")
    exp.add_argument("--config", help="Path to config YAML")
    exp.set_defaults(func=_cmd_export)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
