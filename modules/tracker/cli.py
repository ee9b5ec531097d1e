"""Tracker CLI."""
import argparse
import logging
import sys
from datetime import date, datetime, time

from .config import reload_config
from .repository import TrackerRepository, week_name
from .serializer import default_document, write_document
from .service import (
    TrackerError,
    clock_in,
    clock_out,
    format_minutes,
    summarize,
    validate,
)

logger = logging.getLogger(__name__)

COMMANDS = ['init', 'show', 'start', 'stop', 'report', 'check', 'path', 'weeks']


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def _parse_time(value: str) -> time:
    try:
        return datetime.strptime(value, '%H:%M').time()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid time '{value}', expected HH:MM")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Weekly time tracking log',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py tracker init
  python cli.py tracker start
  python cli.py tracker stop --time 17:30
  python cli.py tracker report --date 2020-07-14
""",
    )
    parser.add_argument('command', choices=COMMANDS)
    parser.add_argument('--config', help='Config YAML (default: ~/.assistant/tracker.yml)')
    parser.add_argument('--date', type=_parse_date, help='Day to act on (YYYY-MM-DD, default: today)')
    parser.add_argument('--time', type=_parse_time, help='Clock time (HH:MM, default: now)')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def _print_report(document, config, now: datetime):
    summary = summarize(document, config.workday_hours, now=now)
    for day in summary.days:
        label = f"{day.date.strftime('%a')} {day.date.isoformat()}"
        if day.special_day:
            print(f"   {label}  {day.special_day}")
            continue
        line = f"   {label}  {format_minutes(day.worked_minutes):>6}"
        if day.special_minutes:
            line += f"  (+{format_minutes(day.special_minutes)} special)"
        if day.open_since:
            line += f"  ⏱️  since {day.open_since.strftime('%H:%M')}"
        print(line)
    print(f"   Worked:  {format_minutes(summary.worked_minutes)}")
    if summary.special_minutes:
        print(f"   Special: {format_minutes(summary.special_minutes)}")
    print(f"   Target:  {format_minutes(summary.target_minutes)}")
    print(f"   Balance: {format_minutes(summary.balance_minutes)}")


def run(args) -> int:
    config = reload_config(args.config)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose or config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    now = datetime.now()
    day = args.date or now.date()
    when = datetime.combine(day, args.time or now.time())
    repository = TrackerRepository.from_directory(config.data_path)
    logger.debug(f"Using data directory {config.data_path}")

    if args.command == 'path':
        print(repository.path_for(day))
        return 0

    if args.command == 'weeks':
        for name in repository.weeks():
            print(name)
        return 0

    if args.command == 'init':
        if repository.read_document(day) is not None:
            print(f"   {week_name(day)} already exists")
            return 0
        path = repository.save_document(day, default_document(day))
        print(f"✅ Created {path}")
        return 0

    if args.command == 'show':
        document = repository.read_document(day)
        if document is None:
            print(f"   No log for {week_name(day)}")
            return 0
        sys.stdout.write(write_document(document))
        return 0

    if args.command == 'start':
        document = clock_in(repository.load_document(day), when)
        repository.save_document(day, document)
        print(f"⏱️  Clocked in at {when.strftime('%H:%M')}")
        return 0

    if args.command == 'stop':
        document = clock_out(repository.load_document(day), when)
        repository.save_document(day, document)
        print(f"✅ Clocked out at {when.strftime('%H:%M')}")
        return 0

    if args.command == 'report':
        print(f"📊 {week_name(day)}")
        _print_report(repository.load_document(day), config, now)
        return 0

    if args.command == 'check':
        issues = validate(repository.load_document(day))
        for issue in issues:
            print(f"⚠️  {issue}")
        if issues:
            return 1
        print(f"✅ {week_name(day)} looks fine")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        exit_code = run(args)
    except (TrackerError, ValueError) as e:
        # FormatError and pydantic ValidationError are ValueErrors
        print(f"❌ {e}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
