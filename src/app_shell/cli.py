import argparse
import logging
import sys

from src.adapters.clock import SystemClock
from src.adapters.dev_trip_server import InMemoryTripServer, InMemoryTripStorage
from src.app_shell.config import AppConfig, load_app_config
from src.components.calendar import DateRangeSelection, format_range, marked_dates, select_day
from src.components.invite import InviteSet, add_email
from src.components.trips import run_get_trip
from src.domain.entities import parse_day
from src.shell.screens import CreateTripScreen

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("cli")


def get_config() -> AppConfig:
    try:
        return load_app_config()
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid rules file: {e}")
        sys.exit(1)


def handle_range(config: AppConfig, args: argparse.Namespace) -> None:
    selection = DateRangeSelection()
    for raw in args.days:
        selection = select_day(selection, parse_day(raw))

    print(format_range(selection, config.calendar))
    for iso, style in marked_dates(selection).items():
        print(f"  {iso}  {style}")


def handle_invite(config: AppConfig, args: argparse.Namespace) -> None:
    invites = InviteSet()
    for raw in args.emails:
        result = add_email(invites, raw)
        if result.error is not None:
            print(f"rejected {raw!r}: {result.error.code}")
        invites = result.invites

    print(f"{len(invites)} guest(s) invited")
    for email in invites:
        print(f"  {email}")


def handle_plan(config: AppConfig, args: argparse.Namespace) -> None:
    server = InMemoryTripServer()
    screen = CreateTripScreen(
        clock=SystemClock(),
        config=config,
        server=server,
        storage=InMemoryTripStorage(),
    )

    screen.set_destination(args.destination)
    screen.open_calendar()
    screen.pick_day(parse_day(args.start))
    screen.pick_day(parse_day(args.end))
    screen.confirm_dates()

    step = screen.continue_()
    if step.error is not None:
        logger.error(step.error.message)
        sys.exit(1)

    for email in args.invite:
        result = screen.add_guest(email)
        if result.error is not None:
            logger.warning(f"Guest {email!r} skipped: {result.error.message}")

    ready = screen.continue_()
    if not ready.ready_to_submit:
        logger.error("Trip form is not ready to submit")
        sys.exit(1)

    created = screen.submit()
    if created.trip_id is None:
        logger.error(created.error.message if created.error else "Trip not created")
        sys.exit(1)

    overview = run_get_trip(created.trip_id, server, config.trips)
    print(f"Trip created: {created.trip_id}")
    print(f"When: {screen.dates_text}")
    print(f"Guests: {len(screen.invites)}")
    print(overview.headline)


def main() -> None:
    parser = argparse.ArgumentParser(description="Trip planner CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # range
    range_parser = subparsers.add_parser("range", help="Pick calendar days in order")
    range_parser.add_argument("days", nargs="+", help="ISO dates (yyyy-mm-dd)")

    # invite
    invite_parser = subparsers.add_parser("invite", help="Build a guest list")
    invite_parser.add_argument("emails", nargs="+", help="Guest emails")

    # plan
    plan_parser = subparsers.add_parser("plan", help="Create a trip against the dev server")
    plan_parser.add_argument("destination", help="Where to")
    plan_parser.add_argument("start", help="First day (yyyy-mm-dd)")
    plan_parser.add_argument("end", help="Last day (yyyy-mm-dd)")
    plan_parser.add_argument(
        "--invite", action="append", default=[], help="Guest email (repeatable)"
    )

    args = parser.parse_args()

    config = get_config()

    try:
        if args.command == "range":
            handle_range(config, args)
        elif args.command == "invite":
            handle_invite(config, args)
        elif args.command == "plan":
            handle_plan(config, args)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
