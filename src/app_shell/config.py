import os
from dataclasses import dataclass, field
from pathlib import Path

from src.components.calendar import CalendarConfig
from src.components.flow import TripFormConfig
from src.components.links import LinkConfig
from src.components.trips import TripsConfig
from src.rules.loader import load_rules
from src.rules.models import Rules

RULES_PATH_ENV = "TRIP_RULES_PATH"
DEFAULT_RULES_PATH = "rules.yaml"


@dataclass(frozen=True)
class AppConfig:
    """Per-component configuration derived from the rules file."""

    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    form: TripFormConfig = field(default_factory=TripFormConfig)
    links: LinkConfig = field(default_factory=LinkConfig)
    trips: TripsConfig = field(default_factory=TripsConfig)


def config_from_rules(rules: Rules) -> AppConfig:
    calendar = CalendarConfig(
        month_abbreviations=tuple(rules.calendar.month_abbreviations),
        date_joiner=rules.calendar.date_joiner,
        range_separator=rules.calendar.range_separator,
    )
    form = TripFormConfig(min_destination_length=rules.trip.min_destination_length)
    return AppConfig(
        calendar=calendar,
        form=form,
        links=LinkConfig(allowed_schemes=tuple(rules.links.allowed_schemes)),
        trips=TripsConfig(
            form=form,
            calendar=calendar,
            headline_max_destination_length=rules.trip.headline_max_destination_length,
        ),
    )


def rules_path_from_env() -> Path:
    return Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_PATH))


def load_app_config(path: Path | None = None) -> AppConfig:
    """
    Load the rules file and map it to component configuration.
    Raises FileNotFoundError / ValueError from the loader.
    """
    return config_from_rules(load_rules(path or rules_path_from_env()))
