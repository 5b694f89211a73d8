"""
Configuration parser for Interview Calendar.

Handles TOML file parsing into typed configuration sections.
"""

import tomllib
import os
import sys
from datetime import date
from pathlib import Path
from dataclasses import dataclass, field, fields
from typing import Optional


# Sample list shipped next to the packages
DEFAULT_EVENTS_SOURCE = str(
    Path(__file__).resolve().parent.parent / "sample_data" / "calendarfromtoenddate.json"
)


class ConfigError(ValueError):
    """Raised when the configuration file contains invalid values."""


@dataclass
class EventsConfig:
    """Where the interview list is loaded from."""
    source: str = DEFAULT_EVENTS_SOURCE  # http(s) URL or local file path
    timeout: int = 30                    # Request timeout in seconds

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(('http://', 'https://'))


@dataclass
class LayoutConfig:
    """Configuration for UI layout and fonts."""
    interface_font: str = "Sans"
    interface_font_size: int = 11
    text_font: str = "Sans"
    text_font_size: int = 9
    cell_height: int = 60         # Height of an hour cell in day/week view in pixels
    month_cell_height: int = 100  # Height of a day cell in month view in pixels
    time_column_width: int = 80
    popover_spacing: int = 95     # Vertical offset between stacked popover candidates
    month_cell_limit: int = 3     # Events drawn per month cell


@dataclass
class BindingsConfig:
    """Configuration for keyboard bindings."""
    next: str = "Right"  # Key to go to next period
    prev: str = "Left"   # Key to go to previous period


@dataclass
class ColorsConfig:
    """Configuration for UI colors."""
    # Grid
    cell_background: str = "#ffffff"
    cell_border: str = "#efefef"
    time_column_background: str = "#f9f9f9"
    time_label: str = "#2586e0"
    header_background: str = "#f9f9f9"

    # Event cards
    card_background: str = "#ffffff"
    card_background_busy: str = "#d3e9ff"  # Cell holds more than one event
    card_accent: str = "#007bff"
    card_border: str = "#dddddd"
    badge_background: str = "#ffd700"
    badge_text: str = "#000000"

    # Month view
    month_event_background: str = "#007bff"
    month_event_text: str = "#ffffff"

    # Popover and detail dialog
    popover_background: str = "#ffffff"
    popover_border: str = "#e0e0e0"
    secondary_text: str = "#555555"
    join_button_background: str = "#006dbf"
    join_button_text: str = "#ffffff"
    view_button_active: str = "#007bff"


@dataclass
class LabelsConfig:
    """Configuration for UI labels."""
    window_title: str = "Interview Calendar"

    view_day: str = "Day"
    view_week: str = "Week"
    view_month: str = "Month"

    button_prev: str = "◀"
    button_next: str = "▶"

    card_interviewer: str = "Interviewer: {}"
    card_time: str = "Time: {}"

    popover_date: str = "Date: {}"

    detail_title: str = "Interview"
    detail_interviewer: str = "Interview With: {}"
    detail_position: str = "Position: {}"
    detail_date: str = "Date: {}"
    detail_time: str = "Time: {}"
    detail_via: str = "Interview Via: Google Meet"
    button_join: str = "JOIN"
    button_close: str = "×"
    not_available: str = "N/A"

    loading: str = "Loading events..."
    loaded: str = "Loaded {} events"
    load_failed_title: str = "Events"
    load_failed: str = "Unable to load events. Please try again later."


@dataclass
class LocalizationConfig:
    """Configuration for localized day and month names."""
    # Full weekday names, Monday first to match date.weekday()
    day_names: list[str] = None
    # Full month names, January first
    month_names: list[str] = None

    def __post_init__(self):
        if self.day_names is None:
            self.day_names = [
                "Monday", "Tuesday", "Wednesday", "Thursday",
                "Friday", "Saturday", "Sunday"
            ]
        if self.month_names is None:
            self.month_names = [
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December"
            ]

    def get_day_name(self, weekday: int) -> str:
        """Get localized day name for weekday (0=Monday, 6=Sunday)."""
        return self.day_names[weekday] if 0 <= weekday < len(self.day_names) else ""

    def get_month_name(self, month: int) -> str:
        """Get localized month name (1=January, 12=December)."""
        return self.month_names[month - 1] if 1 <= month <= len(self.month_names) else ""

    def get_month_abbr(self, month: int) -> str:
        """Three-letter month abbreviation used in short date labels."""
        return self.get_month_name(month)[:3]


def _section(cls, data: dict):
    """Build a section dataclass, taking each field from data when present."""
    kwargs = {f.name: data[f.name] for f in fields(cls) if f.name in data}
    return cls(**kwargs)


@dataclass
class Config:
    """Main configuration container for Interview Calendar."""

    initial_view: str = "Day"
    initial_date: Optional[date] = None  # None means today
    events: EventsConfig = field(default_factory=EventsConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    bindings: BindingsConfig = field(default_factory=BindingsConfig)
    localization: LocalizationConfig = field(default_factory=LocalizationConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    labels: LabelsConfig = field(default_factory=LabelsConfig)
    path: Optional[Path] = None

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'interview-calendar' / 'interview-calendar.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a TOML file.

        An explicitly given path must exist. When no path is given and the
        default file is absent, built-in defaults are used.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()
            if not config_path.exists():
                print(f"DEBUG: No config at {config_path}, using defaults", file=sys.stderr)
                return cls()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

        return cls.from_dict(data, path=config_path)

    @classmethod
    def from_dict(cls, data: dict, path: Optional[Path] = None) -> 'Config':
        """Build a Config from already parsed TOML data."""
        general = data.get('General', {})

        initial_view = general.get('initial_view', 'Day')
        if initial_view not in ('Day', 'Week', 'Month'):
            raise ConfigError(f"Unknown initial_view '{initial_view}' (expected Day, Week or Month)")

        initial_date = general.get('initial_date')
        if isinstance(initial_date, str):
            try:
                initial_date = date.fromisoformat(initial_date)
            except ValueError as e:
                raise ConfigError(f"Invalid initial_date '{initial_date}': {e}") from e
        elif initial_date is not None and not isinstance(initial_date, date):
            raise ConfigError(f"Invalid initial_date {initial_date!r}")

        events = _section(EventsConfig, data.get('Events', {}))
        # Relative file sources are resolved against the config file location
        if path is not None and not events.is_remote and not Path(events.source).is_absolute():
            events.source = str(path.parent / os.path.expanduser(events.source))

        # Localization names are space-separated strings
        localization_data = data.get('Localization', {})
        day_names_str = localization_data.get('day_names', '')
        month_names_str = localization_data.get('month_names', '')
        localization = LocalizationConfig(
            day_names=day_names_str.split() if day_names_str else None,
            month_names=month_names_str.split() if month_names_str else None
        )

        print(f"DEBUG: Events source: {events.source}", file=sys.stderr)

        return cls(
            initial_view=initial_view,
            initial_date=initial_date,
            events=events,
            layout=_section(LayoutConfig, data.get('Layout', {})),
            bindings=_section(BindingsConfig, data.get('Bindings', {})),
            localization=localization,
            colors=_section(ColorsConfig, data.get('Colors', {})),
            labels=_section(LabelsConfig, data.get('Labels', {})),
            path=path
        )
