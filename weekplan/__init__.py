"""Weekly employee schedule model: editing state, validation and storage.

Modules:
- days: the seven canonical weekday keys
- timeslots: HH:MM parsing, 15-minute options, durations and formatting
- editor: in-memory weekly schedule editing state and serialization
- validator: exhaustive pre-submission validation and summaries
- data_io: ISO week dates, JSON payload IO and pandas slot frames
- config: load and validate configuration (YAML or JSON)
- domain: SQLAlchemy models and repositories for stored schedules
- services: validate-then-persist submission
- engine: interface for schedule proposal services
- io: CSV export
- cli: command-line interface entrypoints
"""

__all__ = [
    "days",
    "timeslots",
    "editor",
    "validator",
    "data_io",
    "config",
    "domain",
    "services",
    "engine",
    "io",
    "cli",
]
