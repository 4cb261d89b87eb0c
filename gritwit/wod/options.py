"""Choice lists for the WOD section forms and lookup of logged sections."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectOption:
    """One entry of a select box."""

    value: str
    label: str


_PHASES = (
    ("warmup", "Warm-Up"),
    ("strength", "Strength"),
    ("conditioning", "Conditioning"),
    ("cooldown", "Cool Down"),
    ("optional", "Optional"),
    ("personal", "Personal"),
)

_SECTION_TYPES = (
    ("fortime", "For Time"),
    ("amrap", "AMRAP"),
    ("emom", "EMOM"),
    ("strength", "Strength"),
    ("static", "Static"),
)


def phase_options():
    """Options for the section phase selector, in display order."""
    return [SelectOption(value, label) for value, label in _PHASES]


def section_type_options():
    """Options for the section type selector, in display order."""
    return [SelectOption(value, label) for value, label in _SECTION_TYPES]


def find_log_id(logged, section_id):
    """Workout log id of the first (section_id, log_id) pair for ``section_id``."""
    return next((log_id for sid, log_id in logged if sid == section_id), None)