"""Display labels and CSS classes for WOD phases, sections and workout types."""

_PHASE_LABELS = {
    "warmup": "Warm-Up",
    "strength": "Strength",
    "conditioning": "Conditioning",
    "cooldown": "Cool Down",
    "optional": "Optional",
    "personal": "Personal",
}

_SECTION_TYPE_LABELS = {
    "fortime": "For Time",
    "amrap": "AMRAP",
    "emom": "EMOM",
    "strength": "Strength",
}

_PHASE_CLASSES = {
    "warmup": "phase-badge--warmup",
    "strength": "phase-badge--strength",
    "conditioning": "phase-badge--conditioning",
    "cooldown": "phase-badge--cooldown",
    "optional": "phase-badge--optional",
    "personal": "phase-badge--personal",
}

_WOD_TYPE_LABELS = {
    "amrap": "AMRAP",
    "fortime": "FOR TIME",
    "emom": "EMOM",
    "tabata": "TABATA",
    "strength": "STRENGTH",
}

_WOD_TYPE_CLASSES = {
    "amrap": "wod-badge--amrap",
    "fortime": "wod-badge--fortime",
    "emom": "wod-badge--emom",
    "tabata": "wod-badge--tabata",
    "strength": "wod-badge--strength",
}


def phase_label(p: str) -> str:
    """Human-readable name of a section phase."""
    return _PHASE_LABELS.get(p, "Section")


def section_type_label(t: str) -> str:
    """Human-readable name of a section type, or an empty string."""
    return _SECTION_TYPE_LABELS.get(t, "")


def phase_class(p: str) -> str:
    """CSS modifier class for a phase badge."""
    return _PHASE_CLASSES.get(p, "")


def wod_type_label(t: str) -> str:
    """Upper-case badge text for a workout type."""
    return _WOD_TYPE_LABELS.get(t, "CUSTOM")


def wod_type_class(t: str) -> str:
    """CSS modifier class for a workout type badge."""
    return _WOD_TYPE_CLASSES.get(t, "wod-badge--custom")