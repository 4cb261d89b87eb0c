"""Text and links shown on a single WOD section card."""

from gritwit.wod.helpers import phase_class


def section_log_url(section_id, existing_log_id=None):
    """Link to the result logging page, editing the existing log when there is one."""
    if existing_log_id is not None:
        return f"/log?section_id={section_id}&edit_log={existing_log_id}"
    return f"/log?section_id={section_id}"


def log_button_label(existing_log_id=None):
    """Caption of the log button: update an existing result or log a new one."""
    if existing_log_id is None:
        return "Log Result"
    return "Update Result"


def section_badge_class(phase):
    """Full CSS class list of the phase badge."""
    return f"phase-badge {phase_class(phase)}"


def section_edit_values(title, time_cap_minutes, rounds, notes):
    """Initial texts of the section edit form: title, time cap, rounds, notes."""
    return (
        "" if title is None else title,
        "" if time_cap_minutes is None else str(time_cap_minutes),
        "" if rounds is None else str(rounds),
        "" if notes is None else notes,
    )