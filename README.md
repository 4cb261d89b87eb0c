# gritwit

Building blocks for a gym's workout-of-the-day (WOD) service: the date
arithmetic behind a Sunday-start week calendar, display labels and CSS
classes for workouts, sections and movements, parsing of form input,
validation and storage of uploaded workout videos, and JSON logging.

The package has no third-party dependencies.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Week calendar

`gritwit.wod.week_calendar` works on `YYYY-MM-DD` strings.

```python
from gritwit.wod.week_calendar import compute_week_dates, week_month_label, shift_date

today, week = compute_week_dates("2026-03-04", "2026-03-04")
# week is a list of seven dates, Sunday to Saturday, containing the anchor
label = week_month_label(week[0], week[-1])   # e.g. "March 2026" or "Feb / Mar 2026"
next_week_start = shift_date(week[-1], 1)
previous_week_start = shift_date(week[0], -7)
```

- `compute_week_dates(anchor, today=None)` uses `today` when `anchor` is
  empty; when `today` is not given it is `today_iso()`, the current local date.
- `parse_ymd` fills missing or unparsable parts with 2026, 1 and 1;
  `parse_year_month` with year 0 and month 1.
- `date_day_num("2026-03-04")` gives `"4"`.
- `week_month_label` raises `ValueError` for a month outside 1–12.
- `ymd_to_jdn` and `jdn_to_ymd` convert between dates and Julian day numbers.

## Labels and choices

`gritwit.wod.helpers` maps stored codes to display text and CSS classes:
`wod_type_label` / `wod_type_class` (unknown types show as `CUSTOM`),
`phase_label` (unknown phases show as `Section`), `phase_class` and
`section_type_label`.

`gritwit.wod.options` gives `phase_options()` and `section_type_options()`
as lists of `SelectOption(value, label)`, and `find_log_id(logged, section_id)`
picks the log id from a list of `(section_id, log_id)` pairs, or `None`.

`gritwit.wod.movements`:

- `format_weight(value)` writes a weight as the shortest plain decimal that
  reads back as the same single-precision number (`43.0` gives `"43"`).
- `movement_detail(rep_scheme, weight_male, weight_female)` builds a line
  such as `"21-15-9 - 43/29"`, or `None` when nothing is set.
- `movement_edit_values(...)` gives the initial texts of the edit form.

`gritwit.wod.section_card`:

- `section_log_url(section_id, existing_log_id=None)` gives
  `/log?section_id=...`, with `&edit_log=...` when a log exists.
- `log_button_label` gives `"Log Result"` or `"Update Result"`.
- `section_badge_class(phase)` gives the full badge class list.
- `section_edit_values(title, time_cap_minutes, rounds, notes)` gives the
  initial texts of the section edit form.

## Form input

`gritwit.wod.inputs` turns raw form strings into values:

- `optional_text` returns `None` for an empty string.
- `optional_int` parses a 32-bit signed integer; empty, malformed or
  out-of-range text gives `None`.
- `optional_float` parses a number rounded to single precision; empty or
  malformed text gives `None`.
- `parse_uuid` accepts simple, hyphenated, braced and `urn:uuid:` forms and
  raises `InputError` (a `ValueError`) otherwise.

## Video uploads

`gritwit.routes`:

- `health_check()` returns `HTTPStatus.OK`.
- `validate_video(filename, content_type, data)` checks, in order, that the
  content type starts with `video/`, that the extension is one of mp4, webm,
  mov, avi, m4v, that the data is at most 100 MB, and that it starts with an
  MP4/MOV, WebM/MKV or AVI signature (`is_valid_video_magic`). It returns the
  lower-cased extension or raises `UploadError`, which carries `status` (an
  `HTTPStatus`) and `message`.
- `upload_video(storage, fields, user_id)` takes a storage backend, an
  iterable of `UploadField(name, data, filename, content_type)` and the
  signed-in user's id. It raises `UploadError` with status 401 when
  `user_id` is `None` or not a UUID, stores the first field named `video`
  under a random UUID key, and returns `UploadResponse(url=...)`. A
  `StorageError` becomes a 500 `UploadError`; no `video` field is a 400.

```python
from gritwit.routes import UploadField, upload_video
from gritwit.storage import LocalStorage

field = UploadField("video", data=video_bytes, filename="clip.mp4", content_type="video/mp4")
response = upload_video(LocalStorage(), [field], user_id)
print(response.url)   # /videos/<uuid>.mp4
```

## Storage

`gritwit.storage.storage_from_config(backend, r2=None)` returns a
`LocalStorage` for any backend other than `"r2"`. `LocalStorage` writes
under `public/videos` (its `directory`) and returns `/videos/<key>`.

For `"r2"` it returns an `R2Storage` built from an `R2Config`
(`account_id`, `access_key`, `secret_key`, `bucket`, `public_url`); a
missing field raises `StorageError`. `R2Storage.upload` sends a signed
path-style PUT to `<account_id>.r2.cloudflarestorage.com`, stores the
object as `videos/<key>` and returns `<public_url>/videos/<key>`. Failures
raise `StorageError`.

## Logging

`gritwit.telemetry.get_subscriber(name, env_filter, sink)` returns a
`logging` handler that writes one Bunyan-style JSON line per record
(`BunyanFormatter`) to `sink`. Records are filtered by a spec of
comma-separated `level` and `target=level` directives (trace, debug, info,
warn, error, off), taken from the `GRITWIT_LOG` environment variable when it
is set and from `env_filter` otherwise. `init_subscriber(handler)` installs
it on the root logger; installing a second one raises `RuntimeError`.

```python
import sys
from gritwit.telemetry import get_subscriber, init_subscriber

init_subscriber(get_subscriber("gritwit", "info", sys.stdout))
```

## What it does not do

There is no web server, page rendering, database or sign-in here. Listing,
creating, editing and deleting WODs, sections and movements, and recording
results, are left to the application using these pieces; `upload_video`
trusts the `user_id` it is given and does not check that the user exists.