"""Structured JSON logging in the bunyan layout."""

import datetime
import json
import logging
import os
import socket

ENV_VAR = "GRITWIT_LOG"

_TRACE = 1
_OFF = logging.CRITICAL + 1

_LEVEL_NAMES = {
    "trace": _TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": _OFF,
}

_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

_MARKER = "_gritwit_global_subscriber"


def _bunyan_level(levelno):
    if levelno >= logging.CRITICAL:
        return 60
    if levelno >= logging.ERROR:
        return 50
    if levelno >= logging.WARNING:
        return 40
    if levelno >= logging.INFO:
        return 30
    if levelno >= logging.DEBUG:
        return 20
    return 10


class BunyanFormatter(logging.Formatter):
    """Formats each record as one bunyan-style JSON line."""

    def __init__(self, name):
        super().__init__()
        self.name = name
        self.hostname = socket.gethostname()

    def format(self, record):
        created = datetime.datetime.fromtimestamp(record.created, datetime.timezone.utc)
        entry = {
            "v": 0,
            "name": self.name,
            "msg": record.getMessage(),
            "level": _bunyan_level(record.levelno),
            "hostname": self.hostname,
            "pid": os.getpid(),
            "time": created.isoformat().replace("+00:00", "Z"),
            "target": record.name,
            "line": record.lineno,
            "file": record.pathname,
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _matches(target, logger_name):
    target = target.replace("::", ".")
    return logger_name == target or logger_name.startswith(target + ".")


class _EnvFilter(logging.Filter):
    """Level filter driven by comma-separated ``level`` / ``target=level`` directives."""

    def __init__(self, spec):
        super().__init__()
        self.default = logging.ERROR
        self.targets = {}
        for directive in (part.strip() for part in spec.split(",")):
            if not directive:
                continue
            target, sep, level_name = directive.rpartition("=")
            if sep:
                level = _LEVEL_NAMES.get(level_name.strip().lower())
                if level is not None and target.strip():
                    self.targets[target.strip()] = level
            elif directive.lower() in _LEVEL_NAMES:
                self.default = _LEVEL_NAMES[directive.lower()]
            else:
                self.targets[directive] = _TRACE

    def filter(self, record):
        threshold = self.default
        best = -1
        for target, level in self.targets.items():
            if len(target) > best and _matches(target, record.name):
                best = len(target)
                threshold = level
        return record.levelno >= threshold


def get_subscriber(name, env_filter, sink):
    """Build a handler writing bunyan JSON to ``sink``.

    The filter spec comes from the GRITWIT_LOG environment variable when it is
    set, otherwise from ``env_filter``.
    """
    spec = os.environ.get(ENV_VAR) or env_filter
    handler = logging.StreamHandler(sink)
    handler.setFormatter(BunyanFormatter(name))
    handler.addFilter(_EnvFilter(spec))
    return handler


def init_subscriber(subscriber):
    """Install ``subscriber`` on the root logger; only one may be installed."""
    root = logging.getLogger()
    if any(getattr(handler, _MARKER, False) for handler in root.handlers):
        raise RuntimeError("Failed to set subscriber")
    setattr(subscriber, _MARKER, True)
    root.addHandler(subscriber)
    root.setLevel(_TRACE)
    logging.captureWarnings(True)