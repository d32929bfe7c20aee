"""Step-oriented logging for the editor engine, built on telelog.

Events and spans describe a replay step: the action that ran and its
position in the script. Those fields travel as telelog key/value pairs on
events and as logger context inside spans.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, Iterator, Mapping, Optional, cast

import telelog  # type: ignore[import]

if TYPE_CHECKING:
    from virtual_editor.actions.models import Action

tl = cast(Any, telelog)

ENV_PREFIX = "VIRTUAL_EDITOR_"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class LogSettings:
    """What the engine asks of telelog, before it becomes a ``tl.Config``."""

    logger_name: str = "virtual_editor"
    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffered: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "LogSettings":
        def read(name: str) -> Optional[str]:
            return environ.get(ENV_PREFIX + name) or None

        def flag(name: str) -> bool:
            return (read(name) or "").lower() in _TRUTHY

        return cls(
            logger_name=read("LOGGER") or cls.logger_name,
            level=(read("LOG_LEVEL") or cls.level).upper(),
            console=not flag("DISABLE_CONSOLE"),
            colored=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
            log_file=read("LOG_FILE"),
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        return config


def preset_settings(
    preset: str, environ: Mapping[str, str] = os.environ
) -> LogSettings:
    """Settings for a named preset, layered over the environment."""

    base = LogSettings.from_env(environ)
    key = preset.lower()
    if key == "development":
        return replace(base, level="DEBUG", console=True, colored=True, json=False)
    if key == "production":
        return replace(
            base,
            level="INFO",
            console=False,
            log_file=base.log_file or "virtual_editor.log",
            buffered=True,
        )
    raise ValueError(f"Unknown preset '{preset}'.")


_settings: Optional[LogSettings] = None
_config: Optional[Any] = None
_loggers: Dict[str, Any] = {}


def configure(
    *, settings: Optional[LogSettings] = None, preset: Optional[str] = None
) -> LogSettings:
    """Install new settings and drop cached loggers.

    With neither argument the settings are re-read from ``VIRTUAL_EDITOR_*``
    environment variables.
    """

    global _settings, _config
    if settings is not None and preset is not None:
        raise ValueError("Pass either `settings` or `preset`, not both.")
    if preset is not None:
        settings = preset_settings(preset)
    elif settings is None:
        settings = LogSettings.from_env()

    _settings = settings
    _config = None
    _loggers.clear()
    return settings


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` called ``name``."""

    global _settings, _config
    if _settings is None:
        _settings = LogSettings.from_env()
    if _config is None:
        _config = _settings.to_config()

    key = name or _settings.logger_name
    if key not in _loggers:
        _loggers[key] = tl.Logger.with_config(key, _config)
    return _loggers[key]


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple, dict, set)):
        return repr(value)
    return str(value)


def step_fields(
    action: Optional["Action"] = None,
    step: Optional[int] = None,
    data: Optional[Mapping[str, Any]] = None,
) -> Dict[str, str]:
    """Flatten a step description into string key/value pairs."""

    fields: Dict[str, str] = {}
    if action is not None:
        fields["action"] = action.name
        fields["value"] = action.value
    if step is not None:
        fields["step"] = str(step)
    for key, value in (data or {}).items():
        fields[str(key)] = _text(value)
    return fields


def _emit(log: Any, level: str, message: str, fields: Dict[str, str]) -> None:
    level = level.lower()
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, list(fields.items()))
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {fields}")


def record_event(
    name: str,
    *,
    action: Optional["Action"] = None,
    step: Optional[int] = None,
    data: Optional[Mapping[str, Any]] = None,
    level: str = "info",
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with the step's fields attached."""

    _emit(
        get_logger(logger_name),
        level,
        f"event::{name}",
        step_fields(action, step, data),
    )


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    action: Optional["Action"] = None,
    step: Optional[int] = None,
    data: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[Dict[str, str]]:
    """Profile a block with the step's fields pushed as logger context.

    An exception escaping the block is logged as ``span::fail`` and
    re-raised.
    """

    log = get_logger(logger_name)
    fields = step_fields(action, step, data)
    with ExitStack() as stack:
        for key, value in fields.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield fields
        except Exception as exc:
            failure = {"span": name, **fields, "reason": str(exc)}
            if component:
                failure["component"] = component
            _emit(log, "error", "span::fail", failure)
            raise


__all__ = [
    "LogSettings",
    "configure",
    "get_logger",
    "preset_settings",
    "record_event",
    "span",
    "step_fields",
]
