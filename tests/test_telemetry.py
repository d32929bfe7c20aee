from __future__ import annotations

from contextlib import nullcontext
from typing import Any, Iterator, List, Optional, Tuple

import pytest

from virtual_editor.actions import Action
from virtual_editor.runtime import telemetry
from virtual_editor.runtime.telemetry import LogSettings


class FakeLogger:
    def __init__(self) -> None:
        self.messages: List[Tuple[str, str, Any]] = []
        self.context: dict[str, str] = {}
        self.profiled: List[str] = []
        self.components: List[str] = []

    def info_with(self, message: str, pairs: Any) -> None:
        self.messages.append(("info", message, pairs))

    def error_with(self, message: str, pairs: Any) -> None:
        self.messages.append(("error", message, pairs))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message, None))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    def profile(self, name: str) -> Any:
        self.profiled.append(name)
        return nullcontext()

    def track_component(self, name: str) -> Any:
        self.components.append(name)
        return nullcontext()


@pytest.fixture
def fake_logger(monkeypatch: pytest.MonkeyPatch) -> FakeLogger:
    logger = FakeLogger()
    monkeypatch.setattr(
        telemetry, "get_logger", lambda name=None: logger  # type: ignore[misc]
    )
    return logger


@pytest.fixture
def env_settings() -> Iterator[None]:
    yield
    telemetry.configure()


def test_settings_read_from_environment() -> None:
    settings = LogSettings.from_env(
        {
            "VIRTUAL_EDITOR_LOGGER": "replay",
            "VIRTUAL_EDITOR_LOG_LEVEL": "debug",
            "VIRTUAL_EDITOR_NO_COLOR": "yes",
            "VIRTUAL_EDITOR_LOG_FILE": "steps.log",
        }
    )

    assert settings == LogSettings(
        logger_name="replay", level="DEBUG", colored=False, log_file="steps.log"
    )
    assert LogSettings.from_env({}) == LogSettings()


def test_presets_layer_over_environment() -> None:
    environ = {"VIRTUAL_EDITOR_LOG_FILE": "replay.log"}

    production = telemetry.preset_settings("production", environ)
    development = telemetry.preset_settings("Development", {})

    assert production.log_file == "replay.log"
    assert production.console is False
    assert production.buffered is True
    assert telemetry.preset_settings("production", {}).log_file == "virtual_editor.log"
    assert development.level == "DEBUG"
    assert development.console is True


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.preset_settings("verbose-please")


def test_configure_rejects_settings_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(settings=LogSettings(), preset="development")


def test_configure_installs_settings(env_settings: None) -> None:
    chosen = LogSettings(level="WARNING", console=False)

    assert telemetry.configure(settings=chosen) is chosen
    assert telemetry.configure(preset="development").level == "DEBUG"


def test_step_fields_flatten_action_and_step() -> None:
    fields = telemetry.step_fields(
        Action("enter", "2"), 4, {"lines": ["a", ""], "count": 2}
    )

    assert fields == {
        "action": "enter",
        "value": "2",
        "step": "4",
        "lines": "['a', '']",
        "count": "2",
    }
    assert telemetry.step_fields() == {}


def test_record_event_attaches_step_pairs(fake_logger: FakeLogger) -> None:
    telemetry.record_event("action.applied", action=Action("tab", "1"), step=0)

    level, message, pairs = fake_logger.messages[0]
    assert level == "info"
    assert message == "event::action.applied"
    assert pairs == [("action", "tab"), ("value", "1"), ("step", "0")]


def test_record_event_falls_back_to_plain_method(fake_logger: FakeLogger) -> None:
    telemetry.record_event(
        "action.unrecognized", action=Action("mouse-click", "3"), level="WARNING"
    )

    level, message, pairs = fake_logger.messages[0]
    assert level == "warning"
    assert message.startswith("event::action.unrecognized")
    assert "mouse-click" in message
    assert pairs is None


def test_record_event_rejects_unknown_level(fake_logger: FakeLogger) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("x", level="shout")


def test_span_pushes_step_context_and_clears_it(fake_logger: FakeLogger) -> None:
    with telemetry.span(
        "editor::apply", component="editor", action=Action("enter", "1"), step=3
    ) as fields:
        assert fake_logger.context == {"action": "enter", "value": "1", "step": "3"}

    assert fields == {"action": "enter", "value": "1", "step": "3"}
    assert fake_logger.context == {}
    assert fake_logger.profiled == ["editor::apply"]
    assert fake_logger.components == ["editor"]


def test_span_without_component_skips_tracking(fake_logger: FakeLogger) -> None:
    with telemetry.span("frames::export", data={"actions": 2}):
        assert fake_logger.context == {"actions": "2"}

    assert fake_logger.components == []


def test_span_reports_failures_and_reraises(fake_logger: FakeLogger) -> None:
    failure: Optional[BaseException] = None
    try:
        with telemetry.span("frames::export", component="frames", step=1):
            raise RuntimeError("boom")
    except RuntimeError as exc:
        failure = exc

    assert failure is not None
    level, message, pairs = fake_logger.messages[-1]
    assert level == "error"
    assert message == "span::fail"
    assert ("reason", "boom") in pairs
    assert ("step", "1") in pairs
    assert ("component", "frames") in pairs
    assert fake_logger.context == {}
