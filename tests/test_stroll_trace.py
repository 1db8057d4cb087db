"""Tests for the stroll-trace command line script."""

import importlib.util
import logging
import os
import sys

import pytest

import logging_config

SCRIPT_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'bin', 'stroll-trace.py')


@pytest.fixture
def trace_script():
    spec = importlib.util.spec_from_file_location("stroll_trace", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def trace_log(monkeypatch, test_config_manager, tmp_path):
    """Route script logging to a temp file and restore the root logger afterwards."""
    log_file = tmp_path / "logs" / "stroll.log"
    test_config_manager.set_setting("logging", "file", str(log_file))
    monkeypatch.setattr(logging_config, "config", test_config_manager)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield log_file
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestStrollTrace:
    """Tests for running the trace script end to end."""

    def test_prints_frames_and_logs_summary(self, trace_script, trace_log, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", [
            "stroll-trace.py", "--viewport", "100x100", "--image", "100x100",
            "--mode", "sweep", "--zoom", "2", "--speed", "0.1", "--frames", "3", "--fps", "1",
        ])

        assert trace_script.main() == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Scaled size: 200.0x200.0, pannable: True"
        assert len(lines) == 4
        assert "x=    -40.00" in lines[1]

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Traced 3 frames at 1.0 fps" in trace_log.read_text()

    def test_rejects_non_positive_fps(self, trace_script, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["stroll-trace.py", "--image", "100x100", "--fps", "0"])
        assert trace_script.main() == 1
        assert "fps must be positive" in capsys.readouterr().out
