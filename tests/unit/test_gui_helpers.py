from __future__ import annotations

import pytest

pytest.importorskip("PySide6.QtWidgets")

from quantumpass.generator import FormState, GenerationOutcome
from quantumpass.gui_qt import GenerateWorker, load_app_icon


def test_missing_icon_is_skipped(tmp_path, caplog):
    with caplog.at_level("WARNING"):
        assert load_app_icon(tmp_path / "icon.ico") is None
    assert "Failed to load icon" in caplog.text


def test_worker_emits_outcome():
    received = []

    def command(form):
        return GenerationOutcome(password="x" * int(form.length_text), message="xxx")

    worker = GenerateWorker(command, FormState("3"))
    worker.finished.connect(lambda outcome: received.append(outcome))
    worker.run()

    assert len(received) == 1
    assert received[0].password == "xxx"


def test_worker_turns_unexpected_error_into_outcome():
    received = []

    def command(form):
        raise RuntimeError("boom")

    worker = GenerateWorker(command, FormState("3"))
    worker.finished.connect(lambda outcome: received.append(outcome))
    worker.run()

    assert not received[0].ok
    assert "boom" in received[0].message
