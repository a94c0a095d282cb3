"""
Qt GUI for quantumpass.

A single window: length entry, three option checkboxes, Generate button,
password display with a copy button, and a link in the bottom-right corner.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, Qt, QThread, Signal, Slot
from PySide6.QtGui import QGuiApplication, QIcon
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from .errors import QuantumPassError
from .generator import AppContext, FormState, GeneratePasswordCommand, GenerationOutcome
from .logs import configure_logging

logger = logging.getLogger(__name__)


def load_app_icon(path: Path) -> Optional[QIcon]:
    """
    Best-effort icon load. Logs and returns None when the file is missing
    or Qt cannot decode it.
    """
    if not path.is_file():
        logger.warning("Failed to load icon: %s not found", path)
        return None
    icon = QIcon(str(path))
    if icon.isNull():
        logger.warning("Failed to load icon: %s is not a usable image", path)
        return None
    return icon


class GenerateWorker(QObject):
    """Runs one generate command off the UI thread."""

    finished = Signal(object)  # GenerationOutcome

    def __init__(self, command: GeneratePasswordCommand, form: FormState) -> None:
        super().__init__()
        self.command = command
        self.form = form

    @Slot()
    def run(self) -> None:
        try:
            outcome = self.command(self.form)
        except Exception as exc:  # noqa: BLE001
            # Anything outside the known taxonomy still must not kill the thread silently.
            logger.exception("Unexpected error while generating password")
            error = QuantumPassError(f"Unexpected error: {exc}")
            outcome = GenerationOutcome(error=error, message=str(error))
        self.finished.emit(outcome)


class GeneratorPanel(QWidget):
    """
    Controls + password display.
    """

    def __init__(self, context: AppContext, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.context = context
        self._thread: QThread | None = None
        self._worker: GenerateWorker | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 12)
        layout.setSpacing(10)

        layout.addLayout(self._build_options())
        layout.addLayout(self._build_password_row())
        layout.addStretch(1)
        layout.addLayout(self._build_footer())

    # -- groups --

    def _build_options(self) -> QVBoxLayout:
        layout = QVBoxLayout()
        layout.setSpacing(8)

        self.length_edit = QLineEdit()
        self.length_edit.setPlaceholderText("Enter password length (0-255)")
        self.length_edit.returnPressed.connect(self.on_generate_clicked)

        self.uppercase_check = QCheckBox("Start with Uppercase")
        self.special_check = QCheckBox("Include Special Characters")
        self.numbers_check = QCheckBox("Include Numbers")

        self.generate_button = QPushButton("Generate Password")
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate_clicked)

        layout.addWidget(self.length_edit)
        layout.addWidget(self.uppercase_check)
        layout.addWidget(self.special_check)
        layout.addWidget(self.numbers_check)
        layout.addWidget(self.generate_button)
        return layout

    def _build_password_row(self) -> QHBoxLayout:
        row = QHBoxLayout()

        self.password_label = QLabel("")
        self.password_label.setWordWrap(True)
        self.password_label.setTextInteractionFlags(Qt.TextSelectableByMouse)

        # Long passwords scroll instead of stretching the window
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.password_label)
        scroll.setFixedHeight(72)

        self.copy_button = QPushButton("\U0001F4CB")
        self.copy_button.setToolTip("Copy to clipboard")
        self.copy_button.clicked.connect(self.copy_to_clipboard)

        row.addWidget(scroll, 1)
        row.addWidget(self.copy_button)
        return row

    def _build_footer(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addStretch(1)

        link = QLabel(
            f'<a href="{self.context.link_url}">{self.context.link_text}</a>'
        )
        link.setOpenExternalLinks(True)
        link.setTextInteractionFlags(Qt.TextBrowserInteraction)
        row.addWidget(link)
        return row

    # -- actions --

    def current_form(self) -> FormState:
        return FormState(
            length_text=self.length_edit.text(),
            start_uppercase=self.uppercase_check.isChecked(),
            include_special=self.special_check.isChecked(),
            include_numbers=self.numbers_check.isChecked(),
        )

    def on_generate_clicked(self) -> None:
        # One request at a time; the button is re-enabled when it returns.
        if self._thread is not None:
            return

        self.generate_button.setEnabled(False)

        self._thread = QThread(self)
        self._worker = GenerateWorker(self.context.command, self.current_form())
        self._worker.moveToThread(self._thread)

        self._thread.started.connect(self._worker.run)
        self._worker.finished.connect(self._on_generation_finished)
        self._worker.finished.connect(self._thread.quit)
        self._worker.finished.connect(self._worker.deleteLater)
        self._thread.finished.connect(self._thread.deleteLater)

        self._thread.start()

    @Slot(object)
    def _on_generation_finished(self, outcome: GenerationOutcome) -> None:
        # Password on success, human-readable message otherwise
        self.password_label.setText(outcome.message)
        self.generate_button.setEnabled(True)
        self._thread = None
        self._worker = None

    def copy_to_clipboard(self) -> None:
        # Copies whatever is shown, same as the label.
        text = self.password_label.text()
        clipboard = QGuiApplication.clipboard()
        try:
            clipboard.setText(text)
        except Exception:
            # Windows clipboard can be temporarily locked by other apps
            self._show_error(
                "Could not copy to clipboard because another application is using it."
            )
            return
        QMessageBox.information(self, "Copied", "Password copied to clipboard!")

    def _show_error(self, message: str) -> None:
        msg = QMessageBox(self)
        msg.setWindowTitle("Error")
        msg.setIcon(QMessageBox.Critical)
        msg.setText(message)
        msg.exec()


class QuantumPassWindow(QMainWindow):
    def __init__(self, context: AppContext) -> None:
        super().__init__()
        self.context = context

        self.setWindowTitle(context.window_title)
        self.resize(600, 400)

        self._apply_base_style()

        self.generator_panel = GeneratorPanel(context)
        self.setCentralWidget(self.generator_panel)

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #05070c;
            }
            QWidget {
                color: #e5e7eb;
                background-color: #05070c;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QLabel {
                font-size: 10pt;
            }
            QLineEdit {
                border: 1px solid #1f2933;
                border-radius: 6px;
                padding: 6px 8px;
                background-color: #050810;
                selection-background-color: #38bdf8;
                selection-color: #f9fafb;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #0b1120;
                color: #e5e7eb;
                border: 1px solid #38bdf8;
            }
            QPushButton:hover {
                background-color: #020617;
            }
            QPushButton:disabled {
                color: #4b5563;
                border: 1px solid #1f2933;
            }
            QCheckBox {
                spacing: 6px;
            }
            QScrollArea {
                border: 1px solid #1f2933;
                border-radius: 6px;
            }
            """
        )


def main() -> None:
    configure_logging()
    app = QApplication(sys.argv)

    context = AppContext()
    icon = load_app_icon(context.icon_path)
    if icon is not None:
        app.setWindowIcon(icon)

    window = QuantumPassWindow(context)
    window.show()
    sys.exit(app.exec())
