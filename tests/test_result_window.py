"""Tests for the result popup lifecycle."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QTimer, Qt
from PySide6.QtWidgets import QApplication

from floating_dictionary.core.models import CombinedTranslationData
from floating_dictionary.services.channel import ResultChannel
from floating_dictionary.ui.result_window import ResultWindow

STUCK_EXIT_CODE = 99


@pytest.fixture(scope="module")
def qt_app() -> QApplication:
    app = QApplication.instance() or QApplication([])
    app.setQuitOnLastWindowClosed(True)
    return app


def test_closing_the_popup_ends_the_event_loop(qt_app: QApplication) -> None:
    channel: ResultChannel[CombinedTranslationData] = ResultChannel()
    window = ResultWindow(channel)

    assert window.testAttribute(Qt.WA_QuitOnClose)

    watchdog = QTimer()
    watchdog.setSingleShot(True)
    watchdog.timeout.connect(lambda: qt_app.exit(STUCK_EXIT_CODE))

    window.show()
    QTimer.singleShot(100, window.close)
    watchdog.start(2000)
    code = qt_app.exec()
    watchdog.stop()

    assert code == 0


def test_popup_renders_result_from_channel(qt_app: QApplication) -> None:
    channel: ResultChannel[CombinedTranslationData] = ResultChannel()
    window = ResultWindow(channel)
    data = CombinedTranslationData(
        search_word="hello",
        source_lang="EN",
        target_lang="TH",
        google_translation="สวัสดี",
    )

    channel.send(data)
    window._poll()

    assert window.data == data
    window.deleteLater()
