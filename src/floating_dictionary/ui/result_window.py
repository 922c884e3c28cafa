"""Frameless popup that shows a finished lookup."""

from __future__ import annotations

import html
from typing import Optional

from PySide6.QtCore import QEvent, QTimer, Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from ..config import DisplayConfig
from ..core.models import CombinedTranslationData, ExampleItem, TranslationItem
from ..services.channel import ResultChannel

POLL_INTERVAL_MS = 50

_STYLE = """
QFrame#panel { background-color: rgba(28, 28, 32, 250); border-radius: 12px; }
QLabel { color: #e6e6e6; }
QLabel#heading { color: white; font-weight: bold; }
QLabel#section { color: #dcdcdc; font-weight: bold; text-decoration: underline; }
QScrollArea { background: transparent; border: none; }
"""


class ResultWindow(QWidget):
    """Polls a :class:`ResultChannel` and renders the result once it arrives."""

    def __init__(
        self,
        channel: ResultChannel[CombinedTranslationData],
        config: Optional[DisplayConfig] = None,
    ) -> None:
        super().__init__(None, Qt.Tool | Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint)
        self.config = config or DisplayConfig()
        self._channel = channel
        self._has_gained_focus = False
        self.data: Optional[CombinedTranslationData] = None

        self.setAttribute(Qt.WA_TranslucentBackground, True)
        # Tool windows default to not quitting the application when closed
        self.setAttribute(Qt.WA_QuitOnClose, True)
        self.setStyleSheet(_STYLE)
        font = QFont(self.config.font_family)
        font.setPointSize(self.config.font_size)
        self.setFont(font)

        panel = QFrame(self)
        panel.setObjectName("panel")
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(panel)

        self._content = QWidget()
        self._content_layout = QVBoxLayout(self._content)
        self._content_layout.setContentsMargins(16, 16, 16, 16)
        self._content_layout.setSpacing(6)
        self._content_layout.addWidget(self._make_label("Translating...", align=Qt.AlignCenter))

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._content)
        panel_layout = QVBoxLayout(panel)
        panel_layout.setContentsMargins(0, 0, 0, 0)
        panel_layout.addWidget(scroll)

        self.resize(self.config.width, 200)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._poll)
        self._timer.start(POLL_INTERVAL_MS)

    def _poll(self) -> None:
        data = self._channel.try_receive()
        if data is None:
            return
        self._timer.stop()
        self.show_result(data)

    def show_result(self, data: CombinedTranslationData) -> None:
        self.data = data
        self._clear()
        self._content_layout.addWidget(self._make_label(data.search_word, name="heading"))

        self._add_section(f"Google ({data.target_lang}):")
        self._content_layout.addWidget(self._make_label(f"• {data.google_translation}"))

        longdo = data.longdo_data
        if longdo is not None and longdo.translations:
            self._add_section("Longdo Dict:")
            for item in longdo.translations:
                self._content_layout.addWidget(self._make_label(self._format_translation(item), rich=True))
        if longdo is not None and longdo.examples:
            self._add_section("Example Sentences (Longdo):")
            for example in longdo.examples[: self.config.max_examples]:
                self._content_layout.addWidget(
                    self._make_label(self._format_example(example, data.source_lang, data.target_lang), rich=True)
                )
        self._content_layout.addStretch()
        self._fit_height()

    def _add_section(self, title: str) -> None:
        self._content_layout.addSpacing(8)
        self._content_layout.addWidget(self._make_label(title, name="section"))

    @staticmethod
    def _format_translation(item: TranslationItem) -> str:
        return (
            f"• <b style='color:#a0dcff'>{html.escape(item.word)}</b> "
            f"<i style='color:#b4b4b4'>[{html.escape(item.pos)}]</i><br/>"
            f"&nbsp;&nbsp;{html.escape(item.translation)} ({html.escape(item.dictionary)})"
        )

    @staticmethod
    def _format_example(example: ExampleItem, source_lang: str, target_lang: str) -> str:
        return (
            f"• <i style='color:#b4b4b4'>{html.escape(source_lang)}:</i> {html.escape(example.source)}<br/>"
            f"&nbsp;&nbsp;<i style='color:#b4b4b4'>-&gt; {html.escape(target_lang)}:</i> "
            f"{html.escape(example.target)}"
        )

    def _make_label(
        self, text: str, name: str = "", align=Qt.AlignLeft, rich: bool = False
    ) -> QLabel:
        label = QLabel(text)
        label.setTextFormat(Qt.RichText if rich else Qt.PlainText)
        label.setWordWrap(True)
        label.setAlignment(align)
        label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        if name:
            label.setObjectName(name)
        return label

    def _clear(self) -> None:
        while self._content_layout.count():
            item = self._content_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

    def _fit_height(self) -> None:
        self._content.adjustSize()
        height = min(self._content.sizeHint().height(), self.config.max_height)
        self.resize(self.width(), height)

    def changeEvent(self, event) -> None:  # type: ignore[override]
        if event.type() == QEvent.ActivationChange:
            if self.isActiveWindow():
                self._has_gained_focus = True
            elif self._has_gained_focus:
                self.close()
        super().changeEvent(event)


__all__ = ["ResultWindow"]
