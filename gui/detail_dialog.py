"""
Detail dialog for a single interview.

Window-modal and read-only; closing it is the only way back to the
calendar. The JOIN button opens the meeting link in the default browser.
"""

from PySide6.QtWidgets import (
    QDialog, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame
)
from PySide6.QtCore import Qt, QUrl, QPoint
from PySide6.QtGui import QDesktopServices, QFont

from backend.config import Config
from backend.event_model import InterviewEvent


class InterviewDetailDialog(QDialog):
    """Shows who, what, when and how for one interview."""

    def __init__(self, event: InterviewEvent, config: Config, parent: QWidget = None):
        super().__init__(parent)
        self.event_data = event
        self.config = config
        self._setup_ui()

    def _setup_ui(self):
        labels = self.config.labels
        colors = self.config.colors
        event = self.event_data

        self.setWindowTitle(labels.detail_title)
        self.setWindowModality(Qt.WindowModal)
        self.setMinimumWidth(400)
        self.setFont(QFont(self.config.layout.text_font, self.config.layout.text_font_size + 1))

        main_layout = QVBoxLayout(self)

        close_row = QHBoxLayout()
        close_row.addStretch()
        self._close_btn = QPushButton(labels.button_close)
        self._close_btn.setFixedSize(28, 28)
        self._close_btn.setStyleSheet(
            f"background: {colors.join_button_background}; color: {colors.join_button_text};"
            " border: none; border-radius: 14px; font-size: 16px;"
        )
        self._close_btn.clicked.connect(self.reject)
        close_row.addWidget(self._close_btn)
        main_layout.addLayout(close_row)

        body = QFrame()
        body.setFrameStyle(QFrame.Box | QFrame.Plain)
        body_layout = QHBoxLayout(body)
        body_layout.setContentsMargins(16, 16, 16, 16)

        info = QVBoxLayout()
        info.setSpacing(8)
        na = labels.not_available
        info.addWidget(QLabel(labels.detail_interviewer.format(event.interviewer or na)))
        info.addWidget(QLabel(labels.detail_position.format(event.title or na)))
        info.addWidget(QLabel(labels.detail_date.format(event.start.strftime('%d %m %Y'))))
        info.addWidget(QLabel(labels.detail_time.format(event.time_range)))
        info.addWidget(QLabel(labels.detail_via))
        info.addStretch()
        body_layout.addLayout(info, 1)

        self._join_btn = QPushButton(labels.button_join)
        self._join_btn.setCursor(Qt.PointingHandCursor)
        self._join_btn.setStyleSheet(
            f"background: {colors.join_button_background}; color: {colors.join_button_text};"
            " border: none; border-radius: 4px; padding: 8px 16px;"
        )
        self._join_btn.setEnabled(bool(event.link))
        if event.link:
            self._join_btn.setToolTip(event.link)
        self._join_btn.clicked.connect(self._on_join)
        body_layout.addWidget(self._join_btn, 0, Qt.AlignTop)

        main_layout.addWidget(body)

    def _on_join(self):
        if self.event_data.link:
            QDesktopServices.openUrl(QUrl(self.event_data.link))

    def contains_global(self, global_pos: QPoint) -> bool:
        """True when global_pos lies on the dialog's content."""
        return self.isVisible() and self.rect().contains(self.mapFromGlobal(global_pos))
