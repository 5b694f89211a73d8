"""
Disambiguation popover listing interviews that share one exact time slot.

Candidates are stacked downwards from the anchor in their sequence order,
one entry per popover_spacing pixels.
"""

from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout, QFrame
from PySide6.QtCore import Qt, Signal, QPoint
from PySide6.QtGui import QFont, QMouseEvent

from backend.config import LayoutConfig, ColorsConfig, LabelsConfig
from backend.event_model import InterviewEvent
from backend.selection import Disambiguating


class CandidateEntry(QFrame):
    """One interview in the popover."""

    clicked = Signal(object)  # InterviewEvent

    ENTRY_WIDTH = 250

    def __init__(
        self,
        event: InterviewEvent,
        layout_config: LayoutConfig,
        colors: ColorsConfig,
        labels: LabelsConfig,
        parent: QWidget = None
    ):
        super().__init__(parent)
        self.event_data = event
        self._setup_ui(layout_config, colors, labels)

    def _setup_ui(self, layout_config: LayoutConfig, colors: ColorsConfig, labels: LabelsConfig):
        self.setFixedWidth(self.ENTRY_WIDTH)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(f"""
            CandidateEntry {{
                background-color: {colors.popover_background};
                border: 1px solid {colors.popover_border};
                border-radius: 8px;
            }}
            QLabel {{ background: transparent; border: none; }}
        """)

        text_font = QFont(layout_config.text_font, layout_config.text_font_size)
        title_font = QFont(text_font)
        title_font.setBold(True)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(3)

        event = self.event_data
        title = QLabel(event.title)
        title.setFont(title_font)
        layout.addWidget(title)

        details = QLabel(
            f"{event.summary}  |  {labels.card_interviewer.format(event.interviewer)}"
        )
        details.setFont(text_font)
        details.setWordWrap(True)
        details.setStyleSheet(f"color: {colors.secondary_text};")
        layout.addWidget(details)

        when = QLabel(
            f"{labels.popover_date.format(event.start.strftime('%d %b %Y'))}"
            f"  |  {labels.card_time.format(event.time_range)}"
        )
        when.setFont(text_font)
        when.setStyleSheet(f"color: {colors.secondary_text};")
        layout.addWidget(when)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.event_data)
            event.accept()
            return
        super().mousePressEvent(event)


class DisambiguationPopover(QWidget):
    """
    Floating candidate list, placed as an overlay child of the main window.

    Region membership for outside-click detection is answered by
    contains_global().
    """

    candidate_clicked = Signal(object)  # InterviewEvent

    def __init__(self, layout_config: LayoutConfig, colors: ColorsConfig, labels: LabelsConfig, parent: QWidget = None):
        super().__init__(parent)
        self._layout_config = layout_config
        self._colors = colors
        self._labels = labels
        self._entries: list[CandidateEntry] = []
        self.hide()

    def show_state(self, state: Disambiguating):
        """Rebuild the entries for state and show them at its anchor."""
        self._clear()
        parent = self.parentWidget()
        spacing = self._layout_config.popover_spacing
        origin = QPoint(state.anchor.left, state.anchor.top)
        if parent is not None:
            origin = parent.mapFromGlobal(origin)

        height = 0
        for index, event in enumerate(state.candidates):
            entry = CandidateEntry(event, self._layout_config, self._colors, self._labels, self)
            entry.clicked.connect(self.candidate_clicked.emit)
            entry.adjustSize()
            offset = state.anchor.for_candidate(index, spacing).top - state.anchor.top
            entry.move(0, offset)
            entry.show()
            self._entries.append(entry)
            height = max(height, offset + entry.height())

        self.setGeometry(origin.x(), origin.y(), CandidateEntry.ENTRY_WIDTH, height)
        self.show()
        self.raise_()

    def _clear(self):
        for entry in self._entries:
            entry.deleteLater()
        self._entries.clear()

    def dismiss(self):
        self._clear()
        self.hide()

    def contains_global(self, global_pos: QPoint) -> bool:
        """True when global_pos lies on one of the visible candidate entries."""
        if not self.isVisible():
            return False
        for entry in self._entries:
            if entry.rect().contains(entry.mapFromGlobal(global_pos)):
                return True
        return False
