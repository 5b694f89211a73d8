"""
Event Widgets for displaying interviews inside grid cells and popovers.

Cards are transparent for mouse events: clicks are handled by the cell or
popover entry that contains them.
"""

from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout, QHBoxLayout, QFrame, QSizePolicy
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from backend.config import LayoutConfig, ColorsConfig, LabelsConfig
from backend.event_model import InterviewEvent

# Module-level configs (set by MainWindow at startup via calendar_widget)
_layout_config: LayoutConfig = LayoutConfig()
_colors_config: ColorsConfig = ColorsConfig()
_labels_config: LabelsConfig = LabelsConfig()


def set_event_layout_config(config: LayoutConfig):
    """Set the layout configuration for event widgets."""
    global _layout_config
    _layout_config = config


def set_event_colors_config(config: ColorsConfig):
    """Set the colors configuration for event widgets."""
    global _colors_config
    _colors_config = config


def set_event_labels_config(config: LabelsConfig):
    """Set the labels configuration for event widgets."""
    global _labels_config
    _labels_config = config


def get_text_font() -> QFont:
    """Get the configured text font for events."""
    return QFont(_layout_config.text_font, _layout_config.text_font_size)


def _sanitize_text(text: str) -> str:
    """Convert line breaks to spaces for single-line display."""
    return ' '.join(text.split()) if text else text


class CountBadge(QLabel):
    """Round badge showing how many events share a cell."""

    def __init__(self, count: int, parent: QWidget = None):
        super().__init__(str(count), parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedSize(20, 20)
        font = QFont(get_text_font())
        font.setBold(True)
        font.setPointSize(max(6, font.pointSize() - 2))
        self.setFont(font)
        self.setStyleSheet(
            f"background-color: {_colors_config.badge_background};"
            f"color: {_colors_config.badge_text};"
            "border-radius: 10px;"
        )


class EventCard(QFrame):
    """
    Card for the first event of a Day/Week cell.

    Shows title, interviewer and time. When more than one event falls into
    the cell the card is tinted and carries a count badge.
    """

    def __init__(self, event: InterviewEvent, count: int = 1, parent: QWidget = None):
        super().__init__(parent)
        self.event_data = event
        self.count = count
        self._setup_ui()
        self._apply_style()

    def _setup_ui(self) -> None:
        self.setFont(get_text_font())
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 2, 6, 2)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignTop)

        title_font = QFont(get_text_font())
        title_font.setBold(True)

        title_row = QHBoxLayout()
        title_row.setSpacing(4)
        title = QLabel(_sanitize_text(self.event_data.title))
        title.setFont(title_font)
        title_row.addWidget(title, 1)
        if self.count > 1:
            title_row.addWidget(CountBadge(self.count, self), 0, Qt.AlignTop)
        layout.addLayout(title_row)

        layout.addWidget(QLabel(_labels_config.card_interviewer.format(self.event_data.interviewer)))
        layout.addWidget(QLabel(_labels_config.card_time.format(self.event_data.time_range)))

        self.setToolTip(
            f"<b>{self.event_data.title}</b><br>"
            f"{self.event_data.time_range}<br>"
            f"<i>{self.event_data.interviewer}</i>"
        )

    def _apply_style(self) -> None:
        colors = _colors_config
        bg = colors.card_background_busy if self.count > 1 else colors.card_background
        self.setStyleSheet(f"""
            EventCard {{
                background-color: {bg};
                border: 1px solid {colors.card_border};
                border-left: 12px solid {colors.card_accent};
                border-radius: 5px;
            }}
            QLabel {{
                background: transparent;
                border: none;
            }}
        """)


class MonthEventChip(QLabel):
    """Single-line event entry inside a Month cell."""

    def __init__(self, event: InterviewEvent, parent: QWidget = None):
        super().__init__(parent)
        self.event_data = event
        self.setFont(get_text_font())
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.setText(f"{event.start.strftime('%H:%M')} {_sanitize_text(event.title)}")
        self.setToolTip(
            f"<b>{event.title}</b><br>{event.time_range}<br><i>{event.interviewer}</i>"
        )
        self.setStyleSheet(
            f"background-color: {_colors_config.month_event_background};"
            f"color: {_colors_config.month_event_text};"
            "border-radius: 5px; padding: 1px 4px;"
        )
