"""
Calendar Widget with Day, Week, and Month views.

The widgets only render a CalendarGrid produced by the session; all event
placement happens in backend.slots.
"""

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel,
    QScrollArea, QFrame, QStackedWidget
)
from PySide6.QtCore import Qt, Signal, QPoint, QRect
from PySide6.QtGui import QFont, QMouseEvent

from backend.config import LayoutConfig, ColorsConfig, LabelsConfig
from backend.date_range import CalendarDay, ViewMode
from backend.slots import CalendarGrid, SlotCell
from .event_widget import (
    EventCard, MonthEventChip,
    set_event_layout_config, set_event_colors_config, set_event_labels_config
)

# Module-level configs (set by MainWindow at startup)
_layout_config: LayoutConfig = LayoutConfig()
_colors_config: ColorsConfig = ColorsConfig()

# Month grid flows days left to right, seven per row
MONTH_COLUMNS = 7


def set_layout_config(config: LayoutConfig):
    """Set the layout configuration for this module and event widget."""
    global _layout_config
    _layout_config = config
    set_event_layout_config(config)


def set_colors_config(config: ColorsConfig):
    """Set the colors configuration for this module and event widget."""
    global _colors_config
    _colors_config = config
    set_event_colors_config(config)


def get_colors_config() -> ColorsConfig:
    """Get the current colors configuration."""
    return _colors_config


def set_labels_config(config: LabelsConfig):
    """Set the labels configuration for the event widgets."""
    set_event_labels_config(config)


def get_interface_font() -> QFont:
    """Get the configured interface font."""
    return QFont(_layout_config.interface_font, _layout_config.interface_font_size)


def _clear_layout(layout: QGridLayout):
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()


class SlotCellWidget(QFrame):
    """
    One grid cell.

    Day/Week cells draw the first event card; Month cells draw the day
    number and up to the configured number of event chips. A click on a
    non-empty cell emits clicked with the cell's global bounding box.
    """

    clicked = Signal(object, object, QRect)  # CalendarDay, hour or None, global rect

    def __init__(self, cell: SlotCell, parent=None):
        super().__init__(parent)
        self.cell = cell
        self._setup_ui()

    def _setup_ui(self):
        colors = get_colors_config()
        self.setStyleSheet(
            f"SlotCellWidget {{ background-color: {colors.cell_background};"
            f" border: 1px solid {colors.cell_border}; }}"
        )
        if not self.cell.is_empty:
            self.setCursor(Qt.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(2)

        if self.cell.hour is None:
            self.setFixedHeight(_layout_config.month_cell_height)
            number = QLabel(str(self.cell.day.date.day))
            number_font = get_interface_font()
            number_font.setBold(True)
            number.setFont(number_font)
            number.setAlignment(Qt.AlignHCenter | Qt.AlignTop)
            layout.addWidget(number)
            for event in self.cell.visible_events:
                layout.addWidget(MonthEventChip(event, self))
            layout.addStretch()
        else:
            self.setFixedHeight(_layout_config.cell_height)
            first = self.cell.first_event
            if first is not None:
                layout.addWidget(EventCard(first, self.cell.count, self))

    def global_rect(self) -> QRect:
        return QRect(self.mapToGlobal(QPoint(0, 0)), self.size())

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton and not self.cell.is_empty:
            self.clicked.emit(self.cell.day, self.cell.hour, self.global_rect())
            event.accept()
            return
        super().mousePressEvent(event)


class DayHeader(QLabel):
    """Column header showing 'dd MMM' above the weekday name."""

    def __init__(self, day: CalendarDay, parent=None):
        super().__init__(f"{day.label}\n{day.name}", parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFont(get_interface_font())
        self.setStyleSheet(f"background: {get_colors_config().header_background}; padding: 6px;")


class TimeLabel(QLabel):
    """Hour label in the time column."""

    def __init__(self, hour: str, parent=None):
        super().__init__(hour, parent)
        colors = get_colors_config()
        font = get_interface_font()
        font.setBold(True)
        self.setFont(font)
        self.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.setFixedSize(_layout_config.time_column_width, _layout_config.cell_height)
        self.setStyleSheet(
            f"color: {colors.time_label}; background: {colors.time_column_background};"
            f" border: 1px solid {colors.cell_border}; padding-left: 10px;"
        )


class TimeGridView(QWidget):
    """Day and Week views: a time column plus one column per visible day."""

    slot_clicked = Signal(object, object, QRect)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        content = QWidget()
        self._grid_layout = QGridLayout(content)
        self._grid_layout.setContentsMargins(0, 0, 0, 0)
        self._grid_layout.setSpacing(0)
        self._scroll.setWidget(content)
        main_layout.addWidget(self._scroll)

    def set_grid(self, grid: CalendarGrid):
        _clear_layout(self._grid_layout)

        corner = QLabel()
        corner.setFixedWidth(_layout_config.time_column_width)
        corner.setStyleSheet(f"background: {get_colors_config().time_column_background};")
        self._grid_layout.addWidget(corner, 0, 0)

        for col, day in enumerate(grid.days, start=1):
            self._grid_layout.addWidget(DayHeader(day), 0, col)
            self._grid_layout.setColumnStretch(col, 1)

        for row, (hour, cells) in enumerate(zip(grid.hours, grid.rows), start=1):
            self._grid_layout.addWidget(TimeLabel(hour), row, 0)
            for col, cell in enumerate(cells, start=1):
                widget = SlotCellWidget(cell)
                widget.clicked.connect(self.slot_clicked.emit)
                self._grid_layout.addWidget(widget, row, col)

        self._grid_layout.setRowStretch(len(grid.hours) + 1, 1)


class MonthGridView(QWidget):
    """Month view: every day of the month in a seven-column grid."""

    slot_clicked = Signal(object, object, QRect)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        content = QWidget()
        self._grid_layout = QGridLayout(content)
        self._grid_layout.setContentsMargins(0, 0, 0, 0)
        self._grid_layout.setSpacing(0)
        for col in range(MONTH_COLUMNS):
            self._grid_layout.setColumnStretch(col, 1)
        self._scroll.setWidget(content)
        main_layout.addWidget(self._scroll)

    def set_grid(self, grid: CalendarGrid):
        _clear_layout(self._grid_layout)

        for i, cell in enumerate(grid.cells()):
            widget = SlotCellWidget(cell)
            widget.clicked.connect(self.slot_clicked.emit)
            self._grid_layout.addWidget(widget, i // MONTH_COLUMNS, i % MONTH_COLUMNS)

        rows = (len(grid.cells()) + MONTH_COLUMNS - 1) // MONTH_COLUMNS
        self._grid_layout.setRowStretch(rows, 1)


class CalendarWidget(QWidget):
    """Main calendar widget switching between the time grid and the month grid."""

    slot_clicked = Signal(object, object, QRect)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._stack = QStackedWidget()
        self._time_view = TimeGridView()
        self._month_view = MonthGridView()
        self._time_view.slot_clicked.connect(self.slot_clicked.emit)
        self._month_view.slot_clicked.connect(self.slot_clicked.emit)

        self._stack.addWidget(self._time_view)
        self._stack.addWidget(self._month_view)
        layout.addWidget(self._stack)

    def set_grid(self, grid: CalendarGrid):
        if grid.mode == ViewMode.MONTH:
            self._month_view.set_grid(grid)
            self._stack.setCurrentWidget(self._month_view)
        else:
            self._time_view.set_grid(grid)
            self._stack.setCurrentWidget(self._time_view)
