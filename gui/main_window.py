"""
Main Window for Interview Calendar.

The primary application window with the calendar grid, navigation toolbar,
the disambiguation popover and the interview detail dialog.
"""

import sys
from datetime import date
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QToolBar, QPushButton, QLabel,
    QButtonGroup, QStatusBar, QMessageBox, QApplication, QSizePolicy
)
from PySide6.QtCore import Qt, QEvent, QObject, QRect
from PySide6.QtGui import QCloseEvent, QFont, QKeySequence, QShortcut

from backend.config import Config
from backend.date_range import CalendarDay, ViewMode
from backend.event_source import EventSource
from backend.network_worker import EventLoader
from backend.selection import AnchorPosition, Idle, Disambiguating, DetailShown, SelectionState
from backend.session import CalendarSession

from .widgets.calendar_widget import (
    CalendarWidget, set_layout_config, set_colors_config, set_labels_config
)
from .widgets.popover import DisambiguationPopover
from .detail_dialog import InterviewDetailDialog


class MainWindow(QMainWindow):
    """
    Main application window.

    Contains:
    - Toolbar with navigation, period label and view switching
    - Main calendar grid (day/week/month)
    - Popover and detail dialog driven by the session's selection state
    """

    def __init__(self, config: Config, parent=None):
        super().__init__(parent)
        self.config = config

        # Set module configs for the calendar widgets BEFORE creating UI
        set_layout_config(config.layout)
        set_colors_config(config.colors)
        set_labels_config(config.labels)

        self._interface_font = QFont(config.layout.interface_font, config.layout.interface_font_size)

        self.session = CalendarSession(
            anchor=config.initial_date or date.today(),
            view_mode=ViewMode(config.initial_view),
            localization=config.localization,
            month_cell_limit=config.layout.month_cell_limit
        )
        self.session.set_on_view_change_callback(self._render_view)
        self.session.set_on_selection_change_callback(self._render_selection)

        self._detail_dialog: Optional[InterviewDetailDialog] = None

        self._loader = EventLoader(EventSource(config.events.source, config.events.timeout), self)
        self._loader.events_loaded.connect(self._on_events_loaded)
        self._loader.load_failed.connect(self._on_load_failed)

        self._setup_window()
        self._setup_ui()
        self._setup_toolbar()
        self._setup_shortcuts()
        self._setup_statusbar()

        # Outside-click detection for the popover
        QApplication.instance().installEventFilter(self)

        self._render_view()
        self._initialize_data()

    def _setup_window(self):
        """Configure main window properties."""
        self.setWindowTitle(self.config.labels.window_title)
        self.setMinimumSize(800, 600)
        self.resize(1200, 800)

    def _setup_ui(self):
        """Set up the main UI layout."""
        main_widget = QWidget()
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)

        self._calendar_widget = CalendarWidget()
        self._calendar_widget.slot_clicked.connect(self._on_slot_clicked)
        main_layout.addWidget(self._calendar_widget)

        self.setCentralWidget(main_widget)

        # Overlay on top of everything in the window
        self._popover = DisambiguationPopover(
            self.config.layout, self.config.colors, self.config.labels, parent=self
        )
        self._popover.candidate_clicked.connect(self.session.click_candidate)

    def _setup_toolbar(self):
        """Set up the navigation toolbar."""
        labels = self.config.labels
        toolbar = QToolBar("Navigation")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        if toolbar.layout():
            toolbar.layout().setContentsMargins(8, 8, 8, 8)

        # === LEFT BLOCK: Navigation ===
        self._prev_btn = QPushButton(labels.button_prev)
        self._prev_btn.setFont(self._interface_font)
        self._prev_btn.setToolTip("Previous")
        self._prev_btn.clicked.connect(self.session.go_previous)
        toolbar.addWidget(self._prev_btn)

        self._next_btn = QPushButton(labels.button_next)
        self._next_btn.setFont(self._interface_font)
        self._next_btn.setToolTip("Next")
        self._next_btn.clicked.connect(self.session.go_next)
        toolbar.addWidget(self._next_btn)

        left_spacer = QWidget()
        left_spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        toolbar.addWidget(left_spacer)

        # === CENTER: Period label ===
        self._period_label = QLabel()
        period_font = QFont(self._interface_font)
        period_font.setBold(True)
        self._period_label.setFont(period_font)
        toolbar.addWidget(self._period_label)

        right_spacer = QWidget()
        right_spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        toolbar.addWidget(right_spacer)

        # === RIGHT BLOCK: View switcher ===
        self._view_group = QButtonGroup(self)
        self._view_group.setExclusive(True)
        self._view_buttons: dict[ViewMode, QPushButton] = {}
        for mode, text in (
            (ViewMode.DAY, labels.view_day),
            (ViewMode.WEEK, labels.view_week),
            (ViewMode.MONTH, labels.view_month),
        ):
            btn = QPushButton(text)
            btn.setFont(self._interface_font)
            btn.setCheckable(True)
            btn.setFlat(True)
            btn.setStyleSheet(
                "QPushButton { border: none; border-bottom: 3px solid transparent; padding: 5px 10px; }"
                f"QPushButton:checked {{ border-bottom: 3px solid {self.config.colors.view_button_active}; }}"
            )
            btn.clicked.connect(lambda checked=False, m=mode: self.session.set_view_mode(m))
            self._view_group.addButton(btn)
            toolbar.addWidget(btn)
            self._view_buttons[mode] = btn

    def _setup_shortcuts(self):
        """Set up keyboard shortcuts from config bindings."""
        prev_shortcut = QShortcut(QKeySequence(self.config.bindings.prev), self)
        prev_shortcut.activated.connect(self.session.go_previous)

        next_shortcut = QShortcut(QKeySequence(self.config.bindings.next), self)
        next_shortcut.activated.connect(self.session.go_next)

    def _setup_statusbar(self):
        """Set up the status bar."""
        self._statusbar = QStatusBar()
        self._statusbar.setFont(self._interface_font)
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage("Ready")

    # ==================== Data ====================

    def _initialize_data(self):
        """Start the one-time background load; the grid stays empty meanwhile."""
        self._statusbar.showMessage(self.config.labels.loading)
        self._loader.start()

    def _on_events_loaded(self, events: list):
        self.session.set_events(events)
        info = self._loader.source.get_info()
        if info.skipped_count:
            print(f"DEBUG: Skipped {info.skipped_count} malformed event records", file=sys.stderr)
        self._statusbar.showMessage(self.config.labels.loaded.format(len(events)), 3000)

    def _on_load_failed(self, error_message: str):
        self._statusbar.showMessage(error_message)
        QMessageBox.warning(
            self,
            self.config.labels.load_failed_title,
            self.config.labels.load_failed
        )

    # ==================== Rendering ====================

    def _render_view(self):
        """Redraw the grid and toolbar after anchor, view mode or events changed."""
        self._calendar_widget.set_grid(self.session.grid())
        self._period_label.setText(self.session.period_label())
        self._view_buttons[self.session.view_mode].setChecked(True)

    def _render_selection(self, state: SelectionState):
        """Show or hide popover and detail dialog to match state."""
        if isinstance(state, Idle):
            self._popover.dismiss()
            self._close_detail_dialog()
        elif isinstance(state, Disambiguating):
            self._close_detail_dialog()
            self._popover.show_state(state)
        elif isinstance(state, DetailShown):
            if state.origin is None:
                self._popover.dismiss()
            elif not self._popover.isVisible():
                self._popover.show_state(state.origin)
            self._open_detail_dialog(state)

    def _open_detail_dialog(self, state: DetailShown):
        self._close_detail_dialog()
        dialog = InterviewDetailDialog(state.event, self.config, self)
        dialog.finished.connect(lambda _result, d=dialog: self._on_detail_dialog_finished(d))
        self._detail_dialog = dialog
        dialog.open()

    def _close_detail_dialog(self):
        dialog = self._detail_dialog
        if dialog is None:
            return
        # Clear first so the finished handler does not report a close action
        self._detail_dialog = None
        dialog.close()
        dialog.deleteLater()

    def _on_detail_dialog_finished(self, dialog: InterviewDetailDialog):
        if dialog is not self._detail_dialog:
            return
        self._detail_dialog = None
        dialog.deleteLater()
        self.session.close_detail()

    # ==================== Interaction ====================

    def _on_slot_clicked(self, day: CalendarDay, hour: Optional[str], rect: QRect):
        anchor = AnchorPosition.beside(rect.top(), rect.left(), rect.width())
        self.session.click_slot(day, hour, anchor)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        """Report every mouse press to the session with its region membership."""
        if event.type() == QEvent.MouseButtonPress and isinstance(obj, QWidget):
            pos = event.globalPosition().toPoint()
            in_popover = self._popover.contains_global(pos)
            in_modal = self._detail_dialog is not None and self._detail_dialog.contains_global(pos)
            self.session.pointer_pressed(in_popover, in_modal)
        return super().eventFilter(obj, event)

    def closeEvent(self, event: QCloseEvent):
        """Handle window close."""
        QApplication.instance().removeEventFilter(self)
        self._loader.shutdown(wait=False)
        event.accept()
