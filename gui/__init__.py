"""
Interview Calendar GUI Module

PySide6-based graphical interface for the calendar application.
"""

from .main_window import MainWindow
from .detail_dialog import InterviewDetailDialog

__all__ = ['MainWindow', 'InterviewDetailDialog']
