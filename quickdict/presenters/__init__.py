"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter
from .html_presenter import HtmlPresenter
from .null_presenter import NullPresenter

__all__ = ["ConsolePresenter", "HtmlPresenter", "NullPresenter"]
