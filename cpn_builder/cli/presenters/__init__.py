"""Presenters turning use-case responses into console output."""

from .summary import SummaryPresenter

__all__ = ["SummaryPresenter"]
