"""Hint labels, a selection widget, actions and configuration for copying text from tmux panes."""

__version__ = "0.10.0"