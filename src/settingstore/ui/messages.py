"""UI messages and status indicators."""

from __future__ import annotations

from .console import console, icon

__all__ = ["error", "info", "success", "warning"]


def success(message: str, indent: int = 0) -> None:
    """Display a success message."""
    spaces = "  " * indent
    console.print(f"{spaces}[success]{icon('check')}[/success] {message}")


def warning(message: str, indent: int = 0) -> None:
    """Display a warning message."""
    spaces = "  " * indent
    console.print(f"{spaces}[warning]{icon('warn')}[/warning]  {message}")


def error(message: str, indent: int = 0) -> None:
    """Display an error message."""
    spaces = "  " * indent
    console.print(f"{spaces}[error]{icon('error')}[/error] {message}")


def info(message: str, indent: int = 0) -> None:
    """Display an info message."""
    spaces = "  " * indent
    console.print(f"{spaces}[dim]{icon('info')}[/dim] {message}")
