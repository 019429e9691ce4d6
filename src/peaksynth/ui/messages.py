"""UI messages and status indicators."""

from __future__ import annotations

from .console import console, icon

__all__ = [
    "ConsoleReporter",
    "action",
    "error",
    "info",
    "show_header",
    "success",
    "warning",
]


def show_header(text: str) -> None:
    """Display a prominent section header."""
    console.print("[header]" + "━" * 60 + "[/header]")
    console.print(f"[header]  {text}[/header]")
    console.print("[header]" + "━" * 60 + "[/header]")


def success(message: str, indent: int = 0) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[success]{icon('check')}[/success] {message}")


def warning(message: str, indent: int = 0) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[warning]{icon('warn')}[/warning]  {message}")


def error(message: str, indent: int = 0) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[error]{icon('cross')}[/error] {message}")


def info(message: str, indent: int = 0) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[info]{message}[/info]")


def action(message: str, indent: int = 0) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[info]{icon('arrow')}[/info] {message}")


class ConsoleReporter:
    """Reporter printing to the shared Rich console."""

    def action(self, message: str) -> None:
        action(message)

    def info(self, message: str) -> None:
        info(message)

    def warning(self, message: str) -> None:
        warning(message)

    def error(self, message: str) -> None:
        error(message)

    def success(self, message: str) -> None:
        success(message)
