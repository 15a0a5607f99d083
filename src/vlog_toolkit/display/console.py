"""Console output utilities using Rich."""

from typing import Optional
from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.theme import Theme

VLOG_THEME = Theme({
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red bold",
    "muted": "dim",
    "signal.name": "cyan bold",
    "signal.unit": "dim",
    "header": "bold blue",
})


class Console:
    """Themed console output for the log toolkit."""

    def __init__(self, rich_console: Optional[RichConsole] = None):
        self._console = rich_console or RichConsole(theme=VLOG_THEME)

    @property
    def rich_console(self) -> RichConsole:
        """Get the underlying Rich console."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        self._console.print(*args, **kwargs)

    def info(self, message: str, prefix: str = "INFO") -> None:
        """Print info message."""
        self._console.print(f"[info][{prefix}][/info] {message}")

    def success(self, message: str, prefix: str = "OK") -> None:
        """Print success message."""
        self._console.print(f"[success][{prefix}][/success] {message}")

    def warning(self, message: str, prefix: str = "WARN") -> None:
        """Print warning message."""
        self._console.print(f"[warning][{prefix}][/warning] {message}")

    def error(self, message: str, prefix: str = "ERROR") -> None:
        """Print error message."""
        self._console.print(f"[error][{prefix}][/error] {message}")

    def header(self, title: str, subtitle: Optional[str] = None) -> None:
        """Print a section header."""
        self._console.print()
        self._console.print(f"[header]{title}[/header]")
        if subtitle:
            self._console.print(f"[muted]{subtitle}[/muted]")
        self._console.print()

    def panel(self, content: str, title: Optional[str] = None, style: str = "cyan") -> None:
        """Print content in a panel."""
        self._console.print(Panel(content, title=title, style=style, expand=False))


# Global console instance
console = Console()
