"""Console telemetry: colored progress on a rich Console, mirrored to the `flock` logger."""

import logging

from rich.console import Console


class ProjectTelemetry:
    """TelemetryPort implementation used by the CLI."""

    def __init__(self, name: str, color: str, tagline: str) -> None:
        self.name = name
        self.color = color
        self.tagline = tagline
        self.console = Console(highlight=False)
        self.error_console = Console(stderr=True, highlight=False)
        self.logger = logging.getLogger("flock")
        # Messages already reach the console; the logger only feeds attached handlers.
        self.logger.propagate = False
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def handshake(self) -> None:
        self.console.print(f"[bold {self.color}]{self.name}[/] {self.tagline}")
        self.logger.info("%s %s", self.name, self.tagline)

    def step(self, message: str) -> None:
        self.console.print(message, style="yellow", markup=False)
        self.logger.info(message)

    def success(self, message: str) -> None:
        self.console.print(message, style="green", markup=False)
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.error_console.print(message, style="red", markup=False)
        self.logger.error(message)

    def warning(self, message: str) -> None:
        self.console.print(message, style="magenta", markup=False)
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.console.print(message, style="dim", markup=False)
        self.logger.debug(message)

    def instructions(self, title: str, lines: list[str]) -> None:
        self.console.print()
        self.console.print(title, style="cyan", markup=False)
        for line in lines:
            self.console.print(line, markup=False)
        self.console.print()
