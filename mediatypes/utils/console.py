"""Colorful console logging for the mediatypes command line."""

import logging
import re
import sys
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "mediatypes.models": COLORS["bright_cyan"],
    "mediatypes.utils.parser": COLORS["bright_blue"],
    "mediatypes.services.probe": COLORS["bright_magenta"],
    "mediatypes.services": COLORS["cyan"],
    "mediatypes.config": COLORS["green"],
    "mediatypes.cli": COLORS["yellow"],
    "default": COLORS["white"],
}

# Matches "type/subtype" tokens such as "application/vnd.api+json"
MEDIA_TYPE_PATTERN = re.compile(r"\b([a-z]+/[0-9a-z][0-9a-z!#$&\-^_.+]*)", re.IGNORECASE)

PACKAGE_PREFIX = "mediatypes."


class ColorfulFormatter(logging.Formatter):
    """Log formatter with fixed-width columns and media type highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        """Get color for a logger name/component."""
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d}"

    def _format_level(self, record: logging.LogRecord) -> str:
        """Format log level with color and fixed width."""
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        """Format component/logger name with color."""
        name = record.name
        if name.startswith(PACKAGE_PREFIX):
            name = name[len(PACKAGE_PREFIX) :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<18}", color)

    def _highlight_message(self, message: str) -> str:
        """Highlight media type strings in log messages."""
        if not self.use_colors or "/" not in message:
            return message
        return MEDIA_TYPE_PATTERN.sub(
            f"{COLORS['bright_cyan']}\\1{COLORS['reset']}",
            message,
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as "time | level | component | message"."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(level: str = "WARNING", use_colors: bool = True) -> None:
    """Attach a stderr handler with ColorfulFormatter to the mediatypes logger.

    Colors are disabled when stderr is not a TTY. Calling this again only
    updates the level.

    Args:
        level: Logging level name.
        use_colors: Whether to use ANSI colors.
    """
    if not sys.stderr.isatty():
        use_colors = False

    package_logger = logging.getLogger("mediatypes")
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False
