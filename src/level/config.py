"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, page_size=25)
    """

    # Error pages include tracebacks when True
    debug: bool = False

    # Logging
    log_level: str = "info"

    # Post listings
    page_size: int = 100  # Max posts returned per listing
