"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, archive_extension: str) -> None:
        self._log.info("config.loaded", path=path, archive_extension=archive_extension)

    def config_defaults_used(self, path: str) -> None:
        self._log.warning(
            "config.defaults_used",
            path=path,
            message="Config file is empty, using default loader settings",
        )
