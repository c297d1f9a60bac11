"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str, archive_extension: str) -> None: ...

    def config_defaults_used(self, path: str) -> None: ...
