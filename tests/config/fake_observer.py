"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, str]] = []
        self.defaults_used: list[str] = []

    def config_loaded(self, path: str, archive_extension: str) -> None:
        self.loaded.append({"path": path, "archive_extension": archive_extension})

    def config_defaults_used(self, path: str) -> None:
        self.defaults_used.append(path)
