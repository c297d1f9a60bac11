"""Locating the model file inside a model directory."""

from collections.abc import Collection
from pathlib import Path

from openml_datarobot.model.infrastructure.errors import ModelFileResolutionError

ARCHIVE_EXTENSION = ".jar"


def resolve_model_file(model_path: Path, excluded_names: Collection[str] = ()) -> Path:
    """
    Return the absolute path of the only model file in the directory model_path.

    Hidden files and files named in excluded_names (e.g. the schema file) are
    not candidates.

    Raises:
        ModelFileResolutionError: if model_path is not a directory, or it holds
            zero or several candidate files.
    """
    if not model_path.is_dir():
        raise ModelFileResolutionError(model_path, reason="not a directory")

    candidates = sorted(
        entry
        for entry in model_path.iterdir()
        if entry.is_file()
        and not entry.name.startswith(".")
        and entry.name not in excluded_names
    )

    if not candidates:
        raise ModelFileResolutionError(model_path, reason="directory has no model file")
    if len(candidates) > 1:
        names = ", ".join(c.name for c in candidates)
        raise ModelFileResolutionError(
            model_path, reason=f"expected one model file, found: {names}"
        )
    return candidates[0].absolute()


def is_archive_file(model_file: Path, extension: str = ARCHIVE_EXTENSION) -> bool:
    return model_file.suffix.lower() == extension.lower()
