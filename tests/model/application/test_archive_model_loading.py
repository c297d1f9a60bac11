"""End-to-end tests loading real model archives through DataRobotModelLoader."""

import shutil
from pathlib import Path

import pytest

from openml_datarobot.config.domain.config import LoaderConfig
from openml_datarobot.core.errors import ModelLoadingError
from openml_datarobot.model.application.loader import DataRobotModelLoader
from openml_datarobot.model.domain.errors import UnsupportedModelVersionError
from openml_datarobot.model.infrastructure.archive_loader import ArchivePredictorFactory
from openml_datarobot.schema.infrastructure.json_loader import JsonSchemaLoader
from tests.model.fake_archive import (
    INCOMPLETE_MODEL_SOURCE,
    LEGACY_MODEL_SOURCE,
    write_model_archive,
)
from tests.model.fake_observer import FakeModelLoadingObserver

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _model_dir(tmp_path: Path, source: str | None = None) -> Path:
    model_dir = tmp_path / "fraud_model"
    model_dir.mkdir()
    shutil.copy(FIXTURES / "boolean_model" / "schema.json", model_dir / "schema.json")
    if source is None:
        write_model_archive(model_dir / "model.jar")
    else:
        write_model_archive(model_dir / "model.jar", source=source)
    return model_dir


def _loader(observer: FakeModelLoadingObserver) -> DataRobotModelLoader:
    config = LoaderConfig()
    return DataRobotModelLoader(
        predictor_factory=ArchivePredictorFactory(config=config),
        schema_loader=JsonSchemaLoader(schema_file_name=config.schema_file_name),
        observer=observer,
        config=config,
    )


class TestArchiveModelLoading:
    def test_boolean_model_loads_against_lowercase_schema(self, tmp_path: Path) -> None:
        model_dir = _model_dir(tmp_path)
        loader = _loader(FakeModelLoadingObserver())

        schema = loader.load_schema(model_path=model_dir)
        with loader.load_model(model_path=model_dir, schema=schema) as model:
            assert model.target_values.nominal_values == ("False", "True")
            assert model.first_class_is_positive is False

    def test_closing_model_releases_archive_module(self, tmp_path: Path) -> None:
        model_dir = _model_dir(tmp_path)
        loader = _loader(FakeModelLoadingObserver())

        model = loader.load_model(model_path=model_dir, schema=loader.load_schema(model_dir))
        model.close()

        assert model.closed is True

    def test_legacy_archive_is_rejected(self, tmp_path: Path) -> None:
        model_dir = _model_dir(tmp_path, source=LEGACY_MODEL_SOURCE)
        observer = FakeModelLoadingObserver()
        loader = _loader(observer)

        with pytest.raises(UnsupportedModelVersionError):
            loader.load_model(model_path=model_dir, schema=loader.load_schema(model_dir))

        assert len(observer.loading_failed) == 1

    def test_archive_missing_predictor_method_is_reported(self, tmp_path: Path) -> None:
        model_dir = _model_dir(tmp_path, source=INCOMPLETE_MODEL_SOURCE)
        observer = FakeModelLoadingObserver()
        loader = _loader(observer)

        with pytest.raises(ModelLoadingError) as exc_info:
            loader.load_model(model_path=model_dir, schema=loader.load_schema(model_dir))

        assert "get_string_predictors" in str(exc_info.value)
        assert len(observer.loading_failed) == 1
        assert observer.loading_completed == []
