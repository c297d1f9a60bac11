"""DataRobotModelLoader — validates and loads a DataRobot binary classification model."""

from collections.abc import Mapping
from pathlib import Path

from openml_datarobot.config.domain.config import LoaderConfig
from openml_datarobot.core.errors import ModelLoadingError
from openml_datarobot.model.domain.binary_model import ClassificationBinaryDataRobotModel
from openml_datarobot.model.domain.errors import (
    ModelParamsValidationError,
    SchemaFieldCountMismatchError,
    UnsupportedModelVersionError,
)
from openml_datarobot.model.domain.factory import LoadedPredictor, PredictorFactory
from openml_datarobot.model.domain.observer import ModelLoadingObserver
from openml_datarobot.model.domain.predictor import Predictor
from openml_datarobot.model.domain.target_values import reconcile_target_values
from openml_datarobot.model.infrastructure.errors import (
    ModelFileResolutionError,
    PredictorInstantiationError,
)
from openml_datarobot.model.infrastructure.file_resolver import (
    is_archive_file,
    resolve_model_file,
)
from openml_datarobot.schema.domain.loader import SchemaLoader
from openml_datarobot.schema.domain.schema import CategoricalValueSchema, DatasetSchema
from openml_datarobot.validation.application.validators import (
    base_load_validations,
    validate_categorical_schema,
    validate_model_in_dir,
)
from openml_datarobot.validation.domain.error import ParamValidationError

# This provider does not accept any load parameters.
_SUPPORTED_PARAMS: frozenset[str] = frozenset()


class DataRobotModelLoader:
    """Loads models exported by DataRobot and checks them against a DatasetSchema.

    The loader only sequences the work: reading the model file is delegated to
    the injected PredictorFactory and reading schemas to the SchemaLoader, so
    both can be swapped in tests without touching the checks done here.
    """

    def __init__(
        self,
        predictor_factory: PredictorFactory,
        schema_loader: SchemaLoader,
        observer: ModelLoadingObserver,
        config: LoaderConfig | None = None,
    ) -> None:
        self._predictor_factory = predictor_factory
        self._schema_loader = schema_loader
        self._observer = observer
        self._config = config if config is not None else LoaderConfig()

    def load_schema(self, model_path: Path) -> DatasetSchema:
        return self._schema_loader.load(model_path=model_path)

    def load_model(
        self,
        model_path: Path,
        schema: DatasetSchema,
        params: Mapping[str, str] | None = None,
    ) -> ClassificationBinaryDataRobotModel:
        """
        Load the model stored in the directory model_path.

        Emits observer events for the start, the outcome and any failure. No
        partially loaded model is ever returned: on failure the code loaded
        from the model file is released before the error propagates.

        Raises:
            ModelParamsValidationError: if validate_for_load reports problems.
            ModelFileResolutionError: if no single model file is found.
            PredictorInstantiationError: if the predictor cannot be created or fails
                while being checked.
            SchemaFieldCountMismatchError: if feature counts disagree.
            UnsupportedModelVersionError: if the model lacks target labels.
            TargetValuesMismatchError: if the target vocabularies disagree.
        """
        path_str = str(model_path)
        self._observer.model_loading_started(model_path=path_str)

        try:
            model = self._load(model_path=model_path, schema=schema, params=params or {})
        except ModelLoadingError as exc:
            self._observer.model_loading_failed(model_path=path_str, reason=str(exc))
            raise

        self._observer.model_loading_completed(
            model_path=path_str,
            first_class_is_positive=model.first_class_is_positive,
        )
        return model

    def validate_for_load(
        self,
        model_path: Path,
        schema: DatasetSchema,
        params: Mapping[str, str],
    ) -> list[ParamValidationError]:
        """Run every pre-flight check and return all problems found, in order."""
        errors: list[ParamValidationError] = []

        errors.extend(base_load_validations(schema, params, _SUPPORTED_PARAMS))
        errors.extend(validate_model_in_dir(model_path))

        categorical_error = validate_categorical_schema(schema)
        if categorical_error is not None:
            errors.append(categorical_error)

        errors.extend(self.validate_model_file_format(model_path))
        errors.extend(self.validate_target_is_binary(schema))

        return errors

    def validate_target_is_binary(self, schema: DatasetSchema) -> list[ParamValidationError]:
        target = schema.target_field_schema
        if target is None or not isinstance(target.value_schema, CategoricalValueSchema):
            return []
        if len(target.value_schema.nominal_values) != 2:
            return [
                ParamValidationError(
                    message="At the moment only binary classification models are supported"
                )
            ]
        return []

    def validate_model_file_format(self, model_path: Path) -> list[ParamValidationError]:
        try:
            model_file = self._resolve_model_file(model_path=model_path)
        except ModelFileResolutionError:
            return [ParamValidationError(message=f"Unable to find a model file in [{model_path}].")]

        extension = self._config.archive_extension
        if not is_archive_file(model_file, extension=extension):
            return [
                ParamValidationError(
                    message=f"Extension [{model_file.suffix}] of [{model_file}] not"
                    " recognized for a DataRobot model, the model should be exported"
                    f" in the [{extension}] extension."
                )
            ]
        return []

    def _resolve_model_file(self, model_path: Path) -> Path:
        return resolve_model_file(
            model_path, excluded_names=(self._config.schema_file_name,)
        )

    def _load(
        self,
        model_path: Path,
        schema: DatasetSchema,
        params: Mapping[str, str],
    ) -> ClassificationBinaryDataRobotModel:
        errors = self.validate_for_load(model_path=model_path, schema=schema, params=params)
        if errors:
            raise ModelParamsValidationError(errors=errors)

        model_file = self._resolve_model_file(model_path=model_path)
        loaded = self._predictor_factory.create(model_file=model_file)

        try:
            return self._build_model(
                model_path=model_path,
                model_file=model_file,
                schema=schema,
                loaded=loaded,
            )
        except ModelLoadingError:
            loaded.resource.close()
            raise
        except Exception as exc:
            loaded.resource.close()
            # Vendor predictor methods run here, so any exception type can surface.
            raise PredictorInstantiationError(
                model_file, reason=f"model predictor failed: {exc!r}"
            ) from exc

    def _build_model(
        self,
        model_path: Path,
        model_file: Path,
        schema: DatasetSchema,
        loaded: LoadedPredictor,
    ) -> ClassificationBinaryDataRobotModel:
        predictor = loaded.predictor
        self._check_field_count(
            model_path=model_path,
            model_file=model_file,
            schema=schema,
            predictor=predictor,
        )

        target_model_values = self._target_model_values(predictor=predictor)

        target = schema.target_field_schema
        # guaranteed by validate_for_load
        assert target is not None and isinstance(target.value_schema, CategoricalValueSchema)
        reconciliation = reconcile_target_values(
            schema_nominal_values=target.value_schema.nominal_values,
            target_model_values=target_model_values,
        )

        return ClassificationBinaryDataRobotModel(
            predictor=predictor,
            first_class_is_positive=reconciliation.first_value == target_model_values[0],
            model_path=model_path,
            schema=schema,
            target_values=reconciliation,
            resource=loaded.resource,
        )

    def _check_field_count(
        self,
        model_path: Path,
        model_file: Path,
        schema: DatasetSchema,
        predictor: Predictor,
    ) -> None:
        """Compare the model's feature count with the schema's, ignoring the target field."""
        model_fields = predictor.get_double_predictors() + predictor.get_string_predictors()
        self._observer.model_predictor_created(
            model_path=str(model_path),
            model_file=str(model_file),
            feature_count=len(model_fields),
        )

        schema_field_count = len(schema.field_schemas)
        if len(model_fields) != schema_field_count - 1:
            self._observer.model_field_count_mismatched(
                model_path=str(model_path),
                expected_fields=model_fields,
                provided_schema=schema.describe(),
            )
            raise SchemaFieldCountMismatchError(
                model_feature_count=len(model_fields),
                schema_field_count=schema_field_count,
            )

    def _target_model_values(self, predictor: Predictor) -> list[str]:
        if not predictor.has_target_labels():
            raise UnsupportedModelVersionError()
        return predictor.get_target_labels()
