"""Archive predictor factory — instantiates the DRModel packaged in a model archive."""

import importlib.util
import re
import zipfile
import zipimport
from pathlib import Path
from types import ModuleType

from openml_datarobot.config.domain.config import LoaderConfig
from openml_datarobot.model.domain.factory import LoadedPredictor
from openml_datarobot.model.infrastructure.adapter import DataRobotPredictorAdapter
from openml_datarobot.model.infrastructure.errors import PredictorInstantiationError

# Vendor methods the Predictor port calls on every loaded model.
_REQUIRED_METHODS = ("get_double_predictors", "get_string_predictors")


class ArchiveLoaderResource:
    """Holds the importer and module loaded from one archive.

    The module is never registered in ``sys.modules``, so releasing this
    resource drops the last references to the archive's code.
    """

    def __init__(self, importer: zipimport.zipimporter, module: ModuleType) -> None:
        self._importer: zipimport.zipimporter | None = importer
        self._module: ModuleType | None = module

    @property
    def closed(self) -> bool:
        return self._importer is None

    @property
    def module(self) -> ModuleType | None:
        return self._module

    def close(self) -> None:
        if self._importer is not None:
            self._importer.invalidate_caches()
        self._importer = None
        self._module = None


class ArchivePredictorFactory:
    """Creates predictors from DataRobot model archives.

    Satisfies the PredictorFactory protocol structurally. Each call loads a
    fresh, isolated copy of the archive's model module.
    """

    def __init__(self, config: LoaderConfig) -> None:
        self._config = config
        self._module_entry = re.compile(
            rf"^({re.escape(config.package_prefix)}/dr\w+)/"
            rf"{re.escape(config.module_name)}\.py$"
        )

    def create(self, model_file: Path) -> LoadedPredictor:
        """
        Load the model module from model_file and instantiate its model class.

        Raises:
            PredictorInstantiationError: if the file is not a zip archive, holds
                no (or more than one) model package, or the model class cannot
                be imported or constructed.
        """
        package_dir = self._find_package_dir(model_file=model_file)
        importer, module = self._load_module(
            model_file=model_file, package_dir=package_dir
        )

        model_class = getattr(module, self._config.class_name, None)
        if not isinstance(model_class, type):
            raise PredictorInstantiationError(
                model_file,
                reason=f"module '{package_dir}/{self._config.module_name}' has no"
                f" class '{self._config.class_name}'",
            )

        try:
            vendor_model = model_class()
        except Exception as exc:
            raise PredictorInstantiationError(
                model_file, reason=f"{self._config.class_name}() raised: {exc}"
            ) from exc

        missing = [
            name for name in _REQUIRED_METHODS if not callable(getattr(vendor_model, name, None))
        ]
        if missing:
            raise PredictorInstantiationError(
                model_file,
                reason=f"class '{self._config.class_name}' lacks methods: {', '.join(missing)}",
            )

        return LoadedPredictor(
            predictor=DataRobotPredictorAdapter(vendor_model=vendor_model),
            resource=ArchiveLoaderResource(importer=importer, module=module),
        )

    def _find_package_dir(self, model_file: Path) -> str:
        """Return the archive directory holding the model module, e.g. ``datarobot_prediction/dr5f3a``."""
        try:
            with zipfile.ZipFile(model_file) as archive:
                names = archive.namelist()
        except (OSError, zipfile.BadZipFile) as exc:
            raise PredictorInstantiationError(
                model_file, reason=f"not a readable archive: {exc}"
            ) from exc

        package_dirs = sorted(
            {match.group(1) for name in names if (match := self._module_entry.match(name))}
        )
        if not package_dirs:
            raise PredictorInstantiationError(
                model_file,
                reason=f"no '{self._config.package_prefix}/dr<id>/"
                f"{self._config.module_name}.py' entry in archive",
            )
        if len(package_dirs) > 1:
            raise PredictorInstantiationError(
                model_file,
                reason=f"several model packages in archive: {', '.join(package_dirs)}",
            )
        return package_dirs[0]

    def _load_module(
        self, model_file: Path, package_dir: str
    ) -> tuple[zipimport.zipimporter, ModuleType]:
        try:
            importer = zipimport.zipimporter(str(model_file / package_dir))
            spec = importer.find_spec(self._config.module_name)
            if spec is None or spec.loader is None:
                raise PredictorInstantiationError(
                    model_file,
                    reason=f"cannot import '{package_dir}/{self._config.module_name}'",
                )
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
        except PredictorInstantiationError:
            raise
        except Exception as exc:
            # Vendor code runs during exec_module, so any exception type can surface.
            raise PredictorInstantiationError(
                model_file, reason=f"importing model module failed: {exc}"
            ) from exc
        return importer, module
