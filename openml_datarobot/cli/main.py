"""CLI entrypoint for openml-datarobot — typer app with `validate` and `load` commands."""

import sys
from pathlib import Path

import structlog
import typer

from openml_datarobot.config.domain.config import LoaderConfig
from openml_datarobot.config.infrastructure.observer import StructlogConfigObserver
from openml_datarobot.config.infrastructure.yaml_loader import YamlConfigLoader
from openml_datarobot.core.errors import ModelLoadingError
from openml_datarobot.model.application.loader import DataRobotModelLoader
from openml_datarobot.model.infrastructure.archive_loader import ArchivePredictorFactory
from openml_datarobot.model.infrastructure.observer import StructlogModelLoadingObserver
from openml_datarobot.schema.infrastructure.json_loader import JsonSchemaLoader

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        # Logs go to stderr so command output on stdout stays parseable.
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _build_loader(config_path: Path | None) -> DataRobotModelLoader:
    config = LoaderConfig()
    if config_path is not None:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)

    return DataRobotModelLoader(
        predictor_factory=ArchivePredictorFactory(config=config),
        schema_loader=JsonSchemaLoader(schema_file_name=config.schema_file_name),
        observer=StructlogModelLoadingObserver(),
        config=config,
    )


_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Optional YAML file overriding loader settings"
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


@app.command()
def validate(
    model_dir: Path = typer.Argument(..., help="Directory holding the model and its schema"),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Report every problem that would prevent the model from loading."""
    _configure_structlog(log_format=log_format)
    try:
        loader = _build_loader(config_path=config_path)
        schema = loader.load_schema(model_path=model_dir)
    except ModelLoadingError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    errors = loader.validate_for_load(model_path=model_dir, schema=schema, params={})
    if errors:
        for error in errors:
            typer.echo(f"- {error.message}")
        raise typer.Exit(code=1)

    typer.echo(f"Model in [{model_dir}] is valid for loading.")


@app.command()
def load(
    model_dir: Path = typer.Argument(..., help="Directory holding the model and its schema"),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Load the model, check it against its schema and print what was found."""
    _configure_structlog(log_format=log_format)
    try:
        loader = _build_loader(config_path=config_path)
        schema = loader.load_schema(model_path=model_dir)
        with loader.load_model(model_path=model_dir, schema=schema) as model:
            predictor = model.predictor
            typer.echo(f"Model:             {model.model_path}")
            typer.echo(f"Numeric features:  {len(predictor.get_double_predictors())}")
            typer.echo(f"String features:   {len(predictor.get_string_predictors())}")
            typer.echo(f"Target values:     {', '.join(model.target_values.nominal_values)}")
            typer.echo(f"Model classes:     {', '.join(predictor.get_target_labels())}")
            typer.echo(f"First class is positive: {model.first_class_is_positive}")
    except ModelLoadingError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
