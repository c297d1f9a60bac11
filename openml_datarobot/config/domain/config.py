"""LoaderConfig — settings describing where a DataRobot export keeps its model."""

from pydantic import BaseModel, Field


class LoaderConfig(BaseModel, frozen=True, extra="forbid"):
    """Root configuration for loading DataRobot models.

    The defaults match the layout of DataRobot's exported model archives:
    ``datarobot_prediction/dr<model id>/drmodel.py`` defining ``DRModel``.
    """

    schema_file_name: str = Field(default="schema.json", min_length=1)
    archive_extension: str = Field(default=".jar", pattern=r"^\.\w+$")
    package_prefix: str = Field(default="datarobot_prediction", min_length=1)
    module_name: str = Field(default="drmodel", pattern=r"^[A-Za-z_]\w*$")
    class_name: str = Field(default="DRModel", pattern=r"^[A-Za-z_]\w*$")
