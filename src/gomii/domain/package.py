"""Package reference and deploy result models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

PACKAGE_SUFFIX = ".zip"

_FORBIDDEN_SUBSTRINGS = ("/", "\\", "\x00")
_FORBIDDEN_NAMES = {".", ".."}


class PackageRef(BaseModel):
    """A package identifier and the locations derived from it.

    The name is used verbatim: no escaping or normalization is applied when
    building the source URL or the destination path. Names that would move
    the destination out of the install directory are rejected.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Package identifier")

    @field_validator("name")
    @classmethod
    def reject_path_components(cls, value: str) -> str:
        if value in _FORBIDDEN_NAMES or any(
            part in value for part in _FORBIDDEN_SUBSTRINGS
        ):
            raise ValueError(
                "Package name must not contain path separators or be '.' or '..'"
            )
        return value

    @property
    def archive_name(self) -> str:
        return f"{self.name}{PACKAGE_SUFFIX}"

    def source_url(self, base_url: str) -> str:
        """Build ``<base_url>/packages/<name>.zip``."""
        return f"{base_url.rstrip('/')}/packages/{self.archive_name}"

    def destination_path(self, install_dir: Path) -> Path:
        """Build ``<install_dir>/<name>.zip``."""
        return Path(install_dir) / self.archive_name


class DeployResult(BaseModel):
    """Outcome of a successful deploy."""

    model_config = ConfigDict(frozen=True)

    package: str
    source_url: str
    destination_path: Path
    bytes_written: int = Field(ge=0)
