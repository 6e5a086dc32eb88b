"""Store options and the conventional settings file layout."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from settingstore.core.constants import (
    DEFAULT_ENCODING,
    DEFAULT_INDENT,
    DIRECTORY_NAME,
    FILE_SUFFIX,
)
from settingstore.core.shared.exceptions import ConfigError


class StoreOptions(BaseModel):
    """Options shared by every JsonStore of a host application.

    Settings files live under ``<root>/<directory_name>/<name><file_suffix>``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    directory_name: str = Field(
        default=DIRECTORY_NAME,
        min_length=1,
        description="Directory under the application root holding settings files.",
    )
    file_suffix: str = Field(default=FILE_SUFFIX, description="Suffix of settings files.")
    indent: Annotated[int, Field(ge=0, le=8)] = Field(
        default=DEFAULT_INDENT,
        description="Indentation used when writing JSON (0 writes compact JSON).",
    )
    encoding: str = Field(default=DEFAULT_ENCODING, description="Text encoding of settings files.")

    @field_validator("file_suffix")
    @classmethod
    def _suffix_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            msg = f"file_suffix must look like '.json', got {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("directory_name")
    @classmethod
    def _directory_is_relative(cls, value: str) -> str:
        if Path(value).is_absolute():
            msg = f"directory_name must be relative, got {value!r}"
            raise ValueError(msg)
        return value


def build_options(**overrides: object) -> StoreOptions:
    """Build StoreOptions, converting validation failures to ConfigError.

    Raises:
        ConfigError: If an option is unknown or invalid.
    """
    try:
        return StoreOptions.model_validate(overrides)
    except ValidationError as exc:
        msg = f"Invalid store options: {exc}"
        raise ConfigError(msg) from exc


def settings_file(root: Path, name: str, options: StoreOptions | None = None) -> Path:
    """Return the settings file path for *name*, creating its directory.

    Args:
        root: Application data root.
        name: Settings name without suffix (e.g. ``"launcher"``).
        options: Layout options; defaults apply when omitted.

    Raises:
        ConfigError: If *name* is empty or contains a path separator.
    """
    options = options or StoreOptions()
    if name in {"", ".", ".."} or Path(name).name != name:
        msg = f"Invalid settings name: {name!r}"
        raise ConfigError(msg)

    directory = root / options.directory_name
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"{name}{options.file_suffix}"


__all__ = ["StoreOptions", "build_options", "settings_file"]
