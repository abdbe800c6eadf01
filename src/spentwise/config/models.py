"""Storage configuration model — where the preferences file lives."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StorageConfig(BaseModel):
    """Resolved location of the persistent preference map."""

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(default="spentwise", min_length=1)
    filename: str = Field(default="preferences.json", min_length=1)
    config_dir: Path

    @field_validator("filename")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if Path(value).name != value:
            raise ValueError("filename must not contain directory components")
        return value

    @property
    def preferences_path(self) -> Path:
        """Absolute path to the preferences JSON file."""
        return self.config_dir / self.filename
