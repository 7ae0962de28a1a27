"""Pydantic models for listing configuration and directory entries."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class Configuration(BaseModel):
    """Directories to list and the single-character flags to list them with."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"directories": ["."], "flags": []},
                {"directories": ["src", "tests"], "flags": ["l", "a", "F"]},
            ]
        }
    )

    directories: list[str] = Field(
        default_factory=lambda: ["."],
        min_length=1,
        description="Directories to list, in the order given",
    )
    flags: set[str] = Field(default_factory=set, description="Single-character flags")

    @field_validator("flags")
    @classmethod
    def flags_are_single_characters(cls, flags: set[str]) -> set[str]:
        for flag in flags:
            if len(flag) != 1:
                raise ValueError(f"flag must be a single character, got {flag!r}")
        return flags

    @property
    def show_hidden(self) -> bool:
        return "a" in self.flags

    @property
    def long_format(self) -> bool:
        return "l" in self.flags

    @property
    def mark_directories(self) -> bool:
        return "F" in self.flags


class EntryMetadata(BaseModel):
    """Metadata shown for an entry in long mode."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "mode": 0o100644,
                    "is_directory": False,
                    "uid": 1000,
                    "owner": "user",
                    "size": 42,
                    "mtime": 1612595289.0,
                }
            ]
        }
    )

    mode: int = Field(..., description="Raw st_mode value")
    is_directory: bool = Field(..., description="Whether the entry is a directory")
    uid: int = Field(..., description="Numeric owner id")
    owner: str = Field(..., description="Owner username, or the numeric id if unknown")
    size: int = Field(..., ge=0, description="Size in bytes")
    mtime: float = Field(..., description="Last modification time (POSIX timestamp)")


class DirectoryEntry(BaseModel):
    """A single child of a listed directory."""

    name: str = Field(..., description="Name relative to the listed directory")
    path: str = Field(..., description="Path joined onto the listed directory")
    is_directory: bool = Field(..., description="Whether the entry is a directory")
    metadata: Optional[EntryMetadata] = Field(None, description="Long-mode metadata")
