# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""Temporary uploads attached to schema components."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TemporaryUploadedFile(BaseModel):
    """A file uploaded by the client and held until the form is submitted.

    Storage is owned by the upload subsystem; components only see this handle.
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(description="Name of the file on the client")
    path: Path = Field(description="Location of the temporary copy")
    mime_type: str | None = None
    size: int = Field(default=0, ge=0)

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lstrip(".").lower()
