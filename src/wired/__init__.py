# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
wired: schema-driven, server-rendered reactive components.
"""

from wired.component import LiveComponent
from wired.files import TemporaryUploadedFile
from wired.validation import ValidationError

__version__ = "0.1.0"

__all__ = [
    "LiveComponent",
    "TemporaryUploadedFile",
    "ValidationError",
    "__version__",
]
