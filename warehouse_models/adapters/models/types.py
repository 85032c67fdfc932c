"""
Field types shared across entities.
"""

from typing import Annotated

from pydantic import Field


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# 32-bit integer carried as a JSON number; text, floats and booleans are rejected
Int32 = Annotated[int, Field(strict=True, ge=INT32_MIN, le=INT32_MAX)]

# 64-bit integer carried as JSON text; kept as text so no precision is lost
Int64String = Annotated[str, Field(strict=True, pattern=r"^-?[0-9]{1,20}$")]
