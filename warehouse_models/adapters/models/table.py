"""
Pydantic models describing table schemas and result rows.
"""

from typing import Any, List, Optional

from pydantic import Field

from .base import WireModel


class TableFieldSchema(WireModel):
    """Schema of a single column; RECORD columns carry nested fields."""
    name: str = Field(..., description="Column name")
    type: str = Field(..., description="Column data type, e.g. STRING, INTEGER, RECORD")
    mode: Optional[str] = Field(None, description="NULLABLE, REQUIRED or REPEATED")
    description: Optional[str] = Field(None, description="Column description")
    fields: Optional[List["TableFieldSchema"]] = Field(None, description="Nested columns of a RECORD column")


class TableSchema(WireModel):
    """Schema of a table or query result."""
    fields: Optional[List[TableFieldSchema]] = Field(None, description="Columns in the table")


class TableCell(WireModel):
    """A single cell value. Scalars arrive as text, repeated and record values as nested JSON."""
    v: Optional[Any] = Field(None, description="Cell value")


class TableRow(WireModel):
    """A single result row."""
    f: Optional[List[TableCell]] = Field(None, description="Cells in column order")


TableFieldSchema.model_rebuild()
