"""Domain layer: errors, schemas and record types."""

from .errors import ErrorCodes, ExportError
from .orders import Order, export_field
from .schemas import (
    Alignment,
    CellStyle,
    ColumnLayout,
    ColumnSpec,
    ExportField,
    ExportLog,
    FontSpec,
    GroupKeyField,
    StyleSet,
    WarningLog,
)

__all__ = [
    "ErrorCodes",
    "ExportError",
    "Order",
    "export_field",
    "Alignment",
    "CellStyle",
    "ColumnLayout",
    "ColumnSpec",
    "ExportField",
    "ExportLog",
    "FontSpec",
    "GroupKeyField",
    "StyleSet",
    "WarningLog",
]
