# cardsmith/domain/formats.py
from dataclasses import dataclass
from typing import Dict

from cardsmith.domain.errors import ExportValidationError


@dataclass(frozen=True)
class ExportFormat:
    name: str
    media_type: str
    # Raster formats are screenshots of the side-by-side preview; PDF prints one face per page.
    document_mode: str

    @property
    def extension(self) -> str:
        return self.name

    @property
    def is_raster(self) -> bool:
        return self.name != "pdf"


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    "png": ExportFormat("png", "image/png", "screen"),
    "jpeg": ExportFormat("jpeg", "image/jpeg", "screen"),
    "pdf": ExportFormat("pdf", "application/pdf", "print"),
}
DEFAULT_EXPORT_FORMAT = "png"


def validate_format(value) -> ExportFormat:
    export_format = EXPORT_FORMATS.get(value) if isinstance(value, str) else None
    if export_format is None:
        raise ExportValidationError(
            f"Invalid format: {value}. Must be one of: {', '.join(EXPORT_FORMATS)}"
        )
    return export_format
