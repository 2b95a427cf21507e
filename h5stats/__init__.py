"""H5 Tournament Stats - statistics workbook generator for Heroes V tournaments."""

__version__ = "0.3.0"
