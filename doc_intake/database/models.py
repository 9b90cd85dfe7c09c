from dataclasses import dataclass
from typing import Any


@dataclass
class DocumentTypeRecord:
    """Represents a row from the documenttypes_fs table.

    Column values are kept as fetched; shape checks happen in the rule loader.
    """

    doc_type_id: str
    required_keywords: Any = None
    forbidden_keywords: Any = None
    allowed_extensions: Any = None
    max_file_size_mb: Any = None


@dataclass
class SystemSettingRecord:
    """Represents a row from the systemsettings_fs key-value table."""

    setting_key: str
    setting_value: str | None = None
