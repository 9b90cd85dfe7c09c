from psycopg.rows import dict_row

from doc_intake.database.connection import get_connection
from doc_intake.database.models import DocumentTypeRecord


class DocumentTypesRepository:
    """Read-only access to the documenttypes_fs table."""

    def find_by_doc_type_id(self, doc_type_id: str) -> DocumentTypeRecord | None:
        """Fetch the validation columns for a document type.

        Returns None when the document type has no row.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT required_keywords, forbidden_keywords,
                           allowed_extensions, max_file_size_mb
                    FROM documenttypes_fs
                    WHERE doc_type_id = %s
                    """,
                    (doc_type_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return DocumentTypeRecord(
            doc_type_id=doc_type_id,
            required_keywords=row["required_keywords"],
            forbidden_keywords=row["forbidden_keywords"],
            allowed_extensions=row["allowed_extensions"],
            max_file_size_mb=row["max_file_size_mb"],
        )
