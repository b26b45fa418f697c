from psycopg.rows import dict_row

from app.database.connection import get_connection
from app.database.models import UploadRecord


class ResumeUploadsRepository:
    """Database operations for the resume_uploads table."""

    def insert(self, record: UploadRecord) -> str:
        """Insert an upload row and return its generated id."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO resume_uploads
                    (storage_path, file_name, file_size, template, visitor_id)
                    VALUES (%s, %s, %s, %s, %s)
                    RETURNING id
                    """,
                    (
                        record.storage_path,
                        record.file_name,
                        record.file_size,
                        record.template,
                        record.visitor_id,
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("resume_uploads insert returned no id")
        return str(row["id"])
