from psycopg.rows import dict_row

from app.database.connection import get_connection
from app.database.models import GenerationResult


class GenerationResultsRepository:
    """Database operations for the generation_results table."""

    def insert(self, result: GenerationResult) -> str:
        """Insert one generation attempt and return its generated id."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO generation_results
                    (resume_upload_id, llm_model, llm_html)
                    VALUES (%s, %s, %s)
                    RETURNING id
                    """,
                    (result.resume_upload_id, result.llm_model, result.llm_html),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("generation_results insert returned no id")
        return str(row["id"])
