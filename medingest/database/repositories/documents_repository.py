from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from medingest.database.connection import get_connection
from medingest.database.exceptions import DocumentNotFoundError, PersistenceError
from medingest.database.models import DocumentRecord
from medingest.ingestion.models import NewDocument


class DocumentsRepository:
    """Database operations for the documents table."""

    def insert(self, document: NewDocument) -> str:
        """Insert one document record and return its generated id.

        `uploaded_at` is assigned by the database.

        Raises:
            PersistenceError: if the insert fails.
        """
        metadata = document.metadata
        analysis = document.ai_analysis_payload()
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO documents
                        (title, file_name, file_url, file_type, file_size, user_id,
                         category, processing_status, anomalies, has_anomalies,
                         anomaly_count, extracted_text, ai_analysis, created_at,
                         uploaded_at)
                        VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s,
                                NOW())
                        RETURNING id
                        """,
                        (
                            document.title,
                            document.file_name,
                            document.file_url,
                            document.file_type,
                            document.file_size,
                            document.user_id,
                            metadata.category,
                            metadata.processing_status,
                            Jsonb(list(metadata.anomalies)),
                            metadata.has_anomalies,
                            metadata.anomaly_count,
                            document.extracted_text,
                            Jsonb(analysis) if analysis is not None else None,
                            document.created_at,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        except (psycopg.Error, RuntimeError) as exc:
            # RuntimeError: the pool was never initialized
            raise PersistenceError(f"Could not save document metadata: {exc}") from exc

        if row is None:
            raise PersistenceError("Insert returned no document id")
        return str(row[0])

    def find_by_id(self, document_id: str) -> DocumentRecord:
        """Find a document by id.

        Raises:
            DocumentNotFoundError: if no document with this id exists.
        """
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        """
                        SELECT id, title, file_name, file_url, file_type, file_size,
                               user_id, category, processing_status, anomalies,
                               has_anomalies, anomaly_count, extracted_text,
                               ai_analysis, created_at, uploaded_at
                        FROM documents
                        WHERE id = %s
                        """,
                        (document_id,),
                    )
                    row = cur.fetchone()
        except (psycopg.Error, RuntimeError) as exc:
            raise PersistenceError(f"Could not load document {document_id}: {exc}") from exc

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return self._to_record(row)

    @staticmethod
    def _to_record(row: dict[str, Any]) -> DocumentRecord:
        return DocumentRecord(
            id=str(row["id"]),
            title=row["title"],
            file_name=row["file_name"],
            file_url=row["file_url"],
            file_type=row["file_type"],
            file_size=row["file_size"],
            user_id=row["user_id"],
            category=row["category"],
            processing_status=row["processing_status"],
            anomalies=list(row["anomalies"] or []),
            has_anomalies=row["has_anomalies"],
            anomaly_count=row["anomaly_count"],
            extracted_text=row["extracted_text"],
            ai_analysis=row["ai_analysis"],
            created_at=row["created_at"],
            uploaded_at=row["uploaded_at"],
        )
