import argparse
import asyncio
import sys
from pathlib import Path

from medingest.config.settings import Settings
from medingest.database.connection import close_pool, init_pool
from medingest.ingestion.models import SourceFile, default_title
from medingest.ingestion.orchestrator import build_orchestrator
from medingest.logging.logger import Log


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="medingest",
        description="Upload a medical document, analyze it, and save its metadata.",
    )
    parser.add_argument("file", type=Path, help="PDF, JPG, or PNG file (max 10MB)")
    parser.add_argument("--title", help="Document title (defaults to the file name)")
    parser.add_argument("--user-id", default="anonymous", help="Uploading user's id")
    parser.add_argument("--media-type", help="Override the media type guessed from the name")
    parser.add_argument("--prompt", help="Instruction prompt to use instead of the bundled one")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Entry point: settings -> logging -> pool -> one ingestion."""
    args = _parse_args(argv)
    settings = Settings()
    # stdout carries only the document id
    Log.configure(settings.log_level, stream=sys.stderr)
    init_pool(settings)

    try:
        orchestrator = build_orchestrator(settings)
        source = SourceFile.from_path(args.file, media_type=args.media_type)
        result = asyncio.run(
            orchestrator.ingest(
                source,
                title=args.title or default_title(source.file_name),
                user_id=args.user_id,
                prompt_override=args.prompt,
                on_progress=Log.info,
            )
        )
        metadata = result.document.metadata
        Log.info(
            f"Document {result.id}: {metadata.processing_status}, "
            f"category '{metadata.category}', {metadata.anomaly_count} anomalies"
        )
        print(result.id)
    finally:
        close_pool()


if __name__ == "__main__":
    main()
