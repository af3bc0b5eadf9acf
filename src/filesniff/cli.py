
"""CLI implementation for filesniff."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import structlog
import typer
from pydantic import ValidationError

from . import detect_source, detect_source_sync
from .config import get_settings
from .core.util import result_asdict
from .logging_config import configure_logging

app = typer.Typer(add_completion=False, help="Identify file formats of files and URLs from their magic numbers.")

logger = structlog.get_logger(__name__)


def iter_sources(files: list[str]) -> list[str]:
    """Get list of sources from files argument or stdin."""
    if "-" in files:
        # stdin mode
        return [ln.strip() for ln in sys.stdin if ln.strip()]
    elif files:
        return list(files)
    return []


def _normalise(src: str) -> str:
    parsed_url = urlparse(src)
    if parsed_url.scheme and parsed_url.netloc:  # It's a URL
        return src
    return str(Path(src).resolve())


async def _batch_detect(sources: list[str], prefix_size: int, fields) -> list[dict]:
    """Asynchronously detect formats for a list of sources."""
    tasks = [detect_source(_normalise(src), prefix_size=prefix_size) for src in sources]
    results = await asyncio.gather(*tasks, return_exceptions=True)
    records = []
    for src, res in zip(sources, results):
        if isinstance(res, Exception):
            logger.info("detection failed", source=src, error=str(res))
            records.append(result_asdict(src, None, error=str(res)))
        else:
            records.append(result_asdict(src, res, fields=fields))
    return records


@app.command()
def main(
    files: list[str] = typer.Argument(None, help="Files or URLs to inspect, or '-' for stdin"),
    prefix_size: Optional[int] = typer.Option(None, "--prefix-size", min=1, help="Bytes to read from each source"),
    fields: Optional[str] = typer.Option(None, "--fields", help="Comma-separated subset of keys to emit"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Force JSON-lines output"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
    sync: bool = typer.Option(False, "--sync", help="Force synchronous I/O"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for stderr diagnostics"),
):
    """Identify the format of one or many local paths or URLs."""
    try:
        settings = get_settings()
        configure_logging(level=log_level)
    except ValidationError as e:
        typer.echo(f"Invalid FILESNIFF_* environment settings:\n{e}", err=True)
        raise typer.Exit(code=2)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    size = prefix_size if prefix_size is not None else settings.prefix_size
    sel_fields = set(fields.split(",")) if fields else None
    sources = iter_sources(files or [])

    if not sources:
        typer.echo("No input files given.", err=True)
        raise typer.Exit(code=1)

    records: list[dict] = []
    if sync:
        for src in sources:
            try:
                res = detect_source_sync(_normalise(src), prefix_size=size)
            except Exception as e:
                logger.info("detection failed", source=src, error=str(e))
                records.append(result_asdict(src, None, error=str(e)))
            else:
                records.append(result_asdict(src, res, fields=sel_fields))
    else:
        records = asyncio.run(_batch_detect(sources, size, sel_fields))

    # open output sink
    sink = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        if len(sources) == 1 and not jsonl:
            json.dump(records[0], sink, indent=2)
            sink.write("\n")
        else:
            for obj in records:
                sink.write(json.dumps(obj))
                sink.write("\n")
    finally:
        if output:
            sink.close()

    # exit code
    if any(not r["success"] for r in records):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
