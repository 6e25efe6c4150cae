from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import DetectorConfig, load_config
from .engine import DetectionEngine
from .models import Document
from .samples import SAMPLES, get_sample

app = typer.Typer(help="Heuristic AI-generated text detector CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class DocumentResult(TypedDict):
    doc_id: str
    result: Dict[str, Any]


@app.command()
def analyze(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Analyze this text directly."),
    sample: str | None = typer.Option(
        None, "--sample", "-s", help="Analyze a bundled sample (see list-samples)."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    include_features: bool | None = typer.Option(
        None,
        "--features/--no-features",
        help="Override config include_features flag.",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level."),
) -> None:
    """Analyze text and emit the verdicts as JSON."""
    _configure_logging(log_level)
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    if include_features is not None:
        cfg.include_features = include_features

    documents = _collect_documents(input_path, text, sample)
    engine = DetectionEngine(cfg)
    results: List[DocumentResult] = [
        {"doc_id": doc.doc_id, "result": engine.detect(doc.text).to_dict()}
        for doc in documents
    ]
    typer.echo(json.dumps({"documents": results}, indent=2, ensure_ascii=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = DetectorConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


@app.command("list-samples")
def list_samples() -> None:
    """List the bundled sample passages."""
    for name in SAMPLES:
        typer.echo(name)


def main() -> None:
    app()


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level '{level}'.", param_hint="--log-level")
    logging.basicConfig(level=numeric, format="%(levelname)s %(name)s: %(message)s")


def _collect_documents(
    input_path: Path | None, text: str | None, sample: str | None
) -> List[Document]:
    """Turn exactly one of the input options into Document objects."""
    provided = [value is not None for value in (input_path, text, sample)]
    if sum(provided) != 1:
        raise typer.BadParameter(
            "Provide exactly one of --input-path, --text or --sample."
        )
    if text is not None:
        return [Document(doc_id="<text>", text=text)]
    if sample is not None:
        try:
            return [Document(doc_id=f"sample:{sample}", text=get_sample(sample))]
        except KeyError as exc:
            raise typer.BadParameter(str(exc.args[0]), param_hint="--sample") from exc
    if input_path is None:
        raise typer.BadParameter("--input-path is required when no other source is given.")
    return _load_documents(input_path)


def _load_documents(input_path: Path) -> List[Document]:
    """Expand a file or directory into documents keyed by relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return Document(doc_id=doc_id, text=text)


if __name__ == "__main__":
    main()
