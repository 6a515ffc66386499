"""CLI entry point for openapi-model."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from openapi_model.model.document import OpenAPI
from openapi_model.parser.codec import DocumentFormatError, dump_document, dumps, load_document


def _load(doc_path: Path, fmt: str) -> OpenAPI:
    """Load a document, turning decode failures into CLI errors."""
    try:
        return load_document(doc_path, fmt=fmt)
    except DocumentFormatError as e:
        raise click.ClickException(str(e)) from e
    except ValidationError as e:
        raise click.ClickException(_format_errors(e)) from e


def _format_errors(error: ValidationError) -> str:
    lines = [f"{error.error_count()} error(s) in document:"]
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"])
        lines.append(f"  {location}: {err['msg']}")
    return "\n".join(lines)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """OpenAPI model: decode, check and normalize API description documents."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("openapi_model").setLevel(level)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Input document format.")
def check(doc_path: Path, fmt: str):
    """Decode a document and report any errors."""
    doc = _load(doc_path, fmt)
    count = sum(1 for _ in doc.operations())
    click.echo(f"OK: {count} operations")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path; prints to stdout when omitted.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Input document format.")
@click.option("--to", "to_fmt", default=None, type=click.Choice(["json", "yaml"]), help="Output format (defaults to the output suffix, or yaml).")
def normalize(doc_path: Path, output: Path | None, fmt: str, to_fmt: str | None):
    """Re-encode a document in canonical form."""
    doc = _load(doc_path, fmt)
    if output is None:
        click.echo(dumps(doc, to_fmt or "yaml"), nl=False)
        return
    dump_document(doc, output, fmt=to_fmt)
    click.echo(f"Normalized document saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Input document format.")
def responses(doc_path: Path, fmt: str):
    """List the response keys of every operation in canonical order."""
    doc = _load(doc_path, fmt)
    for path, method, operation in doc.operations():
        keys = [str(code) for code, _ in operation.responses.sorted_responses()]
        if operation.responses.default is not None:
            keys.append("default")
        click.echo(f"{method.upper()} {path}: {', '.join(keys)}")
