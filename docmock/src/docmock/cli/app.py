"""Typer CLI application."""

from pathlib import Path
from typing import Optional

import typer

from docmock.config.logging import setup_logging
from docmock.generation.engine import MockGenerator, resolve_options
from docmock.generation.errors import MockGenerationError
from docmock.generation.providers.registry import list_providers
from docmock.utils.schema_io import documents_to_json, load_schema_from_json, save_documents_to_json

app = typer.Typer(help="docmock: mock documents from declarative schemas")


@app.command()
def generate(
    schema_json: Path,
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write documents to this file"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of documents"),
    required_only: bool = typer.Option(False, "--required-only", help="Only generate required fields"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
    fallback: Optional[str] = typer.Option(None, "--fallback", help="Untyped fields: 'sample' or 'null'"),
):
    """
    Generate mock documents from a JSON schema definition.

    Args:
        schema_json: Path to the declarative schema definition (JSON)
    """
    setup_logging()

    overrides = {}
    if required_only:
        overrides["required_only"] = True
    if seed is not None:
        overrides["seed"] = seed
    if fallback is not None:
        if fallback not in ("sample", "null"):
            typer.echo(f"Error: --fallback must be 'sample' or 'null', got '{fallback}'", err=True)
            raise typer.Exit(2)
        overrides["fallback"] = fallback

    try:
        schema = load_schema_from_json(schema_json)
        generator = MockGenerator(resolve_options(**overrides))
        documents = generator.generate_many(schema, count)
    except (FileNotFoundError, ValueError, MockGenerationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    payload = documents[0] if count == 1 else documents
    if out is None:
        typer.echo(documents_to_json(payload))
        return

    save_documents_to_json(payload, out)
    typer.echo(f"✓ Wrote {count} document(s) to {out}", err=True)


@app.command()
def providers():
    """List registered value providers."""
    for name in list_providers():
        typer.echo(name)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
