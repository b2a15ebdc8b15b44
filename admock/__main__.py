"""CLI for the ad wizard mock backend.

Usage:
    python -m admock serve                  # Run the API on 127.0.0.1:3001
    python -m admock serve --port 8000      # Pick another port
    python -m admock restore-db             # Copy db.initial.json over db.json
"""

from __future__ import annotations

import typer

from admock.core.config import settings
from admock.core.database import JsonDatabase, StorageError

app = typer.Typer(
    name="admock",
    help="Mock REST backend for the ad-creation wizard",
    no_args_is_help=True,
)


@app.command("serve")
def cmd_serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(3001, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run the API server under uvicorn."""
    import uvicorn

    uvicorn.run("admock.main:app", host=host, port=port, reload=reload)


@app.command("restore-db")
def cmd_restore_db(
    db_file: str = typer.Option(settings.DB_JSON_FILE, "--db-file", help="Live JSON database"),
    initial_file: str = typer.Option(settings.DB_INITIAL_FILE, "--initial-file", help="Seed document to copy from"),
) -> None:
    """Restore the live database from the seed document."""
    try:
        JsonDatabase(db_file, initial_file).reset()
    except StorageError as e:
        typer.echo(f"Failed to restore {db_file}: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"{db_file} restored from {initial_file}")


if __name__ == "__main__":
    app()
