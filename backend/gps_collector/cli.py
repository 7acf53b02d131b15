"""
CLI interface for GPS Collector.

Usage:
    gps-collector init-db
    gps-collector ingest batch.json
    gps-collector ingest batch.json --trust-client-metrics
    gps-collector latest --limit 20
"""

import json
from pathlib import Path

import click

from gps_collector.config import settings
from gps_collector.db.session import SessionLocal, init_db
from gps_collector.features.points import (
    BatchIngestor,
    GpsPointRepository,
    GpsPointSchema,
    PointsError,
)


@click.group()
def cli():
    """GPS point-pair collector tools."""
    pass


@cli.command("init-db")
def init_db_command():
    """Create database tables."""
    init_db()
    click.echo(f"Tables created ({settings.database_url})")


@cli.command()
@click.argument("batch_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--trust-client-metrics",
    is_flag=True,
    default=False,
    help="Store client-supplied derived metrics (also enabled by TRUST_CLIENT_METRICS)"
)
def ingest(batch_file: Path, trust_client_metrics):
    """
    Ingest a batch JSON file.

    The file has the same shape as the POST /api/v1/points/batch body.
    """
    try:
        payload = json.loads(batch_file.read_text(encoding="utf-8"))
    except ValueError as e:
        raise click.ClickException(f"Invalid JSON in {batch_file}: {e}")

    trust_client_metrics = trust_client_metrics or settings.trust_client_metrics

    init_db()
    db = SessionLocal()
    try:
        result = BatchIngestor(db, trust_client_metrics=trust_client_metrics).ingest(payload)
    except PointsError as e:
        raise click.ClickException(str(e))
    finally:
        db.close()

    click.echo(f"Inserted: {result.inserted}")
    for error in result.errors:
        click.echo(f"  item {error.index}: {error.message} [{error.kind.value}]")


@cli.command()
@click.option("--limit", default=settings.latest_default_limit, type=click.IntRange(1, settings.latest_max_limit, clamp=True))
def latest(limit: int):
    """Print the latest rows as JSON."""
    db = SessionLocal()
    try:
        rows = GpsPointRepository(db).get_latest(limit)
    finally:
        db.close()

    click.echo(json.dumps(
        [GpsPointSchema.model_validate(row).model_dump(mode="json") for row in rows],
        indent=2,
        ensure_ascii=False,
    ))


if __name__ == "__main__":
    cli()
