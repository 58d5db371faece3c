# receipt_api/cli.py
import json

import click

from .errors import ParseError, ValidationError
from .services.parsing import receipt_from_payload
from .services.scoring import calculate_points, explain_points


@click.command("score-receipt")
@click.argument("path", type=click.File("r", encoding="utf-8"))
@click.option("--explain", is_flag=True, help="Print points per rule.")
def score_receipt_command(path, explain):
    """Print the points a receipt JSON file would earn, without storing it."""
    try:
        receipt = receipt_from_payload(json.load(path))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"failed to parse {path.name}, {e}")
    except (ParseError, ValidationError) as e:
        raise click.ClickException(e.message)

    if explain:
        for name, points in explain_points(receipt):
            click.echo(f"{name:<20} {points}")
    click.echo(f"points: {calculate_points(receipt)}")


def register_cli(app):
    app.cli.add_command(score_receipt_command)
