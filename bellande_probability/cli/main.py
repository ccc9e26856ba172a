import json
import logging
import sys
from typing import Callable, Optional

import typer

from bellande_probability.api.schemas import (
    CoordinatePayload,
    FunctionPayload,
    ProbabilityPayload,
    make_payload,
)
from bellande_probability.config import settings
from bellande_probability.core.validation import BellandeError, TransportError, parse_json_argument
from bellande_probability.services import request_probability

app = typer.Typer(help="Bellande Distribution Probability Tool")


def _configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(stream=sys.stderr, level=level, format="%(levelname)s %(name)s: %(message)s")


def _render(result) -> str:
    try:
        return json.dumps(result, indent=2, allow_nan=False)
    except ValueError as e:
        raise TransportError(f"response is not representable as JSON: {e}") from e


def _run(build: Callable[[], ProbabilityPayload], full_auth: bool, url: Optional[str]):
    # stdout is written only once the whole call has succeeded
    try:
        payload = build()
        output = _render(request_probability(payload, full_auth=full_auth, base_url=url))
    except BellandeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(output)


@app.command()
def function(
    mu_func: str = typer.Option(..., "--mu-func", help="mu function as string"),
    sigma_func: str = typer.Option(..., "--sigma-func", help="sigma function as string"),
    x: str = typer.Option(..., "--x", help="Input vector as JSON-formatted list"),
    dimensions: int = typer.Option(..., "--dimensions", help="Number of dimensions"),
    full_auth: bool = typer.Option(False, "--full-auth", help="Use full authentication"),
    url: Optional[str] = typer.Option(None, "--url", help="Override the service base URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request details to stderr"),
):
    """Probability from mu/sigma function descriptors."""
    _configure_logging(verbose)
    _run(
        lambda: make_payload(
            FunctionPayload,
            mu_func=mu_func,
            sigma_func=sigma_func,
            x=parse_json_argument("x", x),
            dimensions=dimensions,
        ),
        full_auth,
        url,
    )


@app.command()
def coordinates(
    node0: str = typer.Option(..., "--node0", help="First node as JSON-formatted list"),
    node1: str = typer.Option(..., "--node1", help="Second node as JSON-formatted list"),
    threshold: float = typer.Option(..., "--threshold", help="Probability threshold"),
    dimensions: int = typer.Option(..., "--dimensions", help="Number of dimensions"),
    full_auth: bool = typer.Option(False, "--full-auth", help="Use full authentication"),
    url: Optional[str] = typer.Option(None, "--url", help="Override the service base URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request details to stderr"),
):
    """Probability between two coordinate vectors."""
    _configure_logging(verbose)
    _run(
        lambda: make_payload(
            CoordinatePayload,
            node0=parse_json_argument("node0", node0),
            node1=parse_json_argument("node1", node1),
            threshold=threshold,
            dimensions=dimensions,
        ),
        full_auth,
        url,
    )


if __name__ == "__main__":
    app()
