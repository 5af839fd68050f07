from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from mappify_address.config import VerifierConfig
from mappify_address.models import Location, VerificationResult
from mappify_address.verifiers import MappifyVerifier

app = typer.Typer(help="Standardize and geocode addresses with mappify.io.")

# Exit codes per outcome
EXIT_CODES: dict[VerificationResult, int] = {
    VerificationResult.GEOCODED: 0,
    VerificationResult.STANDARDIZED: 0,
    VerificationResult.NONE: 1,
    VerificationResult.CONNECTION_ERROR: 2,
}


def build_verifier(config: VerifierConfig) -> MappifyVerifier:
    return MappifyVerifier(config)


def _mask(secret: str) -> str:
    if not secret:
        return "(not set)"
    return f"{secret[:4]}{'*' * max(len(secret) - 4, 4)}"


@app.command()
def verify(
    street1: Optional[str] = typer.Option(None, "--street1", help="First street line."),  # noqa: B008
    street2: Optional[str] = typer.Option(None, "--street2", help="Second street line."),  # noqa: B008
    city: Optional[str] = typer.Option(None, "--city", help="Suburb or city."),  # noqa: B008
    state: Optional[str] = typer.Option(None, "--state", help="State or region."),  # noqa: B008
    postal_code: Optional[str] = typer.Option(  # noqa: B008
        None, "--postal-code", help="Postal code."
    ),
    api_key: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--api-key",
        envvar="MAPPIFY_API_KEY",
        help="mappify.io API key.",
    ),
    as_json: bool = typer.Option(  # noqa: B008
        False,
        "--json",
        help="Print the updated location as JSON.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),  # noqa: B008
) -> None:
    """Verify a single address and print the outcome."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = VerifierConfig()
    if api_key:
        config.api_key = api_key
    if not config.api_key:
        typer.echo("No mappify.io API key configured (use --api-key or MAPPIFY_API_KEY).")
        raise typer.Exit(code=EXIT_CODES[VerificationResult.CONNECTION_ERROR])

    location = Location(
        street1=street1,
        street2=street2,
        city=city,
        state=state,
        postal_code=postal_code,
    )

    verifier = build_verifier(config)
    try:
        result, message = verifier.verify(location)
    finally:
        verifier.close()

    typer.echo(f"{result.value}: {message}")
    if as_json:
        typer.echo(json.dumps(location.model_dump(mode="json"), indent=2))
    raise typer.Exit(code=EXIT_CODES[result])


@app.command("config")
def show_config() -> None:
    """Show the configuration resolved from the environment."""
    config = VerifierConfig()
    typer.echo(f"API key: {_mask(config.api_key)}")
    typer.echo(f"Base URL: {config.base_url}")
    typer.echo(f"Timeout: {config.timeout:g}s")
    typer.echo(f"Confidence threshold: {config.confidence_threshold:g}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
