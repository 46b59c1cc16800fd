"""
CLI Entry Point: Exposes the vcfbrave functionality via command line.
"""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from . import __version__
from .errors import VcfBraveError
from .models.core import ClnsigMode, SubmitConfig
from .pipeline import Pipeline
from .utils.logging import get_logger, setup_logging

app = typer.Typer(help="vcfbrave: submit VCF variants to a BraVE catalog")

logger = get_logger(__name__)


@app.callback()
def main():
    """
    vcfbrave: submit VCF variants to a BraVE catalog
    """
    pass


@app.command()
def version():
    """Show the installed version."""
    typer.echo(f"vcfbrave {__version__}")


@app.command()
def submit(
    vcf_file: Path = typer.Argument(..., help="Path to VCF/BCF file"),
    host: str = typer.Option("http://localhost:8080", "--host", help="URL to BraVE server"),
    dataset: str = typer.Option(..., "--dataset", help="Dataset name"),
    assembly: str = typer.Option(..., "--assembly", help="Genome assembly version"),
    username: str = typer.Option("admin", "--username", help="User name"),
    password: str | None = typer.Option(None, "--password", help="Password"),
    dont_filter: bool = typer.Option(
        False, "--dont-filter", help="Don't filter variants by FILTER column"
    ),
    dryrun: bool = typer.Option(
        False, "--dryrun", help="Just check VCF without connecting to server"
    ),
    debug: bool = typer.Option(False, "--debug", help="Log variant data to stderr"),
    disable_ssl: bool = typer.Option(
        False, "--disable-ssl", help="Disable SSL certification verification"
    ),
    clnsig_mode: ClnsigMode = typer.Option(
        ClnsigMode.JOIN, "--clnsig-mode", help="Join all CLNSIG values or keep the first"
    ),
    timeout: float = typer.Option(30.0, "--timeout", help="HTTP timeout in seconds"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """
    Submit every (passing) variant of a VCF file to the catalog.
    """
    setup_logging(verbose=debug, log_file=str(log_file) if log_file else None)
    console = Console(stderr=True)

    try:
        config = SubmitConfig(
            host=host,
            dataset_id=dataset,
            assembly_id=assembly,
            username=username,
            password=password,
            filter_variants=not dont_filter,
            dry_run=dryrun,
            debug=debug,
            verify_ssl=not disable_ssl,
            clnsig_mode=clnsig_mode,
            timeout=timeout,
        )
        summary = Pipeline(config).run(vcf_file)

    except (VcfBraveError, ValidationError) as e:
        logger.debug("Run aborted", exc_info=True)
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    typer.echo(f"Total variants: {summary.total}")
    if summary.filtered:
        typer.echo(f"Passed variants: {summary.passed}")


if __name__ == "__main__":
    app()
