"""Interactive CLI for generating Spring Initializr projects."""

from __future__ import annotations

import sys

import click
import pydantic
from rich.markup import escape

from initializr_wizard import __version__
from initializr_wizard.application.wizard_service import WizardService
from initializr_wizard.domain.exceptions import DownloadError, MetadataError
from initializr_wizard.infrastructure.config import WizardSettings
from initializr_wizard.infrastructure.factory import InfrastructureFactory


def load_settings(**overrides) -> WizardSettings:
    """Build settings from the environment, overridden by given CLI options."""
    try:
        return WizardSettings(**{k: v for k, v in overrides.items() if v is not None})
    except pydantic.ValidationError as e:
        raise click.UsageError(str(e)) from e


@click.command()
@click.option("--metadata-url", help="Metadata endpoint of the generator service")
@click.option("--download-url", help="Archive endpoint of the generator service")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, dir_okay=True, exists=True),
    help="Directory to write the archive to (default: current directory)",
)
@click.option("--group-id", "default_group_id", help="Default group id offered at the prompt")
@click.option(
    "--artifact-id", "default_artifact_id", help="Default artifact id offered at the prompt"
)
@click.option("--description", help="Project description sent to the generator")
@click.option("--timeout", type=float, help="HTTP timeout in seconds")
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr")
@click.version_option(__version__, prog_name="initializr-wizard")
def main(
    metadata_url,
    download_url,
    output_dir,
    default_group_id,
    default_artifact_id,
    description,
    timeout,
    debug,
):
    """Interactively configure a Spring Boot project and download it as a zip archive."""
    settings = load_settings(
        metadata_url=metadata_url,
        download_url=download_url,
        output_dir=output_dir,
        default_group_id=default_group_id,
        default_artifact_id=default_artifact_id,
        description=description,
        timeout=timeout,
        log_level="DEBUG" if debug else None,
    )

    factory = InfrastructureFactory()
    adapters = factory.create_all_adapters(settings)
    console = adapters["console"]
    logger = adapters["logger"]
    http = adapters["http"]

    wizard = WizardService(
        console=console,
        http=http,
        file_system=adapters["file_system"],
        logger=logger,
        settings=settings,
    )

    try:
        wizard.run()
    except MetadataError as e:
        logger.error("Metadata unavailable", reason=e.message)
        console.print_error(escape(e.message))
        sys.exit(1)
    except DownloadError as e:
        logger.error("Download failed", url=e.url)
        console.print()
        console.print_error(f"Download Error! {escape(e.message)}.")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        raise click.Abort() from None
    finally:
        http.close()


if __name__ == "__main__":
    main()
