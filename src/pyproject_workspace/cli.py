"""pyproject-workspace CLI - Command line interface for pyproject-workspace."""
import logging
import sys
from pathlib import Path

import click

from pyproject_workspace.core.errors import (
    InvalidRequirementError,
    ManifestIOError,
    ManifestSchemaError,
    ManifestSyntaxError,
    OidParseError,
)
from pyproject_workspace.git import GitOid
from pyproject_workspace.workspace import ManifestDocument

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(name)s: %(message)s",
)
logger = logging.getLogger("pyproject_workspace")


@click.group()
def main():
    """pyproject-workspace - Edit pyproject.toml without losing formatting."""
    pass


@main.command()
@click.argument("requirement")
@click.option(
    "--pyproject",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("pyproject.toml"),
    help="Manifest to edit (default: ./pyproject.toml)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the edited manifest instead of saving it",
)
def add(requirement: str, pyproject: Path, dry_run: bool):
    """Add or update a dependency in [project.dependencies].

    Examples:
        pyproject-workspace add "requests>=2.31"
        pyproject-workspace add flask --pyproject app/pyproject.toml --dry-run

    Exit codes:
        0: Success
        1: Generic runtime failure
        3: Invalid requirement
        4: Manifest is not valid TOML or has the wrong shape
        5: Manifest could not be read or written
    """
    try:
        document = ManifestDocument.from_path(pyproject)
        document.upsert_dependency(requirement)

        if dry_run:
            click.echo(document.render(), nl=False)
        else:
            document.save(pyproject)
            click.echo(f"[OK] Added {requirement} to {pyproject}")
        sys.exit(0)

    except InvalidRequirementError as e:
        logger.error(f"Invalid requirement: {str(e)}")
        sys.exit(3)

    except (ManifestSyntaxError, ManifestSchemaError) as e:
        logger.error(f"Invalid manifest: {str(e)}")
        sys.exit(4)

    except ManifestIOError as e:
        logger.error(f"I/O error: {str(e)}")
        sys.exit(5)

    except Exception as e:
        logger.error(f"Add failed: {str(e)}")
        sys.exit(1)


@main.command()
@click.argument("oid")
def sha(oid: str):
    """Show the canonical and short forms of a Git object id.

    Exit codes:
        0: Success
        3: Invalid object id
    """
    try:
        parsed = GitOid.parse(oid)
    except OidParseError as e:
        logger.error(f"Invalid object id: {str(e)}")
        sys.exit(3)

    click.echo(f"  Object ID: {parsed}")
    click.echo(f"  Short: {parsed.to_short_string()}")
    sys.exit(0)


if __name__ == "__main__":
    main()
