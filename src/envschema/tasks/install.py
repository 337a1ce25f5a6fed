"""
Scaffolding task: copies starter schema files into an application.
"""
import logging
from pathlib import Path
from typing import List

from invoke import task

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / 'templates'

# template file name -> destination relative to the application root
TEMPLATES = {
    'env_schema.yaml': Path('config') / 'env_schema.yaml',
    'example.env': Path('.env.example'),
}


def install_templates(target_dir: Path = None, force: bool = False) -> List[Path]:
    """Copy the starter manifest and example env file into ``target_dir``.

    Existing files are left untouched unless ``force`` is set.

    Args:
        target_dir: Application root (default: current working directory)
        force: Overwrite existing files

    Returns:
        Paths of the files written
    """
    target_dir = Path.cwd() if target_dir is None else Path(target_dir)
    written = []

    for template_name, destination in TEMPLATES.items():
        target = target_dir / destination
        if target.exists() and not force:
            print(f"   ⏭️  Skipped {destination} (already exists, use --force to overwrite)")
            continue

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text((TEMPLATES_DIR / template_name).read_text())
        written.append(target)
        print(f"   ✅ Created {destination}")

    logger.debug(f"Installed {len(written)} template files into {target_dir}")
    return written


@task
def install(ctx, force: bool = False) -> None:
    """
    Create a starter schema manifest and .env.example in the current directory.

    Creates:
        config/env_schema.yaml: commented examples of variable declarations
        .env.example: sample values matching the manifest

    Args:
        force: Overwrite files that already exist

    Examples:
        envschema install
        envschema install --force
    """
    print("🔧 Installing envschema starter files...")
    written = install_templates(force=force)
    if written:
        print("💡 Declare your variables in config/env_schema.yaml, then run: envschema check")
