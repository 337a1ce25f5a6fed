"""
Validation task: runs the boot hook from the command line.
"""
import sys

from invoke import task

from envschema.boot import boot
from envschema.config.exceptions import EnvSchemaError


@task(help={
    'strict': "Treat every missing required variable as an error",
    'manifest': "Schema manifest path (default: config/env_schema.yaml)",
    'environment': "Deployment environment (default: $APP_ENV, $ENVIRONMENT or development)",
})
def check(ctx, strict: bool = False, manifest: str = None, environment: str = None) -> None:
    """
    Validate the environment against the schema manifest.

    Loads .env from the current directory, then validates. Missing required
    variables warn unless they are strict, --strict is given, or the
    environment is production. Exits 1 on validation errors.

    Examples:
        envschema check
        envschema check --strict
        envschema check --environment=production
    """
    try:
        validator = boot(manifest=manifest, environment=environment, strict=strict)
    except EnvSchemaError as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    print(f"✅ {len(validator.registry)} environment variables validated")
