"""
Schema Display Task

Shows registered variables and their status in the current environment.
"""

import sys
import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from invoke import task

import envschema
from envschema.config import Validator, register_manifest, default_manifest_path
from envschema.config.exceptions import EnvSchemaError

logger = logging.getLogger(__name__)

STATUS_SET = 'set'
STATUS_MISSING = 'missing'
STATUS_INVALID = 'invalid'


def build_report(validator: Validator) -> Dict[str, Any]:
    """Describe each registered variable without raising on failures."""
    invalid_keys = {spec.key for spec in validator.invalid()}
    variables = {}
    for spec in validator.registry:
        if spec.key in invalid_keys:
            status = STATUS_INVALID
        elif spec.key in validator.environ:
            status = STATUS_SET
        else:
            status = STATUS_MISSING
        variables[spec.key] = {
            'type': spec.type.value if spec.type else None,
            'required': spec.required,
            'strict': spec.strict,
            'status': status,
        }
    return {'variables': variables}


@task(help={'manifest': "Schema manifest path (default: config/env_schema.yaml)"})
def show(ctx, manifest: str = None) -> None:
    """
    Show registered environment variables and their status.

    Outputs:
        stdout: YAML report (parseable)
        stderr: Diagnostic information
    """
    validator = envschema.configure()
    manifest_path = Path(manifest) if manifest else default_manifest_path(validator.app_root)

    # An absent default manifest is skipped, as in boot()
    if manifest or manifest_path.exists():
        try:
            print(f"🔍 Loading schema from {manifest_path}", file=sys.stderr)
            register_manifest(validator, manifest_path)
        except EnvSchemaError as e:
            print(e.guidance, file=sys.stderr)
            sys.exit(1)
    else:
        print(f"ℹ️  No schema manifest at {manifest_path}", file=sys.stderr)

    validator.load()
    report = build_report(validator)

    statuses = [entry['status'] for entry in report['variables'].values()]
    print(f"✅ {statuses.count(STATUS_SET)} set, "
          f"{statuses.count(STATUS_MISSING)} missing, "
          f"{statuses.count(STATUS_INVALID)} invalid", file=sys.stderr)

    yaml.dump(report, sys.stdout, default_flow_style=False, sort_keys=False)
