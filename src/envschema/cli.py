"""
envschema command line entry point.

An invoke Program serving the task namespace; invoke's own --debug flag
also turns on DEBUG logging for envschema.
"""

from invoke import Program

from envschema import __version__
from envschema.config.logging import bootstrap_logging
from envschema.tasks import namespace


class EnvSchemaProgram(Program):
    """Program that bootstraps logging before running tasks."""

    def execute(self):
        bootstrap_logging(debug=self.args.debug.value)
        super().execute()


program = EnvSchemaProgram(namespace=namespace, version=__version__, name='envschema', binary='envschema')
