"""
Diagnostic message construction.

Messages are built as a list of styled lines so the text content stays
independent of how it is displayed. Exceptions carry the plain rendering;
terminal output can opt into ANSI emphasis.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Tuple

from .models import VariableSpec

EXAMPLE_ENV_FILENAME = ".env.example"


class Style(str, Enum):
    """Emphasis applied to a diagnostic line when rendered for a terminal."""
    PLAIN = ""
    ERROR = "\033[1;91m"  # bright red, bold
    HIGHLIGHT = "\033[1m"  # bold


RESET = "\033[0m"


@dataclass
class Diagnostic:
    """A multi-line, optionally styled, human-readable message."""
    lines: List[Tuple[Style, str]] = field(default_factory=list)

    def add(self, text: str, style: Style = Style.PLAIN) -> "Diagnostic":
        self.lines.append((style, text))
        return self

    def render(self, color: bool = False) -> str:
        """Render the message, with ANSI emphasis when ``color`` is true."""
        rendered = []
        for style, text in self.lines:
            if color and style is not Style.PLAIN:
                rendered.append(f"{style.value}{text}{RESET}")
            else:
                rendered.append(text)
        return "\n".join(rendered)

    def __str__(self) -> str:
        return self.render()


def example_file_exists(directory: Path = None) -> bool:
    """Check for a ``.env.example`` file, by default in the working directory."""
    directory = Path.cwd() if directory is None else Path(directory)
    return (directory / EXAMPLE_ENV_FILENAME).is_file()


def missing_variables_diagnostic(missing: List[VariableSpec], example_exists: bool) -> Diagnostic:
    """Build the report for required variables absent from the environment.

    Every missing variable is listed, followed by remediation steps. The
    steps suggest copying ``.env.example`` when one exists, otherwise a
    placeholder line per missing key.

    Args:
        missing: Specs of the missing variables, in registry order
        example_exists: Whether an example env file is available to copy

    Returns:
        The assembled Diagnostic
    """
    diagnostic = Diagnostic()
    diagnostic.add("Missing required environment variables:", Style.ERROR)
    for spec in missing:
        diagnostic.add(f"  - {spec.key}", Style.HIGHLIGHT)
        if spec.type is not None:
            diagnostic.add(f"    Type: {spec.type.value}")
        if spec.description:
            diagnostic.add(f"    Description: {spec.description}")

    diagnostic.add("")
    diagnostic.add("To fix this:", Style.HIGHLIGHT)
    diagnostic.add("1. Create a .env file in your project root if it doesn't exist")

    if example_exists:
        diagnostic.add(f"2. Copy values from {EXAMPLE_ENV_FILENAME} to your .env file:")
        diagnostic.add(f"   cp {EXAMPLE_ENV_FILENAME} .env", Style.HIGHLIGHT)
        diagnostic.add("3. Update the values in your .env file with your actual configuration")
    else:
        diagnostic.add("2. Add the missing variables to your .env file:")
        for spec in missing:
            diagnostic.add(f"   {spec.key}=your_{spec.key.lower()}_here", Style.HIGHLIGHT)

    return diagnostic


def invalid_type_diagnostic(spec: VariableSpec) -> Diagnostic:
    return Diagnostic().add(f"Invalid type for {spec.key}: expected {spec.type.value}", Style.ERROR)
