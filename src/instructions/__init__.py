"""
Jinja2 template-based flag instruction rendering.

Templates are stored as .j2 files in this directory.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

_INSTRUCTIONS_DIR = Path(__file__).parent

_env = Environment(
    loader=FileSystemLoader(_INSTRUCTIONS_DIR),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(template_name: str, **kwargs) -> str:
    """Render an instruction template with given parameters.

    Args:
        template_name: Path relative to the instructions dir (e.g., "numbered.j2")
        **kwargs: Template variables

    Returns:
        Rendered text without trailing whitespace
    """
    template = _env.get_template(template_name)
    return template.render(**kwargs).rstrip()


def numbered(instructions) -> str:
    """Render instructions as a numbered list: "1. first\\n2. second"."""
    return render("numbered.j2", instructions=list(instructions))
