"""Load and render the Jinja2 templates packaged with tskata."""

import importlib.resources

import jinja2

TEMPLATES_PACKAGE = "tskata.templates"


def render_template(template_name: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template filename (e.g. "README.md.j2")
        **kwargs: Template variables.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If no such template is packaged.
    """
    source = importlib.resources.files(TEMPLATES_PACKAGE).joinpath(template_name).read_text(encoding="utf-8")
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)
