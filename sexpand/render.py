from collections.abc import Iterable

from sexpand.errors import MissingPlaceholderError

PLACEHOLDER = "{}"
DEFAULT_SEPARATOR = ","

_ESCAPED_NEWLINE = "\\n"


def normalize_separator(separator: str) -> str:
    """Turn the two characters ``\\n`` into a real newline, leave anything else as-is."""
    if separator == _ESCAPED_NEWLINE:
        return "\n"
    return separator


def render(
    hostnames: Iterable[str],
    template: str = "",
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Substitute each hostname into ``template`` and join the results.

    An empty template renders the bare hostnames. Order and duplicates of
    ``hostnames`` are preserved.
    """
    template = template or PLACEHOLDER
    if PLACEHOLDER not in template:
        raise MissingPlaceholderError(template, PLACEHOLDER)
    return normalize_separator(separator).join(
        template.replace(PLACEHOLDER, hostname) for hostname in hostnames
    )
