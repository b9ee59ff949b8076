"""tomlkit formatting helpers."""
from tomlkit.items import Array


def format_multiline_array(array: Array) -> Array:
    """Lay out an array one element per line, with a trailing comma.

    Comments attached to individual elements are kept on their lines.
    A comment directly after the opening ``[`` becomes its own line; tomlkit
    keeps the whitespace that preceded it, so it may be indented one or two
    columns deeper than the elements.
    An empty array is left as ``[]``.
    """
    array.multiline(len(array) > 0)
    return array
