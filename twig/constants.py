"""Defaults for the twig command-line tool."""

DEFAULT_LOG_LEVEL = "INFO"
"""Logging level used when ``--log-level`` is not given."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s"
"""Format string handed to ``logging.basicConfig``."""

DEFAULT_ELEM_TYPE = "int"
"""Element type that command-line values are parsed as."""

DEFAULT_FORMAT = "shape"
"""Output format for the rendered tree."""

DEFAULT_INDENT = 2
"""Spaces per level in the pretty format."""
