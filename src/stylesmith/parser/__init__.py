from stylesmith.errors import ParseError
from stylesmith.parser.transformer import parse_value

__all__ = ["ParseError", "parse_value"]
