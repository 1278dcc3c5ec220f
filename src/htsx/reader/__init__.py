from htsx.reader.errors import ReadError
from htsx.reader.transformer import DEFAULT_MAX_DEPTH, check_depth, read_source

__all__ = ["ReadError", "read_source", "check_depth", "DEFAULT_MAX_DEPTH"]
