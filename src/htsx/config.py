from __future__ import annotations

from dataclasses import dataclass

from htsx.reader import DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class ConvertConfig:
    pretty: bool = False  # markup layout; stylesheets have a single layout
    output_dir: str | None = None  # None writes next to each input file
    encoding: str = "utf-8"
    max_depth: int = DEFAULT_MAX_DEPTH
