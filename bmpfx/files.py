from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .codec import decode, encode
from .codec.types import Raster
from .errors import MalformedContainerError, OutputUnavailableError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_image(path: PathLike) -> Raster:
    """Read and decode a bitmap file."""
    data = Path(path).read_bytes()
    raster = decode(data)
    if raster is None:
        raise MalformedContainerError(f"Not a valid uncompressed bitmap: {path}")
    logger.debug("Read %s (%dx%d)", path, raster.width, raster.height)
    return raster


def write_bytes(path: PathLike, data: bytes) -> None:
    try:
        with open(path, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise OutputUnavailableError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)


def write_image(path: PathLike, raster: Raster) -> None:
    """Encode ``raster`` and write it to ``path``."""
    write_bytes(path, encode(raster))
