from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .catalog import FilterSpec
from .codec.types import Raster
from .files import write_image
from .errors import OutputUnavailableError
from .rendering import SUPPORTED_EXTENSIONS, load_raster, raster_to_image

logger = logging.getLogger(__name__)

OUTPUT_EXTENSIONS = {".bmp", ".png"}


@dataclass
class ProcessSettings:
    clamp: bool = False


class ImageJobBuilder:
    def __init__(self, spec: FilterSpec, settings: Optional[ProcessSettings] = None) -> None:
        self.spec = spec
        self.settings = settings or ProcessSettings()

    def build_from_file(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Raster:
        self._validate_input_path(path)
        raster = load_raster(path)
        logger.info("Loaded %s (%dx%d)", path, raster.width, raster.height)
        return self.build(raster, params)

    def build(self, raster: Raster, params: Optional[Mapping[str, Any]] = None) -> Raster:
        logger.debug("Applying %s with %s (clamp=%s)", self.spec.name, dict(params or {}), self.settings.clamp)
        result = self.spec.apply(raster, params, clamp=self.settings.clamp)
        logger.info("Applied %s -> %dx%d", self.spec.label, result.width, result.height)
        return result

    def save(self, path: str, raster: Raster) -> None:
        self.validate_output_path(path)
        if os.path.splitext(path)[1].lower() == ".bmp":
            write_image(path, raster)
            return
        try:
            raster_to_image(raster).save(path)
        except OSError as exc:
            raise OutputUnavailableError(f"Cannot write {path}: {exc}") from exc

    def run(self, input_path: str, output_path: str, params: Optional[Mapping[str, Any]] = None) -> Raster:
        self.validate_output_path(output_path)
        result = self.build_from_file(input_path, params)
        self.save(output_path, result)
        logger.info("Saved %s", output_path)
        return result

    @staticmethod
    def validate_output_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in OUTPUT_EXTENSIONS:
            raise ValueError("Output filename must end in " + " or ".join(sorted(OUTPUT_EXTENSIONS)))

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
