from __future__ import annotations

import inspect
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .codec.types import Raster
from .errors import UnknownFilterError
from .filters import TRANSFORMS

DATA_PATH = Path(__file__).resolve().parent / "data" / "filters.json"


@dataclass(frozen=True)
class FilterParam:
    name: str
    type: str

    def coerce(self, value: Any) -> Any:
        if self.type == "int":
            return int(value)
        return float(value)


@dataclass(frozen=True)
class FilterSpec:
    number: int
    name: str
    label: str
    params: Tuple[FilterParam, ...] = ()

    @property
    def accepts_clamp(self) -> bool:
        return "clamp" in inspect.signature(TRANSFORMS[self.name]).parameters

    def apply(self, raster: Raster, params: Optional[Mapping[str, Any]] = None, clamp: bool = False) -> Raster:
        """Run the transform with already validated parameters."""
        params = params or {}
        kwargs: Dict[str, Any] = {}
        for param in self.params:
            if param.name not in params:
                raise ValueError(f"Filter '{self.name}' requires parameter '{param.name}'")
            kwargs[param.name] = param.coerce(params[param.name])
        if self.accepts_clamp:
            kwargs["clamp"] = clamp
        return TRANSFORMS[self.name](raster, **kwargs)


class FilterRegistry:
    _cache: Dict[Path, "FilterRegistry"] = {}

    def __init__(self, filters: Iterable[FilterSpec]) -> None:
        self._filters = sorted(filters, key=lambda item: item.number)

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "FilterRegistry":
        key = path.resolve()
        cached = cls._cache.get(key)
        if cached:
            return cached
        raw = json.loads(path.read_text(encoding="utf-8"))
        filters = []
        for item in raw:
            if item["name"] not in TRANSFORMS:
                raise ValueError(f"Catalog entry '{item['name']}' has no transform")
            params = tuple(FilterParam(**param) for param in item.get("params", []))
            filters.append(FilterSpec(item["number"], item["name"], item["label"], params))
        registry = cls(filters)
        cls._cache[key] = registry
        return registry

    @property
    def filters(self) -> List[FilterSpec]:
        return list(self._filters)

    def find(self, name_or_number: str) -> Optional[FilterSpec]:
        key = str(name_or_number).strip().lower().replace("-", "_")
        for spec in self._filters:
            if spec.name == key or str(spec.number) == key:
                return spec
        return None

    def get(self, name_or_number: str) -> FilterSpec:
        spec = self.find(name_or_number)
        if spec is None:
            raise UnknownFilterError(f"Unknown filter '{name_or_number}'")
        return spec
