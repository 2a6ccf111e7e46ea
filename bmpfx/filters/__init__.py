from typing import Callable, Dict

from .color import grayscale, high_contrast, quantize
from .geometry import enlarge, rotate, rotate_90
from .tone import clarendon, darken, lighten, vignette

TRANSFORMS: Dict[str, Callable] = {
    "vignette": vignette,
    "clarendon": clarendon,
    "grayscale": grayscale,
    "rotate_90": rotate_90,
    "rotate": rotate,
    "enlarge": enlarge,
    "high_contrast": high_contrast,
    "lighten": lighten,
    "darken": darken,
    "quantize": quantize,
}

__all__ = [
    "clarendon",
    "darken",
    "enlarge",
    "grayscale",
    "high_contrast",
    "lighten",
    "quantize",
    "rotate",
    "rotate_90",
    "TRANSFORMS",
    "vignette",
]
