# src/detection/detector_factory.py — v1
"""Factory for local community detector instantiation.

Detectors are resolved lazily from their dotted path and configured from
Settings through their ``from_settings`` constructor.
"""

from __future__ import annotations

import importlib

from localcommunity.config.settings import Settings
from localcommunity.detection.base_detector import BaseLocalCommunityDetector
from localcommunity.graph.errors import UnsupportedDetectorError

_DETECTORS: dict[str, str] = {
    "neighborhood": "localcommunity.detection.neighborhood.NeighborhoodDetector",
    "bridge_bounding": "localcommunity.detection.bridge_bounding.BridgeBoundingDetector",
    "bagrow": "localcommunity.detection.bagrow.BagrowDetector",
    "clauset": "localcommunity.detection.clauset.ClausetDetector",
    "lwp": "localcommunity.detection.lwp.LWPDetector",
}


def available_detectors() -> list[str]:
    return sorted(_DETECTORS)


def create_detector(
    name: str | None = None, settings: Settings | None = None
) -> BaseLocalCommunityDetector:
    """Instantiate a configured detector.

    Args:
        name: Detector name. Defaults to ``settings.default_detector``.
        settings: Application settings. Defaults to a fresh Settings().

    Raises:
        UnsupportedDetectorError: If ``name`` is not registered.
    """
    settings = settings or Settings()
    name = name or settings.default_detector

    fqcn = _DETECTORS.get(name)
    if fqcn is None:
        raise UnsupportedDetectorError(
            f"Unsupported detector: {name!r}. Available: {', '.join(available_detectors())}"
        )
    module_path, class_name = fqcn.rsplit(".", 1)
    cls = getattr(importlib.import_module(module_path), class_name)
    return cls.from_settings(settings)
