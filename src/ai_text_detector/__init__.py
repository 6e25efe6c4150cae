"""
ai_text_detector package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import DetectorConfig, config_from_dict, config_from_yaml, load_config
from .engine import DetectionEngine, detect_ai_text
from .errors import (
    ComputationFault,
    DetectionError,
    InsufficientDataError,
    TooShortInputError,
)
from .models import AnalysisResult, FeatureVector, TokenStream

__all__ = [
    "AnalysisResult",
    "ComputationFault",
    "DetectionEngine",
    "DetectionError",
    "DetectorConfig",
    "FeatureVector",
    "InsufficientDataError",
    "TokenStream",
    "TooShortInputError",
    "config_from_dict",
    "config_from_yaml",
    "detect_ai_text",
    "load_config",
]

__version__ = "0.1.0"
