"""
input-sanitizer — package root

File: src/input_sanitizer/__init__.py
Last updated: 2026-10-19

Purpose
- Package root. Exposes the sanitizer facade, its components, and the shared
  fault and result types.

Functional requirements
- Must not have side effects at import time (no config loading, no logging init).
"""

from input_sanitizer.bounding import LengthBounder
from input_sanitizer.clamp import DateClamp, NumericClamp
from input_sanitizer.context import SanitizerComponent, SanitizerContext
from input_sanitizer.faults import (
    FaultCategory,
    FaultPolicy,
    FaultRecord,
    FaultSink,
    SanitizerFault,
    SanitizerViolation,
)
from input_sanitizer.filenames import ExtensionGroup, FilenameValidator
from input_sanitizer.formats import (
    CompareMode,
    DateDataType,
    DateDelimiter,
    RegionalFormat,
    SeparatorStyle,
)
from input_sanitizer.lists import AllowList, RestrictedList
from input_sanitizer.normalizer import Normalizer
from input_sanitizer.results import CheckOutcome, CheckResult, is_blank
from input_sanitizer.sanitizer import Sanitizer

__version__ = "0.1.0"

__all__ = [
    "AllowList",
    "CheckOutcome",
    "CheckResult",
    "CompareMode",
    "DateClamp",
    "DateDataType",
    "DateDelimiter",
    "ExtensionGroup",
    "FaultCategory",
    "FaultPolicy",
    "FaultRecord",
    "FaultSink",
    "FilenameValidator",
    "LengthBounder",
    "Normalizer",
    "NumericClamp",
    "RegionalFormat",
    "RestrictedList",
    "Sanitizer",
    "SanitizerComponent",
    "SanitizerContext",
    "SanitizerFault",
    "SanitizerViolation",
    "SeparatorStyle",
    "__version__",
    "is_blank",
]
