"""
input-sanitizer — filename validation

File: src/input_sanitizer/filenames.py
Last updated: 2026-10-19

Purpose
- Reduce an untrusted filename to a safe Windows-compatible name or fault.

What should be included in this file
- Malicious marker stripping, dot counting, ASCII reduction, and a fixed
  filename grammar check.
- Optional allowed extension or disallowed extension groups.

Functional requirements
- Any removed marker is a fault even though the cleansed name is computed.
- Names without a dot always fault; multiple dots fault on request.
- Reserved device names, control characters, path-special characters, and a
  trailing space or dot are rejected.
- Under the collect policy the cleansed best-effort name is returned.

Non-functional requirements
- Length is bounded before any other work.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import StrEnum
from typing import Final

from input_sanitizer.bounding import LengthBounder
from input_sanitizer.context import SanitizerComponent, SanitizerContext
from input_sanitizer.faults import FaultCategory, SanitizerViolation
from input_sanitizer.lists.tokens import FILENAME_MALICIOUS_MARKERS
from input_sanitizer.normalizer import fold_to_ascii
from input_sanitizer.results import is_blank

WINDOWS_FILENAME_PATTERN: Final[str] = (
    r"^(?!^(PRN|AUX|CLOCK\$|NUL|CON|COM\d|LPT\d|\..*)(\..+)?$)"
    r'[^\x00-\x1f\\/:*?"<>|]+[^\x00-\x1f\\/:*?"<>| .]$'
)

MALICIOUS_MARKER_MESSAGE: Final[str] = "Filename contains potentially malicious characters."
MULTIPLE_DOTS_MESSAGE: Final[str] = "Filename contains more than one dot character."
MISSING_DOT_MESSAGE: Final[str] = "Filename does not contain at least one dot character."
INVALID_NAME_MESSAGE: Final[str] = "Filename is not a valid Windows filename."
EXTENSION_MISMATCH_MESSAGE: Final[str] = "Filename extension does not match the allowed extension."


class ExtensionGroup(StrEnum):
    """Families of extensions a caller may refuse."""

    EXECUTABLE = "executable"
    WEB = "web"
    OFFICE = "office"
    PDF = "pdf"
    MEDIA = "media"

    @property
    def extensions(self) -> frozenset[str]:
        return _EXTENSION_GROUPS[self]


_EXTENSION_GROUPS: Final[dict[ExtensionGroup, frozenset[str]]] = {
    ExtensionGroup.EXECUTABLE: frozenset(
        {
            "exe", "bat", "ps1", "ps1xml", "ps2", "ps2xml", "rb", "m", "go", "jar",
            "py", "cmd", "com", "lnk", "pif", "scr", "vb", "vbe", "js", "vbs", "rs",
            "wsh", "php", "application", "gadget", "msi", "ws", "wsf", "scf", "hta",
            "cpl", "msc", "jse", "wsc", "psc1", "psc2", "msh1", "msh2", "mshxml",
            "msh1xml", "msh2xml", "cgi", "reg", "inf", "rar",
        }
    ),
    ExtensionGroup.WEB: frozenset(
        {
            "svg", "htm", "html", "xhtml", "xbap", "xap", "swf", "spl", "xdp", "jsp",
            "htaccess", "phtml", "asp", "ashx", "aspx", "wsdl", "hta", "cgi",
        }
    ),
    ExtensionGroup.OFFICE: frozenset(
        {
            "xbap", "doc", "docx", "xls", "xlsx", "docm", "dotm", "xlsm", "xltm",
            "xlam", "ppt", "pptx", "pptm", "potm", "ppam", "ppsm", "sldm", "vsd",
            "wps", "xps", "odt", "mht", "mhtml", "ods", "xla", "slk", "xlsb", "xlt",
            "xltx", "xlw", "odp", "pot", "ppsx", "vss", "vst", "vsx", "vtx", "vsdx",
            "vssx", "vstx", "vsdm", "vssm", "vstm", "vsw", "vsl",
        }
    ),
    ExtensionGroup.PDF: frozenset({"xbap", "pdf", "fdf", "xfdf", "ps", "eps", "prn"}),
    ExtensionGroup.MEDIA: frozenset(
        {
            "xbap", "wmv", "mp3", "wav", "aif", "aiff", "mpa", "m4a", "wma", "flv",
            "avi", "mov", "mp4", "m4v", "mpeg", "mpg", "swf", "asf", "3gp", "ram",
            "f4v", "3g2",
        }
    ),
}


def strip_malicious_markers(name: str) -> str:
    for marker in FILENAME_MALICIOUS_MARKERS:
        name = name.replace(marker, "")
    return name


class FilenameValidator(SanitizerComponent):
    """Bound, cleanse, and grammar-check untrusted filenames."""

    category = FaultCategory.FILENAME_VALIDATE

    def __init__(self, context: SanitizerContext, bounder: LengthBounder | None = None) -> None:
        super().__init__(context)
        self._bounder = bounder if bounder is not None else LengthBounder(context)
        self._grammar: re.Pattern[str] | None = None
        if context.compile_patterns_eagerly:
            self._grammar = re.compile(WINDOWS_FILENAME_PATTERN, re.IGNORECASE)

    def sanitize(
        self,
        name: str | None,
        max_length: int,
        disallow_multiple_dots: bool,
        *,
        allowed_extension: str | None = None,
        disallowed_extensions: Iterable[ExtensionGroup] = frozenset(),
    ) -> str | None:
        if is_blank(name):
            return None
        assert name is not None

        bounded = self._bounder.bound(name, max_length)
        if bounded is None:
            return None

        stripped = strip_malicious_markers(bounded)
        result = stripped
        try:
            if len(stripped) < len(bounded):
                raise SanitizerViolation(MALICIOUS_MARKER_MESSAGE)

            result = fold_to_ascii(stripped)
            # NFKC maps look-alike dots such as U+FF0E and U+2024 onto ".".
            dots = max(stripped.count("."), result.count("."))
            if dots == 0:
                raise SanitizerViolation(MISSING_DOT_MESSAGE)
            if disallow_multiple_dots and dots > 1:
                raise SanitizerViolation(MULTIPLE_DOTS_MESSAGE)

            if not self._matches_grammar(result):
                raise SanitizerViolation(INVALID_NAME_MESSAGE)

            _check_extension(result, allowed_extension, disallowed_extensions)
        except SanitizerViolation as exc:
            self._fault(result, exc)

        return result

    def _matches_grammar(self, name: str) -> bool:
        if self._grammar is not None:
            return self._grammar.fullmatch(name) is not None
        return re.fullmatch(WINDOWS_FILENAME_PATTERN, name, re.IGNORECASE) is not None


def _check_extension(
    name: str,
    allowed_extension: str | None,
    disallowed_extensions: Iterable[ExtensionGroup],
) -> None:
    segments = name.split(".")
    if allowed_extension is not None:
        expected = allowed_extension.lstrip(".").lower()
        if segments[-1].lower() != expected:
            raise SanitizerViolation(EXTENSION_MISMATCH_MESSAGE)
        return

    # Every segment after the first counts, so "invoice.exe.pdf" is caught too.
    trailing = {segment.strip().lower() for segment in segments[1:]}
    for group in disallowed_extensions:
        group = ExtensionGroup(group)
        if trailing & group.extensions:
            raise SanitizerViolation(f"Filename contains {group.value} file extensions.")


__all__ = [
    "WINDOWS_FILENAME_PATTERN",
    "ExtensionGroup",
    "FilenameValidator",
    "strip_malicious_markers",
]
