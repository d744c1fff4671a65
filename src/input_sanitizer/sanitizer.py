"""
input-sanitizer — top-level sanitizer facade

File: src/input_sanitizer/sanitizer.py
Last updated: 2026-10-19

Purpose
- Own one ``SanitizerContext`` and expose every component bound to it.

Functional requirements
- Components share the owning context by reference.
- Independent ``Sanitizer`` instances never share fault logs or policies.
- ``from_config`` builds an instance from the loaded ``sanitizer.toml`` settings.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

from input_sanitizer.bounding import LengthBounder
from input_sanitizer.clamp.dates import DateClamp
from input_sanitizer.clamp.numeric import NumericClamp
from input_sanitizer.config.loader import load_settings
from input_sanitizer.config.schema import SanitizerSettings
from input_sanitizer.context import SanitizerContext
from input_sanitizer.faults import FaultPolicy, FaultRecord
from input_sanitizer.filenames import FilenameValidator
from input_sanitizer.lists.allow_list import AllowList
from input_sanitizer.lists.restricted_list import RestrictedList
from input_sanitizer.normalizer import Normalizer
from input_sanitizer.observability.logging import configure_logging


class Sanitizer:
    """Entry point bundling length bounding, normalization, clamps, and list checks."""

    def __init__(
        self,
        policy: FaultPolicy = FaultPolicy.THROW,
        *,
        compile_patterns_eagerly: bool = True,
        logger: Any | None = None,
        log_fault_events: bool = True,
    ) -> None:
        self._context = SanitizerContext(
            FaultPolicy(policy),
            compile_patterns_eagerly=compile_patterns_eagerly,
            logger=logger,
            log_fault_events=log_fault_events,
        )
        self.bounder = LengthBounder(self._context)
        self.normalizer = Normalizer(self._context)
        self.numbers = NumericClamp(self._context)
        self.dates = DateClamp(self._context)
        self.allow_list = AllowList(self._context, self.bounder)
        self.restricted_list = RestrictedList(self._context, self.bounder)
        self.filenames = FilenameValidator(self._context, self.bounder)

    @classmethod
    def from_settings(
        cls,
        settings: SanitizerSettings,
        *,
        logger: Any | None = None,
        configure_logs: bool = False,
        log_stream: TextIO | None = None,
    ) -> Sanitizer:
        """Build a sanitizer from ``settings``.

        With ``configure_logs`` the process-wide ``input_sanitizer`` handler is
        (re)installed from ``settings.log_level`` and ``settings.json_logs``.
        """
        if configure_logs:
            configure_logging(settings.log_level, json_logs=settings.json_logs, stream=log_stream)
        return cls(
            settings.policy,
            compile_patterns_eagerly=settings.compile_patterns_eagerly,
            logger=logger,
            log_fault_events=settings.log_fault_events,
        )

    @classmethod
    def from_config(
        cls,
        config_path: str | Path | None = None,
        *,
        profile: str | None = None,
        cli_overrides: Mapping[str, object] | None = None,
        environ: Mapping[str, str] | None = None,
        logger: Any | None = None,
        configure_logs: bool = False,
        log_stream: TextIO | None = None,
    ) -> Sanitizer:
        """Build a sanitizer from ``sanitizer.toml``, ``SANITIZER_*`` env vars, and overrides."""
        settings = load_settings(
            config_path,
            profile=profile,
            cli_overrides=cli_overrides,
            environ=environ,
        )
        return cls.from_settings(
            settings, logger=logger, configure_logs=configure_logs, log_stream=log_stream
        )

    @property
    def context(self) -> SanitizerContext:
        return self._context

    @property
    def policy(self) -> FaultPolicy:
        return self._context.policy

    @property
    def faults(self) -> Mapping[str, FaultRecord]:
        return self._context.faults

    def clear_faults(self) -> None:
        """Drop recorded faults; callers should do this once they have read them."""
        self._context.sink.clear()


__all__ = ["Sanitizer"]
