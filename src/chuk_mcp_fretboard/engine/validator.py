"""
Configuration Validator - checks a CatalogConfig before any enumeration.

Validates:
- Tuning has between 1 and MAX_STRING_COUNT strings
- Every open pitch class is in 0-11
- max_fret is within 0..MAX_FRET_LIMIT
- min_strings_sounded is within 0..string count
- Playability limits are non-negative
- max_per_chord is positive
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_fretboard.constants import MAX_FRET_LIMIT, MAX_STRING_COUNT, ErrorMessages
from chuk_mcp_fretboard.errors import ConfigurationError, InvalidBounds, InvalidTuning
from chuk_mcp_fretboard.models.config import CatalogConfig

logger = logging.getLogger(__name__)


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Aborts the run
    WARNING = "warning"  # Run proceeds


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None
    error_type: type[ConfigurationError] = ConfigurationError

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"


class ValidationResult:
    """Result of validating a configuration."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add_error(
        self,
        error_type: type[ConfigurationError],
        message: str,
        location: str | None = None,
    ) -> None:
        """Add an error issue."""
        self.issues.append(
            ValidationIssue(
                ValidationSeverity.ERROR, error_type.code, message, location, error_type
            )
        )

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings are OK)."""
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def raise_for_errors(self) -> None:
        """Raise the first error as its ConfigurationError subclass."""
        if self.errors:
            first = self.errors[0]
            raise first.error_type(first.message)

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class ConfigValidator:
    """Validates catalog configuration."""

    def validate(self, config: CatalogConfig) -> ValidationResult:
        """
        Validate a configuration.

        Args:
            config: The configuration to validate

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        self._validate_tuning(config, result)
        self._validate_bounds(config, result)
        self._validate_playability(config, result)

        return result

    def _validate_tuning(self, config: CatalogConfig, result: ValidationResult) -> None:
        """Validate string count and open pitch classes."""
        strings = config.tuning.strings
        if not strings:
            result.add_error(InvalidTuning, ErrorMessages.NO_STRINGS, "tuning.strings")
            return

        if len(strings) > MAX_STRING_COUNT:
            result.add_error(
                InvalidTuning,
                ErrorMessages.TOO_MANY_STRINGS.format(count=len(strings), limit=MAX_STRING_COUNT),
                "tuning.strings",
            )

        for index, string in enumerate(strings):
            if not 0 <= string.pitch_class <= 11:
                result.add_error(
                    InvalidTuning,
                    ErrorMessages.INVALID_PITCH_CLASS.format(
                        index=index, value=string.pitch_class
                    ),
                    f"tuning.strings[{index}]",
                )

    def _validate_bounds(self, config: CatalogConfig, result: ValidationResult) -> None:
        """Validate fret range, sounded-string minimum and group cap."""
        if config.max_fret < 0:
            result.add_error(
                InvalidBounds,
                ErrorMessages.NEGATIVE_MAX_FRET.format(value=config.max_fret),
                "max_fret",
            )
        elif config.max_fret > MAX_FRET_LIMIT:
            result.add_error(
                InvalidBounds,
                ErrorMessages.MAX_FRET_TOO_LARGE.format(
                    limit=MAX_FRET_LIMIT, value=config.max_fret
                ),
                "max_fret",
            )

        string_count = len(config.tuning.strings)
        if not 0 <= config.min_strings_sounded <= string_count:
            result.add_error(
                InvalidBounds,
                ErrorMessages.INVALID_MIN_STRINGS.format(
                    count=string_count, value=config.min_strings_sounded
                ),
                "min_strings_sounded",
            )
        elif config.min_strings_sounded < 2:
            result.add_warning(
                "FEW_STRINGS",
                "Fewer than 2 sounded strings can never form a registered chord",
                "min_strings_sounded",
            )

        if config.max_per_chord < 1:
            result.add_error(
                InvalidBounds,
                ErrorMessages.INVALID_MAX_PER_CHORD.format(value=config.max_per_chord),
                "max_per_chord",
            )

    def _validate_playability(self, config: CatalogConfig, result: ValidationResult) -> None:
        """Validate that every ergonomic limit is non-negative."""
        playability = config.playability
        for field in ("max_span", "max_fingers", "max_muted"):
            value = getattr(playability, field)
            if value < 0:
                result.add_error(
                    InvalidBounds,
                    ErrorMessages.NEGATIVE_PLAYABILITY.format(field=field, value=value),
                    f"playability.{field}",
                )


def validate_config(config: CatalogConfig) -> ValidationResult:
    """Validate, log warnings and raise InvalidTuning / InvalidBounds on the first error."""
    result = ConfigValidator().validate(config)
    for issue in result.warnings:
        logger.warning(str(issue))
    result.raise_for_errors()
    return result
