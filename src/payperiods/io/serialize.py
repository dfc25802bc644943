"""Serialization for pay-period settings and calculation results."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from payperiods.config.defaults import default_settings
from payperiods.config.schema import PayPeriodSettings
from payperiods.core.aggregator import PayPeriod, PayPeriodCalculation
from payperiods.io.yaml_loader import dump_yaml, load_yaml
from payperiods.utils.exceptions import MalformedConfigJSON

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def parse_settings(data: Any) -> PayPeriodSettings:
    """Validate already-decoded settings data.

    Raises:
        MalformedConfigJSON: If the data does not describe valid settings.
        InvalidDateFormat: If a config carries an unparseable start date.
    """
    try:
        return PayPeriodSettings.model_validate(data)
    except ValidationError as exc:
        raise MalformedConfigJSON(f"Invalid pay period settings: {exc}") from exc


def decode_settings(json_str: str) -> PayPeriodSettings:
    """Decode a persisted settings blob, raising on any malformation.

    Raises:
        MalformedConfigJSON: If the blob is not valid JSON or not valid settings.
    """
    try:
        data = json.loads(json_str)
    except (TypeError, ValueError) as exc:
        raise MalformedConfigJSON(f"Pay period settings are not valid JSON: {exc}") from exc
    return parse_settings(data)


def load_settings(json_str: str | None) -> PayPeriodSettings:
    """Load persisted settings, recovering from malformed blobs.

    A missing, unparseable, or invalid blob yields the default disabled
    settings and logs a warning. Invalid dates still propagate.
    """
    if not json_str:
        return default_settings()
    try:
        return decode_settings(json_str)
    except MalformedConfigJSON as exc:
        logger.warning("Falling back to default pay period settings: %s", exc)
        return default_settings()


def load_settings_file(path: Path) -> PayPeriodSettings:
    """Load settings from a JSON or YAML file.

    Unlike :func:`load_settings`, malformed content raises instead of
    falling back, since the caller named the file explicitly.

    Raises:
        MalformedConfigJSON: If the content is not valid settings.
    """
    is_yaml = path.suffix.lower() in YAML_SUFFIXES
    try:
        content = load_yaml(path) if is_yaml else path.read_text(encoding="utf-8")
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise MalformedConfigJSON(f"Cannot read pay period settings from {path}: {exc}") from exc
    if is_yaml:
        return parse_settings(content)
    return decode_settings(content)


def dump_settings(settings: PayPeriodSettings) -> str:
    """Serialize settings to camelCase JSON with ISO dates."""
    return json.dumps(settings.model_dump(mode="json", by_alias=True), indent=2)


def dump_settings_yaml(settings: PayPeriodSettings) -> str:
    """Serialize settings to YAML with the same field names as the JSON form."""
    return dump_yaml(settings.model_dump(mode="json", by_alias=True))


def dump_periods(periods: Iterable[PayPeriod]) -> str:
    """Serialize a sequence of periods to a JSON array."""
    data = [p.model_dump(mode="json", by_alias=True) for p in periods]
    return json.dumps(data, indent=2)


def dump_calculation(calculation: PayPeriodCalculation) -> str:
    """Serialize a calculation snapshot to JSON."""
    return json.dumps(calculation.to_dict(), indent=2)
