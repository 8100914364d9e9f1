"""Settings validation service.

Bridges raw configuration (files, JSON payloads, mappings) to the domain
``Settings`` model and reports the outcome as a ServiceResult.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from annotations_policy.domain.errors import (
    InvalidAnnotationNamesError,
    SettingsValidationError,
)
from annotations_policy.domain.settings import Settings
from annotations_policy.services.result import ServiceResult

log = structlog.get_logger(__name__)

OP_VALIDATE = "validate_settings"

INVALID_SETTINGS = "INVALID_SETTINGS"
UNREADABLE_SETTINGS = "UNREADABLE_SETTINGS"

Payload = Mapping[str, Any] | str | bytes | None


def _describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into one line: ``loc: msg; loc: msg``."""
    parts: list[str] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def validate_settings(settings: Settings, *, meta: dict[str, Any] | None = None) -> ServiceResult:
    """Validate *settings* and report the outcome.

    Success carries the criterion tag and its (sorted) values. Failure
    carries the domain error's code and unchanged message.
    """
    criterion = settings.criterion
    try:
        settings.validate()
    except SettingsValidationError as exc:
        detail: dict[str, Any] = {}
        if isinstance(exc, InvalidAnnotationNamesError):
            detail["invalid"] = exc.names
        log.info(
            "settings rejected",
            criteria=criterion.criteria,
            code=exc.code,
            reason=exc.message,
        )
        return ServiceResult.failure(OP_VALIDATE, exc.code, exc.message, detail=detail, meta=meta)

    values = sorted(criterion.values())
    log.debug("settings accepted", criteria=criterion.criteria, count=len(values))
    return ServiceResult(
        ok=True,
        op=OP_VALIDATE,
        data={"criteria": criterion.criteria, "values": values},
        meta=meta,
    )


def validate_settings_payload(
    payload: Payload, *, meta: dict[str, Any] | None = None
) -> ServiceResult:
    """Deserialize *payload* into Settings, then validate it.

    *payload* may be a mapping, a JSON document (str or bytes), or None,
    which stands for the default settings.
    """
    try:
        if payload is None:
            settings = Settings.default()
        elif isinstance(payload, (str, bytes)):
            settings = Settings.model_validate_json(payload)
        else:
            settings = Settings.model_validate(dict(payload))
    except ValidationError as exc:
        message = _describe_validation_error(exc)
        log.info("settings could not be deserialized", reason=message)
        return ServiceResult.failure(OP_VALIDATE, INVALID_SETTINGS, message, meta=meta)
    return validate_settings(settings, meta=meta)


def _read_document(path: Path) -> Any:
    raw = path.read_text(encoding="utf-8")
    if path.suffix == ".toml":
        return tomllib.loads(raw)
    # YAML is a superset of JSON, so one parser serves .yml, .yaml and .json.
    return YAML(typ="safe", pure=True).load(raw)


def load_settings_file(path: Path) -> ServiceResult:
    """Read a YAML, JSON, or TOML settings file and validate it."""
    meta = {"path": str(path)}
    try:
        document = _read_document(path)
    except OSError as exc:
        message = f"Cannot read {path}: {exc.strerror or exc}"
        log.info("settings file unreadable", path=str(path), reason=message)
        return ServiceResult.failure(OP_VALIDATE, UNREADABLE_SETTINGS, message, meta=meta)
    except UnicodeDecodeError as exc:
        message = f"Cannot read {path}: not valid UTF-8 ({exc.reason} at byte {exc.start})"
        log.info("settings file unreadable", path=str(path), reason=message)
        return ServiceResult.failure(OP_VALIDATE, UNREADABLE_SETTINGS, message, meta=meta)
    except (tomllib.TOMLDecodeError, YAMLError) as exc:
        message = f"Invalid settings document in {path}: {exc}"
        log.info("settings file unparseable", path=str(path))
        return ServiceResult.failure(OP_VALIDATE, UNREADABLE_SETTINGS, message, meta=meta)

    if document is not None and not isinstance(document, Mapping):
        message = f"Settings document in {path} must be a mapping"
        return ServiceResult.failure(OP_VALIDATE, INVALID_SETTINGS, message, meta=meta)
    return validate_settings_payload(document, meta=meta)


def dump_settings(settings: Settings) -> str:
    """Render *settings* as the JSON document the policy accepts."""
    data = settings.model_dump(mode="json", by_alias=True)
    data["values"] = sorted(data["values"])
    return json.dumps(data, indent=2)
