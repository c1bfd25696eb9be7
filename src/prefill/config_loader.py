"""
Config loader (Raw Input → FormSpec).

Reads the operator's form definition from YAML (default) or JSON.

Config Format:
    base_url: https://docs.google.com/forms/d/e/XXXX/viewform?usp=sf_link
    entries:
      - question_id: "917226918"
        answer: Tokyo
        comment: Office location

Notes:
    - YAML is read with BaseLoader, so every scalar stays the exact text
      written (0012345, yes, 1.10 are not turned into numbers or booleans)
    - JSON question_id/answer must be strings; numbers are rejected
    - Missing answer/comment default to ""
    - Empty question ids are NOT rejected here; the builder reports them
      with their position
"""

from __future__ import annotations

import json
import logging
import os
import warnings
from typing import Any, Dict

import yaml

from prefill.exceptions import ConfigurationError
from prefill.model import Entry, FormSpec

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "form.yaml"

ENTRY_KEYS = ("question_id", "answer", "comment")


def _format_for_path(path: str) -> str:
    return "json" if path.lower().endswith(".json") else "yaml"


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def entry_from_dict(d: Dict[str, Any], index: int, source: str = "<string>") -> Entry:
    if not isinstance(d, dict):
        raise ConfigurationError(source, f"entry {index} must be a mapping, got {type(d).__name__}")

    unknown = sorted(str(k) for k in d if k not in ENTRY_KEYS)
    if unknown:
        warnings.warn(f"Entry {index}: ignoring unknown keys {unknown}", UserWarning)

    for key in ENTRY_KEYS:
        if isinstance(d.get(key), (dict, list)):
            # An unquoted {today} is read by YAML as a mapping
            raise ConfigurationError(
                source, f'entry {index}: {key} must be a scalar (quote values such as "{{today}}")'
            )

    for key in ("question_id", "answer"):
        value = d.get(key)
        if value is not None and not isinstance(value, str):
            # str() would turn 1.10 into "1.1"
            raise ConfigurationError(
                source, f"entry {index}: {key} must be a string, got {value!r} (quote it)"
            )

    return Entry(
        question_id=_to_text(d.get("question_id")),
        answer=_to_text(d.get("answer")),
        comment=_to_text(d.get("comment")),
    )


def entry_to_dict(e: Entry) -> Dict[str, Any]:
    return {"question_id": e.question_id, "answer": e.answer, "comment": e.comment}


def form_spec_from_dict(d: Any, source: str = "<string>") -> FormSpec:
    """
    Build a FormSpec from a parsed config document.

    Args:
        d: Parsed YAML/JSON document
        source: Where the document came from (used in error messages)

    Returns:
        FormSpec

    Raises:
        ConfigurationError: If the document does not have the expected shape
    """
    if not isinstance(d, dict):
        raise ConfigurationError(source, "top level must be a mapping")

    base_url = _to_text(d.get("base_url")).strip()
    if not base_url:
        raise ConfigurationError(source, "base_url is required")

    raw_entries = d.get("entries") or []
    if not isinstance(raw_entries, list):
        raise ConfigurationError(source, "entries must be a list")

    spec = FormSpec(
        base_url=base_url,
        entries=[entry_from_dict(e, i, source) for i, e in enumerate(raw_entries)],
    )

    duplicates = spec.duplicate_question_ids()
    if duplicates:
        kept = ", ".join(f"{qid}={spec.get_entry(qid).answer!r}" for qid in duplicates)
        warnings.warn(
            f"Duplicate question ids {duplicates}: the last entry for each wins ({kept})",
            UserWarning,
        )

    return spec


def form_spec_to_dict(spec: FormSpec) -> Dict[str, Any]:
    return {
        "base_url": spec.base_url,
        "entries": [entry_to_dict(e) for e in spec.entries],
    }


def form_spec_to_json(spec: FormSpec) -> str:
    return json.dumps(form_spec_to_dict(spec), ensure_ascii=False, indent=2)


def form_spec_to_yaml(spec: FormSpec) -> str:
    return yaml.safe_dump(form_spec_to_dict(spec), allow_unicode=True, sort_keys=False)


def load_config_string(content: str, fmt: str = "yaml", source: str = "<string>") -> FormSpec:
    """
    Parse config text into a FormSpec.

    Args:
        content: YAML or JSON text
        fmt: "yaml" or "json"
        source: Name used in error messages

    Raises:
        ConfigurationError: If the text cannot be parsed or is malformed
    """
    try:
        if fmt == "json":
            data = json.loads(content)
        else:
            data = yaml.load(content, Loader=yaml.BaseLoader)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(source, f"cannot parse {fmt}: {e}") from e

    return form_spec_from_dict(data, source)


def load_config_file(filepath: str) -> FormSpec:
    """
    Load a FormSpec from a YAML or JSON file (chosen by extension).

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError as e:
        raise ConfigurationError(filepath, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(filepath, f"cannot read file: {e}") from e

    spec = load_config_string(content, fmt=_format_for_path(filepath), source=filepath)
    logger.info("Loaded %d entries from %s", len(spec.entries), filepath)
    return spec


def save_config_file(spec: FormSpec, filepath: str, overwrite: bool = False) -> None:
    """
    Write a FormSpec as YAML or JSON (chosen by extension).

    Raises:
        ConfigurationError: If the file exists and overwrite is False
    """
    if os.path.exists(filepath) and not overwrite:
        raise ConfigurationError(filepath, "file already exists")

    if _format_for_path(filepath) == "json":
        text = form_spec_to_json(spec) + "\n"
    else:
        text = form_spec_to_yaml(spec)

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info("Wrote %d entries to %s", len(spec.entries), filepath)


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigurationError",
    "form_spec_from_dict",
    "form_spec_to_dict",
    "form_spec_to_json",
    "form_spec_to_yaml",
    "load_config_string",
    "load_config_file",
    "save_config_file",
]
