import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from fmtkit.rules.models import FormatRules

logger = logging.getLogger(__name__)


def default_rules() -> FormatRules:
    """Rules with every section at its library default."""
    return FormatRules()


def load_rules(path: Path) -> FormatRules:
    """
    Load and validate a YAML rules file.

    Sections and fields left out of the file keep their defaults; an empty
    file yields default_rules().

    Raises:
        FileNotFoundError: path does not exist.
        ValueError: the YAML is malformed, is not a mapping, or fails
            schema validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Rules file must hold a mapping, got {type(data).__name__}")

    try:
        rules = FormatRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded format rules from %s", path)
    return rules
