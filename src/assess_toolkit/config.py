"""
Module: config

Purpose:
    Configuration dataclass for the standalone assessment facade and the
    answer boxes. Immutable configuration with validation on construction.

Key Classes:
    - AssessConfig: Defaults, file URL resolution, review asset locations
    - ConfigError: Malformed configuration file

Key Functions:
    - load_config(): Read AssessConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - standalone.StandaloneAssessment
    - answerboxes.file_upload: File URL resolution
    - rendering.pipeline: Placeholder markup
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from urllib.parse import quote

logger = logging.getLogger(__name__)

MISSING_QUESTION_HTML = '<div class="question-unavailable">This question is unavailable.</div>'


class ConfigError(Exception):
    """Configuration file could not be read."""
    pass


@dataclass(frozen=True)
class AssessConfig:
    """
    Configuration for rendering and answer capture (immutable).

    Attributes:
        default_show_hints: Hint budget used when no options are given
        file_base_url: Prefix prepended to uploaded file tokens
        asset_root: Root URL for static review assets (score icons)
        document_viewer_url: External viewer used to preview documents
        missing_question_html: Placeholder markup for unrenderable questions

    Example:
        >>> config = AssessConfig(file_base_url="https://files.example.org/")
        >>> config.file_url("ab12/essay.pdf")
        'https://files.example.org/ab12/essay.pdf'
    """

    default_show_hints: int = 3
    file_base_url: str = "/filestore/"
    asset_root: str = ""
    document_viewer_url: str = "https://docs.google.com/viewer"
    missing_question_html: str = MISSING_QUESTION_HTML

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.default_show_hints < 0:
            raise ValueError(f"default_show_hints must be non-negative: {self.default_show_hints}")
        if not self.file_base_url:
            raise ValueError("file_base_url must not be empty")

    def file_url(self, token: str) -> str:
        """Resolve a stored file token to a retrievable URL."""
        return f"{self.file_base_url}{quote(token)}"


def load_config(path: Path) -> AssessConfig:
    """
    Load configuration from a JSON object file.

    Unknown keys are ignored with a warning.

    Raises:
        ConfigError: If the file is missing, not JSON, or not an object
        ValueError: If a value fails validation
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a JSON object: {path}")

    known = {f.name for f in fields(AssessConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning(f"Ignoring unknown config keys in {path}: {unknown}")

    return AssessConfig(**{k: v for k, v in data.items() if k in known})
