"""Top-level package for the assessment toolkit.

Renders and scores randomized, multi-part assessment questions against a
caller-owned session state record.

Provides subpackages:
- assess_toolkit.core – session state model, validation, serialization
- assess_toolkit.rendering – read-only render transition, script extraction
- assess_toolkit.scoring – score transition and merge rules
- assess_toolkit.engines – Question Generator / Score Engine contracts, store
- assess_toolkit.answerboxes – answer-entry widget variants
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("assess-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 assess-toolkit contributors"

from .core.models import SessionState, RenderOptions, ALL_PARTS, RenderResult, ScoreResult
from .standalone import StandaloneAssessment

__all__: list[str] = [
    "__version__",
    "SessionState",
    "RenderOptions",
    "ALL_PARTS",
    "RenderResult",
    "ScoreResult",
    "StandaloneAssessment",
]
