#!/usr/bin/env python3
"""
Validate a persisted session state file.

Checks structure (and optionally the JSON schema), prints a per-question
summary, and can write the state back out in normalized form.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import assess_toolkit
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from assess_toolkit.core.schemas.validator import StateValidationError
from assess_toolkit.core.utils.serialization import load_state_json, save_state_json

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger("validate_state")


def summarize(path: Path, strict: bool, output: Path | None) -> int:
    try:
        state = load_state_json(path, strict=strict)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 2
    except StateValidationError as e:
        logger.error(f"{path}: {e}")
        for problem in e.errors:
            logger.error(f"  - {problem}")
        return 1

    logger.info(f"{path}: valid ({len(state.seeds)} questions)")
    for qn in sorted(state.seeds):
        attempts = state.part_attempts(qn)
        raw = state.raw_scores_for(qn)
        logger.info(
            f"  q{qn}: set={state.question_set_for(qn)} seed={state.seed_for(qn)} "
            f"attempt={state.attempt_number(qn)} parts_scored={len(attempts)} raw={raw}"
        )

    if output is not None:
        save_state_json(state, output)
        logger.info(f"Wrote normalized state to {output}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Validate a session state JSON file")
    parser.add_argument("state", type=Path, help="Path to the session state JSON file")
    parser.add_argument("--strict", action="store_true", help="Also validate against the JSON schema")
    parser.add_argument("--output", type=Path, help="Write the normalized state to this path")
    args = parser.parse_args()

    raise SystemExit(summarize(args.state, args.strict, args.output))
