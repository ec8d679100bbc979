#!/usr/bin/env python3
"""
validate_content.py - Assemble, lint and cross-check curriculum content.

Loads every requested language from the content directory, assembles it
(failing on malformed blocks, unknown kinds and duplicate ids), runs the
authoring lint and checks each translation against a reference language.

Exit status is 1 when any language fails to assemble or diverges
structurally from the reference; lint warnings alone never fail.

Usage:
  python scripts/validate_content.py
  python scripts/validate_content.py --content content --reference pt --languages pt es
  python scripts/validate_content.py --skip-unknown --report validation.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from cursus.classroom import (
    available_languages,
    check_consistency,
    lint_curriculum,
    load_curricula,
)
from cursus.config import CONTENT_DIR, DEFAULT_LANGUAGE, LOG_LEVEL, setup_logging

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Validation steps
# -----------------------------------------------------------------------------

def build_report(curricula, errors, warnings, mismatches) -> dict:
    return {
        "languages": {
            language: {
                "assembled": language in curricula,
                "error": errors.get(language),
                "topics": sum(1 for _ in curricula[language].iter_topics()) if language in curricula else 0,
                "lint": [str(w) for w in warnings.get(language, [])],
                "mismatches": [str(m) for m in mismatches.get(language, [])],
            }
            for language in sorted(set(curricula) | set(errors))
        },
    }


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main() -> int:
    parser = argparse.ArgumentParser(
        description="Validate multi-language curriculum content",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--content",
        type=Path,
        default=CONTENT_DIR,
        help="Content root (one subdirectory per language)"
    )
    parser.add_argument(
        "--languages",
        nargs="+",
        default=None,
        help="Languages to validate (default: all found under --content)"
    )
    parser.add_argument(
        "--reference",
        default=DEFAULT_LANGUAGE,
        help="Language whose structure the others must match"
    )
    parser.add_argument(
        "--skip-unknown",
        action="store_true",
        help="Drop blocks with unknown kinds instead of failing"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=4,
        help="Number of languages loaded in parallel"
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a JSON report to this path"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: CURSUS_LOG_LEVEL or INFO)"
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    languages = args.languages or available_languages(args.content)
    if not languages:
        logger.error(f"No curricula found in {args.content}")
        return 1

    # Assemble
    logger.info(f"Loading {', '.join(languages)} from {args.content}...")
    errors = {}
    curricula = load_curricula(
        args.content, languages, args.workers,
        skip_unknown=args.skip_unknown, errors=errors,
    )

    # Lint
    warnings = {}
    for language, curriculum in curricula.items():
        warnings[language] = lint_curriculum(curriculum)

    # Cross-language structure
    mismatches = {}
    reference = curricula.get(args.reference)
    if reference is None:
        logger.warning(f"Reference language '{args.reference}' not assembled; skipping consistency check")
    else:
        for language, curriculum in curricula.items():
            if language == args.reference:
                continue
            found = check_consistency(reference, curriculum)
            mismatches[language] = found
            for mismatch in found[:10]:
                logger.error(f"[{language}] {mismatch}")
            if len(found) > 10:
                logger.error(f"[{language}] ... and {len(found) - 10} more")

    if args.report:
        with open(args.report, "w", encoding="utf-8") as f:
            json.dump(build_report(curricula, errors, warnings, mismatches), f, indent=2, ensure_ascii=False)
        logger.info(f"Saved report to: {args.report}")

    # Summary
    divergent = sorted(language for language, found in mismatches.items() if found)
    logger.info("=" * 50)
    logger.info("VALIDATION COMPLETE")
    logger.info("=" * 50)
    logger.info(f"Assembled: {len(curricula)}/{len(languages)} languages")
    logger.info(f"Lint warnings: {sum(len(w) for w in warnings.values())}")
    if errors:
        logger.error(f"Failed to assemble: {', '.join(sorted(errors))}")
    if divergent:
        logger.error(f"Structurally divergent from '{args.reference}': {', '.join(divergent)}")

    return 1 if errors or divergent else 0


if __name__ == "__main__":
    sys.exit(main())
