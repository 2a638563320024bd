"""
Check that every configured term source loads.
Execute from project root:  python -m scripts.check_sources

Exit code 1 when the load fails, 0 otherwise (including an all-empty load, which is only a warning).
"""

import argparse
import logging
import sys

from components.insights import get_load_summary
from data.loaders.term_loader import load_terms
from data.models import LoadStatus
from utils.config import get_app_config, get_sources_config, get_subject_sources

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load all term sources and report per-subject counts.")
    parser.add_argument("--policy", choices=["all_or_nothing", "partial"], help="Override sources.load_policy")
    parser.add_argument("--timeout", type=float, help="Override sources.timeout_seconds")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_app_config().get("log_level", "INFO"))
    cfg = get_sources_config()
    sources = get_subject_sources()
    print(f"Checking {len(sources)} term sources\n")
    result = load_terms(
        sources,
        timeout=args.timeout if args.timeout is not None else cfg.get("timeout_seconds"),
        max_workers=cfg.get("max_workers"),
        policy=args.policy or cfg["load_policy"],
    )

    for w in result.warnings:
        print("  Warning:", w)
    if result.status == LoadStatus.FAILED:
        print("  Failed:", result.error)
        return 1
    if result.no_terms_found:
        print("  ", result.notice)
        return 0
    print("  " + get_load_summary(result.counts).replace("**", ""))
    return 0


if __name__ == "__main__":
    sys.exit(main())
