#!/usr/bin/env python3
"""
Catalog Link Validation Script

Verifies every URL in the static learning-resource catalog:
- Duplicate URL / title detection per category
- Registry shape coverage (which entries skip the network)
- Live reachability via the batch verifier
- Fallback link preview for anything unreachable

Usage:
    python scripts/validate_catalog.py
    python scripts/validate_catalog.py --always-probe   # probe registry platforms too
    python scripts/validate_catalog.py --verbose
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from curator.catalog.data import CATALOG  # noqa: E402
from curator.catalog.selector import dedupe_resources  # noqa: E402
from curator.utils import setup_logging  # noqa: E402
from curator.verification.batch import BatchVerifier  # noqa: E402
from curator.verification.cache import InMemoryVerificationCache  # noqa: E402
from curator.verification.fallback import synthesize_fallback_url  # noqa: E402
from curator.verification.platforms import get_platform_registry  # noqa: E402
from curator.verification.verifier import LinkVerifier  # noqa: E402


def check_duplicates() -> list[str]:
    """Report entries that selection would silently drop as duplicates."""
    issues = []
    for category, topics in CATALOG.items():
        entries = [r for rs in topics.values() for r in rs]
        unique = dedupe_resources(entries)
        if len(unique) != len(entries):
            kept = {id(r) for r in unique}
            for r in entries:
                if id(r) not in kept:
                    issues.append(f"{category}: duplicate '{r.title}' ({r.url})")
    return issues


async def verify_catalog(always_probe: bool) -> list[tuple]:
    entries = [r for topics in CATALOG.values() for rs in topics.values() for r in rs]
    async with LinkVerifier(always_probe=always_probe) as verifier:
        batch = BatchVerifier(verifier, InMemoryVerificationCache())
        outcomes = await batch.verify_all([r.url for r in entries])
    return list(zip(entries, outcomes))


def main():
    parser = argparse.ArgumentParser(description="Validate catalog links")
    parser.add_argument("--always-probe", action="store_true", help="Probe registry platforms instead of trusting them")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show every entry, not just failures")
    args = parser.parse_args()

    setup_logging("DEBUG" if args.verbose else "WARNING")
    registry = get_platform_registry()

    print("=" * 60)
    print("CATALOG LINK VALIDATION")
    print("=" * 60)

    duplicates = check_duplicates()
    print(f"\nDuplicates: {len(duplicates)}")
    for issue in duplicates:
        print(f"  ! {issue}")

    results = asyncio.run(verify_catalog(args.always_probe))
    registry_hits = sum(1 for r, _ in results if registry.match(r.url))
    failures = [(r, o) for r, o in results if not o.is_reachable]

    print(f"\nEntries:        {len(results)}")
    print(f"Registry shape: {registry_hits}")
    print(f"Unreachable:    {len(failures)}")

    for resource, outcome in results:
        if outcome.is_reachable and not args.verbose:
            continue
        mark = "OK  " if outcome.is_reachable else "FAIL"
        reason = outcome.failure_reason.value if outcome.failure_reason else ""
        print(f"  [{mark}] {outcome.method.value:<14} {resource.url} {reason}")
        if not outcome.is_reachable:
            print(f"         fallback: {synthesize_fallback_url(resource.url, resource.type, resource.title)}")

    sys.exit(1 if failures or duplicates else 0)


if __name__ == "__main__":
    main()
