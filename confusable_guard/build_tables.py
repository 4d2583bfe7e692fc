"""Refresh the bundled ``confusables.txt`` from unicode.org.

Downloads the upstream file, parses it followed by the amendments file into a
scratch store, and only writes the new data file when both parse cleanly.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import httpx

from confusable_guard.config import get_settings
from confusable_guard.errors import ConfusablesError
from confusable_guard.net.http_client import fetch_lines, get_http_client
from confusable_guard.parser import load_mappings
from confusable_guard.store import DictMappingStore
from confusable_guard.telemetry.logging import bind, configure_root_logging

log = bind(logging.getLogger(__name__), component="build_tables")


def build(
    url: str,
    amendments: Path,
    out: Optional[Path],
    client: Optional[httpx.Client] = None,
) -> DictMappingStore:
    """Fetch, validate and (unless ``out`` is ``None``) write the data file."""
    lines: List[str] = list(fetch_lines(url, client=client))

    store = DictMappingStore()
    upstream = load_mappings(lines, store, name="upstream")
    with amendments.open("rb") as fh:
        amended = load_mappings(fh, store, name=amendments.name)
    log.info(
        "validated mapping data",
        extra={"upstream_entries": upstream, "amendments": amended, "size": len(store)},
    )

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text("\n".join(lines) + "\n", encoding="utf-8")
        log.info("wrote %s", out)
    return store


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--url", default=settings.CONFUSABLES_UPSTREAM_URL)
    parser.add_argument("--amendments", type=Path, default=settings.amendments_path)
    parser.add_argument("--out", type=Path, default=settings.data_path)
    parser.add_argument(
        "--dry-run", action="store_true", help="validate only, do not write the data file"
    )
    args = parser.parse_args(argv)

    configure_root_logging(settings.LOG_LEVEL, json_lines=settings.LOG_JSON)

    out = None if args.dry_run else args.out
    try:
        with get_http_client() as client:
            store = build(args.url, args.amendments, out, client=client)
    except (ConfusablesError, OSError) as exc:
        log.error("unable to build tables: %s", exc)
        return 1

    print(f"{len(store)} mappings" + ("" if out is None else f" written to {out}"))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
