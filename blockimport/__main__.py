"""CLI entry point: python -m blockimport PAGE.html --block 'SELECTOR=Variant' [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from blockimport import settings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockimport",
        description=(
            "Convert card grids, carousels, tab panels and link columns of a\n"
            "saved HTML page into normalized block tables."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("page", metavar="PAGE",
                        help="Path to a saved HTML page ('-' reads stdin)")
    parser.add_argument("--block", action="append", default=[], metavar="SELECTOR=VARIANT",
                        help="Parse containers matching SELECTOR as VARIANT (repeatable)")
    parser.add_argument("--profile", default=None, metavar="FILE",
                        help="YAML profile with block mappings and selector overrides")
    parser.add_argument("--url", default="", metavar="URL",
                        help="Original page URL (selects the profile's domain section)")
    parser.add_argument("--format", default=settings.DEFAULT_OUTPUT_FORMAT,
                        choices=list(settings.OUTPUT_FORMATS),
                        help=f"Output format (default: {settings.DEFAULT_OUTPUT_FORMAT})")
    parser.add_argument("--out", default=None, metavar="FILE",
                        help="Write output to FILE instead of stdout")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    parser.add_argument("--quiet", action="store_true", default=False,
                        help="Do not print the block summary")
    return parser


def _parse_block_args(values: list[str]) -> dict[str, str] | str:
    """Return the selector map, or an error message for a malformed value."""
    blocks: dict[str, str] = {}
    for value in values:
        selector, sep, variant = value.rpartition("=")
        if not sep or not selector.strip() or not variant.strip():
            return f"Invalid --block value {value!r}: expected SELECTOR=VARIANT"
        blocks[selector.strip()] = variant.strip()
    return blocks


def _read_page(page: str) -> str:
    if page == "-":
        return sys.stdin.read()
    return Path(page).read_text(encoding="utf-8")


def _print_summary(result: object) -> None:
    try:
        from rich import box
        from rich.console import Console
        from rich.table import Table

        console = Console(stderr=True)
        blocks = getattr(result, "blocks", [])
        skipped = getattr(result, "skipped", [])

        tbl = Table(
            title=f"[bold green]Blocks created ({len(blocks)})[/bold green]",
            box=box.SIMPLE_HEAVY,
            show_lines=False,
        )
        tbl.add_column("#",       style="dim",   justify="right", width=4, no_wrap=True)
        tbl.add_column("Variant", style="cyan",  no_wrap=True)
        tbl.add_column("Rows",    justify="right", width=6, no_wrap=True)
        tbl.add_column("Columns", justify="right", width=8, no_wrap=True)
        for i, block in enumerate(blocks, 1):
            tbl.add_row(str(i), block.name, str(len(block.rows)), str(block.column_count))
        console.print(tbl)

        if skipped:
            stbl = Table(
                title=f"[bold yellow]Skipped containers ({len(skipped)})[/bold yellow]",
                box=box.SIMPLE_HEAVY,
                show_lines=False,
            )
            stbl.add_column("Selector", style="blue", max_width=50, no_wrap=True)
            stbl.add_column("Variant",  style="cyan", no_wrap=True)
            stbl.add_column("Reason",   style="red",  no_wrap=True)
            for s in skipped:
                stbl.add_row(s.selector, s.variant, s.reason)
            console.print(stbl)
    except Exception as exc:
        logger.debug("Rich summary display failed: %s", exc)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=settings.LOG_FORMAT,
        stream=sys.stderr,
    )

    blocks = _parse_block_args(args.block)
    if isinstance(blocks, str):
        print(f"ERROR: {blocks}", file=sys.stderr)
        return 1

    from blockimport.importer import BlockImporter
    from blockimport.profiles import ProfileError
    from blockimport.selectors import UnknownVariantError

    if not blocks and not args.profile:
        print("ERROR: give at least one --block or a --profile", file=sys.stderr)
        return 1

    try:
        html = _read_page(args.page)
    except OSError as exc:
        print(f"ERROR: Cannot read {args.page}: {exc}", file=sys.stderr)
        return 1

    importer = BlockImporter(profile_path=args.profile, blocks=blocks)
    try:
        result = importer.import_html(html, url=args.url)
    except (ProfileError, UnknownVariantError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        output = result.to_schema().model_dump_json(indent=2)
    else:
        output = result.html

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output, encoding="utf-8")
        logger.info("Wrote %s", out_path)
    else:
        sys.stdout.write(output)
        sys.stdout.write("\n")

    if not args.quiet:
        _print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
