#!/usr/bin/env python3
"""
Stock list report generator

Renders the seeded report for one page and, when recipients are given,
mails it.
"""

import argparse
import logging
from pathlib import Path

from .export import StockExporter
from .seed import CAFE_STOCK, SEEDS, default_pages
from .share import EmailSharer, ExportSettings


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="cafe_stocklist", description=__doc__.strip().splitlines()[0])
    p.add_argument("--page", choices=sorted(SEEDS), default=CAFE_STOCK)
    p.add_argument("--output-dir", type=Path, default=Path("."))
    p.add_argument("--mail-to", action="append", default=[], metavar="ADDRESS")
    p.add_argument("--sender", default="")
    p.add_argument("--smtp-host", default="localhost")
    p.add_argument("--smtp-port", type=int, default=587)
    p.add_argument("--smtp-user")
    p.add_argument("--smtp-password")
    p.add_argument("--no-starttls", dest="starttls", action="store_false")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def settings_from_args(args):
    return ExportSettings(
        output_dir=args.output_dir,
        smtp_host=args.smtp_host,
        smtp_port=args.smtp_port,
        sender=args.sender,
        recipients=tuple(args.mail_to),
        username=args.smtp_user,
        password=args.smtp_password,
        starttls=args.starttls,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = settings_from_args(args)
    sharer = EmailSharer(settings) if settings.recipients else None

    model = default_pages()[args.page]
    print(f"Generating {args.page} report ({model.item_count()} items)...")
    path = StockExporter(sharer=sharer, output_dir=settings.output_dir).export(args.page, model.categories)
    print(f"Saved to: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
