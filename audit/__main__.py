"""CLI entry: python -m audit donations.tsv"""

import argparse
import logging
import sys
from pathlib import Path

from donations.config import ANCHORS, DONATION_RULES, ProjectionConfig
from audit.runner import run_all_checks
from audit.report import write_json_report, format_text_report


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="python -m audit",
        description="Check a donation TSV file end to end and write a report.",
    )
    parser.add_argument("path", type=Path, help="Tab-separated donation file")
    parser.add_argument("--output", type=Path, default=Path("output"),
                        help="Directory for audit_report.json (default: ./output)")
    parser.add_argument("--anchor", choices=ANCHORS, default=None)
    parser.add_argument("--donation-rule", choices=DONATION_RULES, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides = {}
    if args.anchor:
        overrides["anchor"] = args.anchor
    if args.donation_rule:
        overrides["donation_rule"] = args.donation_rule
    cfg = ProjectionConfig.load().with_overrides(**overrides)

    print(f"Checking {args.path}...")
    audit_data = run_all_checks(path=args.path, config=cfg)

    print(format_text_report(audit_data))

    json_path = write_json_report(audit_data, args.output / "audit_report.json")
    print(f"\nJSON report written to: {json_path}")

    return 0 if audit_data["summary"]["arithmetic_fail"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
