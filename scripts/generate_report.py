"""
Generate a barangay case report from a JSON intake form.

Usage (from project root):
  python scripts/generate_report.py --input form.json
  python scripts/generate_report.py --input form.json --output-dir reports/
  python scripts/generate_report.py --input form.json --json > report.json

The form uses the same fields as POST /api/report. Validation errors are
printed one per line and the script exits with status 1.
"""
import argparse
import json
import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from barangay_case.report import HtmlFileRenderer, generate_report  # noqa: E402

logger = logging.getLogger("generate_report")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate a barangay case report from a JSON form")
    parser.add_argument("--input", "-i", required=True, help="Path to the JSON intake form")
    parser.add_argument("--output-dir", "-o", default=os.path.join(PROJECT_ROOT, "reports"),
                        help="Directory for the exported HTML report")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON instead of exporting HTML")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    with open(args.input, "r", encoding="utf-8") as f:
        raw = json.load(f)

    renderer = None if args.json else HtmlFileRenderer(args.output_dir)
    result = generate_report(raw, renderer=renderer)
    if not result.ok:
        for field, message in sorted(result.errors.items()):
            print(f"{field}: {message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.report.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(renderer.last_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
