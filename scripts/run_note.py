from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packages.shared.models import RunConfig
from packages.shared.storage import is_safe_id
from apps.worker.pipeline import run_note_pipeline
from apps.worker.steps.step10_export import render_exports, render_pdf, result_to_json

logger = logging.getLogger("carepath.run_note")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the discharge dashboard pipeline over a note file.")
    parser.add_argument("note", help="Path to a UTF-8 discharge summary text file")
    parser.add_argument("--json-out", help="Write the dashboard JSON here (default: stdout)")
    parser.add_argument("--pdf-out", help="Also render the summary PDF to this path")
    parser.add_argument(
        "--artifacts-run-id",
        help="Also write dashboard.json and summary.pdf under DATA_DIR/artifacts/<run id>",
    )
    parser.add_argument("--max-stay-days", type=int, default=RunConfig().max_stay_days)
    parser.add_argument("--no-grids", action="store_true", help="Leave the daily grids out of the PDF")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    note_path = Path(args.note).expanduser()
    if not note_path.exists():
        logger.error(f"Note file not found: {note_path}")
        return 1
    if args.artifacts_run_id and not is_safe_id(args.artifacts_run_id):
        logger.error(f"Invalid run id: {args.artifacts_run_id!r}")
        return 1

    config = RunConfig(max_stay_days=args.max_stay_days, include_pdf_grids=not args.no_grids)
    result = run_note_pipeline(note_path.read_text(encoding="utf-8"), config, note_id=note_path.stem)
    payload = json.dumps(result_to_json(result), indent=2)

    if args.json_out:
        Path(args.json_out).write_text(payload, encoding="utf-8")
        logger.info(f"Dashboard JSON written to {args.json_out}")
    else:
        print(payload)

    if args.pdf_out:
        Path(args.pdf_out).write_bytes(render_pdf(result, config))
        logger.info(f"Summary PDF written to {args.pdf_out}")

    if args.artifacts_run_id:
        render_exports(result, args.artifacts_run_id, config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
