"""
Patch Editor command line front end.

Loads a grayscale image, applies a list of patch operations (and undo/redo
steps) in order, then saves the result.

Each --op is one of:
    KIND:X,Y,W,H              e.g. negate:2,2,3,3
    contrast:X,Y,W,H:ALPHA,BETA   e.g. contrast:0,0,0,0:1.4,-20
    undo
    redo

KIND is edge_detect, negate, smooth or contrast. W,H of 0,0 selects the whole
image.

Example:
    python patch_editor.py barbara.pgm out.pgm --op smooth:10,10,64,64 --op undo --op redo
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from PE_Libs.SessionLib.editing_session import EditingSession
from PE_Libs.SessionLib.editor_config import EditorConfig, load_config
from PE_Libs.errors import PatchEditorError

logger = logging.getLogger("patch_editor")

OpStep = Tuple[str, Tuple[int, int, int, int], Optional[float], Optional[int]]


def parse_op(text: str) -> OpStep:
    """
    Parse one --op value.

    Returns:
        (kind, (x, y, w, h), alpha, beta); undo/redo steps carry an empty rect

    Raises:
        ValueError: If the text is malformed
    """
    text = text.strip()
    if text.lower() in ("undo", "redo"):
        return text.lower(), (0, 0, 0, 0), None, None

    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Operation must look like KIND:X,Y,W,H[:ALPHA,BETA], got {text!r}")

    rect_values = [v.strip() for v in parts[1].split(",")]
    if len(rect_values) != 4:
        raise ValueError(f"Region must have 4 values X,Y,W,H, got {parts[1]!r}")
    x, y, w, h = (int(v) for v in rect_values)

    alpha, beta = None, None
    if len(parts) == 3:
        coefficients = [v.strip() for v in parts[2].split(",")]
        if len(coefficients) != 2:
            raise ValueError(f"Coefficients must be ALPHA,BETA, got {parts[2]!r}")
        alpha, beta = float(coefficients[0]), int(coefficients[1])

    return parts[0].strip(), (x, y, w, h), alpha, beta


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Apply patch filters to a grayscale image.")
    ap.add_argument("input", help="image to edit (PGM or any Pillow-readable file)")
    ap.add_argument("output", help="where to save the edited image")
    ap.add_argument("--op", dest="ops", action="append", default=[],
                    help="operation to run, repeatable (see module help)")
    ap.add_argument("--config", default=None,
                    help="JSON file with EditorConfig settings")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity")
    return ap


def run(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else EditorConfig()
    session = EditingSession(config=config)
    session.load_image(args.input)

    for text in args.ops:
        kind, (x, y, w, h), alpha, beta = parse_op(text)
        if kind == "undo":
            session.undo()
        elif kind == "redo":
            session.redo()
        else:
            session.apply_operation(kind, x, y, w, h, alpha=alpha, beta=beta)

    session.save_image(args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        return run(args)
    except (PatchEditorError, ValueError, OSError) as exc:
        logger.error(f"{exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
