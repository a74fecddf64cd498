import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from .config import load_config
from .errors import LatexBreakError
from .pipeline import LatexBreaker


def main(argv=None):
    parser = argparse.ArgumentParser(description="Canonical line breaks for LaTeX sources")

    # Input/Output
    parser.add_argument("tex_path", help="Path to input .tex file")
    parser.add_argument("--config", "-c", help="Config file (default: $LATEXBREAK_CONFIG or ./latexbreak.config)")
    out = parser.add_mutually_exclusive_group()
    out.add_argument("--output", "-o", help="Write the result here instead of stdout")
    out.add_argument("--in-place", "-i", action="store_true", help="Overwrite the input file")

    # Config overrides
    parser.add_argument("--no-remove-newlines", action="store_true", help="Keep soft line breaks")
    parser.add_argument("--no-split-sentences", action="store_true", help="Do not put sentences on their own lines")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(args.config)
        if args.no_remove_newlines:
            cfg = dataclasses.replace(cfg, remove_newlines=False)
        if args.no_split_sentences:
            cfg = dataclasses.replace(cfg, break_after_sentences=False)
        result = LatexBreaker(cfg).process_file(args.tex_path)
    except (LatexBreakError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.in_place or args.output:
        target = Path(args.tex_path if args.in_place else args.output)
        target.write_text(result, encoding="utf-8")
    else:
        sys.stdout.write(result)


if __name__ == "__main__":
    main()
