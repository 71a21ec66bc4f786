from __future__ import annotations
import argparse, json, logging, sys
from .binary.codecs.segments import GrammarConfig
from .binary.reader import ParseError, parse_file
from .viz import plot_segments

logger = logging.getLogger(__name__)


def _config(args) -> GrammarConfig:
    return GrammarConfig(require_end=getattr(args, "require_end", False))


def cmd_info(args):
    doc = parse_file(args.input, _config(args))
    if args.json:
        print(json.dumps(doc.model_dump(mode="json"), indent=2))
        return 0
    for seg in doc.segments:
        print(seg.render())
    return 0


def cmd_to_json(args):
    doc = parse_file(args.input, _config(args))
    with open(args.output, "w", encoding="utf-8") as out:
        json.dump(doc.model_dump(mode="json"), out, indent=2)
    logger.info("wrote %d segments to %s", len(doc.segments), args.output)
    return 0


def cmd_plot(args):
    doc = parse_file(args.input, _config(args))
    plot_segments(doc)
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="bparse", description="marker/length segment parser")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print Type/Len for each segment")
    sp.add_argument("input", help="Path to the binary file")
    sp.add_argument("--json", action="store_true", help="print the parsed document as JSON")
    sp.add_argument("--require-end", action="store_true", help="fail if bytes follow the terminal segment")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("to-json", help="convert binary to JSON")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.add_argument("--require-end", action="store_true")
    sp.set_defaults(func=cmd_to_json)

    sp = sub.add_parser("plot", help="minimal verification plot")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_plot)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    try:
        return ns.func(ns)
    except ParseError:
        print("parse failed", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"I/O error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
