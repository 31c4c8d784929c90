from __future__ import annotations
import argparse
import json
import sys
from typing import List, Optional

from ._logging import enable_debug_logging
from .config import Settings
from .context import GematriaBuilder, GematriaContext
from .exceptions import ConfigurationError, SourceError, UnknownMethodError
from .grouping import GroupResult, group_words
from .methods import Method
from .sources import FORMATS, read_text

def _context(args: argparse.Namespace) -> GematriaContext:
    return (
        GematriaBuilder()
        .with_method(args.method)
        .with_count_nikkud(args.count_nikkud)
        .with_distinct_vowelizations(args.distinct_vowelizations)
        .build()
    )

def _source_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    return read_text(path=args.input, fmt=args.format)

def cmd_calculate(args: argparse.Namespace) -> int:
    ctx = _context(args)
    text = " ".join(args.text)
    value = ctx.calculate_value(text)
    if args.json:
        print(json.dumps({"text": text, "method": ctx.method.key, "value": value}, ensure_ascii=False))
    elif args.verbose:
        print(f"Gematria value for '{text}': {value}")
    else:
        print(value)
    return 0

def cmd_search_match(args: argparse.Namespace) -> int:
    ctx = _context(args)
    for word in ctx.search_matching_words(args.word, _source_text(args)):
        print(word)
    return 0

def _sort(result: GroupResult, how: str) -> GroupResult:
    if how == "value":
        return result.sorted_by_value()
    if how == "size":
        return result.sorted_by_size()
    return result

def cmd_group_words(args: argparse.Namespace) -> int:
    ctx = _context(args)
    result = group_words(_source_text(args), ctx)
    if args.shared:
        result = result.shared()
    result = _sort(result, args.sort)

    if args.json:
        out = [
            {"value": value, "words": [{"word": e.word, "count": e.count} for e in entries]}
            for value, entries in result.items()
        ]
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0

    for value, entries in result.items():
        if args.counts:
            words = ", ".join(f"{e.word} ({e.count})" for e in entries)
        else:
            words = ", ".join(e.word for e in entries)
        if args.verbose:
            print(f"Gematria value {value:4}: {words}")
        else:
            print(f"{value:4} -> {words}")
    return 0

def cmd_methods(args: argparse.Namespace) -> int:
    for m in Method:
        print(f"{m.key:<10} {m.label}")
    return 0

def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn
    uvicorn.run(
        "gematrix.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )
    return 0

def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("text", nargs="?", default=None, help="Text to read (default: --input file or stdin)")
    p.add_argument("--input", default=None, help="Input file path")
    p.add_argument("--format", default="text", choices=list(FORMATS), help="Input format")

def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    s = settings or Settings()
    p = argparse.ArgumentParser(prog="gematrix", description="Hebrew gematria calculator and word grouper")
    p.add_argument("-m", "--method", default=s.method,
                   help=f"Calculation method ({', '.join(Method.keys())}); default: {s.method}")
    p.add_argument("--count-nikkud", action=argparse.BooleanOptionalAction, default=s.count_nikkud,
                   dest="count_nikkud", help="Add vowel mark values to the sum")
    p.add_argument("--merge-vowelizations", action="store_false", default=s.distinct_vowelizations,
                   dest="distinct_vowelizations",
                   help="Treat words that differ only in nikkud as the same word")
    p.add_argument("--distinct-vowelizations", action="store_true", default=s.distinct_vowelizations,
                   dest="distinct_vowelizations",
                   help="Keep words that differ only in nikkud apart (default)")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output and logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_calc = sub.add_parser("calculate", help="Calculate the value of a word or phrase")
    p_calc.add_argument("text", nargs="+", help="Word or phrase")
    p_calc.add_argument("--json", action="store_true", help="Output JSON")
    p_calc.set_defaults(func=cmd_calculate)

    p_sm = sub.add_parser("search-match", help="Find words whose value equals that of WORD")
    p_sm.add_argument("word", help="Word to compare against")
    _add_source_args(p_sm)
    p_sm.set_defaults(func=cmd_search_match)

    p_g = sub.add_parser("group-words", help="Group words with matching values")
    _add_source_args(p_g)
    p_g.add_argument("--shared", action="store_true", help="Only values shared by more than one word")
    p_g.add_argument("--sort", choices=["none", "value", "size"], default="none", help="Bucket order")
    p_g.add_argument("--counts", action="store_true", help="Show occurrence counts")
    p_g.add_argument("--json", action="store_true", help="Output JSON")
    p_g.set_defaults(func=cmd_group_words)

    p_m = sub.add_parser("methods", help="List calculation methods")
    p_m.set_defaults(func=cmd_methods)

    p_srv = sub.add_parser("serve", help="Run the HTTP API")
    p_srv.add_argument("--host", default=s.host)
    p_srv.add_argument("--port", type=int, default=s.port)
    p_srv.add_argument("--reload", action="store_true")
    p_srv.set_defaults(func=cmd_serve)

    return p

def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    args = build_parser(settings).parse_args(argv)
    if args.verbose:
        enable_debug_logging()

    try:
        return args.func(args)
    except UnknownMethodError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except SourceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
