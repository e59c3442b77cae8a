#!/usr/bin/env python3
"""
Zaban Programming Language
Command line entry point for the lexer
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from lexer import Scanner, TokenKind
from printer import print_tokens, format_summary, format_source_banner
from repl import REPL
from settings import ConfigError, configure_logging, find_config, load_config, settings_from_args

logger = logging.getLogger('zaban')

VERSION = 'Zaban 1.0.0'

DEMO_SOURCE = "hindsa x = 10; asharia y = 20.5; agar (x > y) { nikl ao; }"

def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='zaban', description='Zaban Programming Language Lexer')
    p.add_argument('file', nargs='?', help="source file to scan (use '-' to read from stdin)")
    p.add_argument('-c', '--code', help='scan the given source text')
    p.add_argument('--demo', action='store_true', help='scan the built-in sample program')
    p.add_argument('--repl', action='store_true', help='start interactive REPL')
    p.add_argument('--no-line-tracking', dest='track_lines', action='store_const', const=False,
                   help='report every token on line 1')
    p.add_argument('--basic-operators', dest='extended_operators', action='store_const', const=False,
                   help='only + - * / = ! without compound forms')
    p.add_argument('--show-lines', dest='show_lines', action='store_const', const=True,
                   help='prefix each token with its source line')
    p.add_argument('--summary', dest='summary', action='store_const', const=True,
                   help='print token counts after the tokens')
    p.add_argument('--strict', action='store_true', help='exit with status 1 if any UNKNOWN token is found')
    p.add_argument('--config', help='config file (json/toml)')
    p.add_argument('--verbose', dest='verbose', action='store_const', const=True, help='verbose logging')
    p.add_argument('--version', action='version', version=VERSION)
    return p

def read_source(args) -> Optional[str]:
    if args.code is not None:
        return args.code
    if args.demo:
        return DEMO_SOURCE
    if args.file == '-':
        return sys.stdin.read()
    if args.file:
        # Undecodable bytes become U+FFFD and scan as UNKNOWN tokens
        with open(args.file, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    return None

def main(argv: Optional[List[str]] = None) -> int:
    """
    Returns exit codes:
      0 - success
      1 - unreadable input, bad config, or UNKNOWN tokens under --strict
      2 - usage / missing args
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = _make_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    config_path = args.config or find_config()
    try:
        config = load_config(config_path)
        settings = settings_from_args(config, {
            'track_lines': args.track_lines,
            'extended_operators': args.extended_operators,
            'show_lines': args.show_lines,
            'summary': args.summary,
            'verbose': args.verbose,
        }, path=config_path)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.verbose)
    if config_path:
        logger.info("loaded config %s", config_path)

    if args.repl:
        REPL(settings).run()
        return 0

    try:
        source = read_source(args)
    except OSError as e:
        print(f"Error: cannot read '{args.file}': {e.strerror or e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: input is not valid UTF-8: {e}", file=sys.stderr)
        return 1

    if source is None:
        if sys.stdin.isatty():
            REPL(settings).run()
            return 0
        parser.print_usage()
        return 2

    tokens = Scanner.from_settings(source, settings).scan()
    logger.info("scanned %d characters into %d tokens", len(source), len(tokens))

    if args.demo:
        print(format_source_banner(source))
    print_tokens(tokens, show_line=settings.show_lines)
    if settings.summary:
        print(format_summary(tokens))

    unknown = [t for t in tokens if t.kind == TokenKind.UNKNOWN]
    if args.strict and unknown:
        first = unknown[0]
        print(f"Error: {len(unknown)} unknown token(s), first '{first.lexeme}' at line {first.line}",
              file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
