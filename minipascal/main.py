"""Corre um programa minipascal a partir de um ficheiro (ou do stdin) e mostra as
variáveis globais no fim da execução."""

import argparse
import logging
import sys

from .analex import Lexer
from .anasem import analyze
from .anasin import Parser
from .ast1 import dump
from .erros import InterpreterError
from .interp import Interpreter


def setup_logging(verbose: int) -> None:
    logging.basicConfig(format="{message}", style="{")
    root_logger = logging.getLogger()
    if verbose >= 2:
        root_logger.setLevel(logging.DEBUG)
    elif verbose == 1:
        root_logger.setLevel(logging.INFO)
    else:
        root_logger.setLevel(logging.WARNING)


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(prog="minipascal", description="simple pascal interpreter")
    argparser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="verbose debugging output (-vv for parser traces)"
    )
    argparser.add_argument("--tokens", action="store_true", help="print the token stream")
    argparser.add_argument("--ast", action="store_true", help="print the syntax tree")
    argparser.add_argument("--symbols", action="store_true", help="print the symbol table")
    argparser.add_argument("FILE", nargs="?", help="pascal source file (default: stdin)")
    return argparser


def execute(text: str, show_tokens=False, show_ast=False, show_symbols=False) -> int:
    if show_tokens:
        for token in Lexer(text):
            print(token)

    tree = Parser(Lexer(text)).parse()
    if show_ast:
        print(dump(tree))

    symtab = analyze(tree)
    if show_symbols:
        print(symtab)

    for name, value in Interpreter(tree).interpret().items():
        print(f"{name} = {value}")
    return 0


def main(argv=None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.FILE is None:
            text = sys.stdin.read()
        else:
            with open(args.FILE) as pascal_file:
                text = pascal_file.read()
    except OSError as e:
        print(f"error: cannot read {args.FILE}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        return execute(text, args.tokens, args.ast, args.symbols)
    except InterpreterError as e:
        print(f"error: {e.kind}: {e}", file=sys.stderr)
        return 1
