"""
prolang CLI Entrypoint.

Command-line front end for the prolang lexer and parser.

Features:
    - Read source from `.prl` files or inline strings.
    - Dump the token stream, or parse and print the tree as an indented dump,
      JSON, or canonical source.
    - Output to console or file.
    - Launch an interactive REPL.

Example usage:
    prolang program.prl
    prolang -s "x = 10 ;" -f json
    prolang program.prl -f source -o formatted.prl
    prolang --repl --verbose

Functions:
    read_source(source, is_string) -> str:
        Return program text from a path or the string itself.
    format_tokens(tokens) -> str:
        One `KIND text` line per token.
    run_prolang(source, is_string=False, fmt="tree", out=None, strict=False) -> str:
        Lex, parse, render and print or write the result.
    main() -> None:
        Parse CLI arguments and dispatch to the REPL or `run_prolang`.
"""

import argparse
import sys

from prolang.prolang_lexer import Token, tokenize
from prolang.prolang_parser import Parser
from prolang.prolang_render import PRINTERS, Renderer

FORMATS = (*PRINTERS, "tokens")


def read_source(source: str, is_string: bool = False) -> str:
    if is_string:
        return source
    if not source.endswith(".prl"):
        raise ValueError("Only .prl files are supported.")
    with open(source, encoding="utf-8") as f:
        return f.read()


def format_tokens(tokens: list[Token]) -> str:
    return "\n".join(f"{tok.kind.name} {tok.text}".rstrip() for tok in tokens)


def run_prolang(
    source: str,
    is_string: bool = False,
    fmt: str = "tree",
    out: str | None = None,
    strict: bool = False,
) -> str:
    """
    Run the prolang front end: lex, parse, render, then print or write the result.

    Args:
        source (str): The program text or path to a `.prl` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        fmt (str): "tree", "json", "source", or "tokens" to stop after lexing.
        out (str | None): Optional path to write the output to. If None, prints to stdout.
        strict (bool): Reject unrecognized characters instead of skipping them.

    Returns:
        str: The rendered output.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.prl',
            or `fmt` is unknown.
        SyntaxError: `LexicalError` or `ParseError` from the front end.
    """
    text = read_source(source, is_string)

    # 1. Lexing
    tokens = tokenize(text, strict=strict)

    # 2. Parsing and rendering
    if fmt == "tokens":
        output = format_tokens(tokens)
    else:
        renderer = Renderer(fmt)
        tree = Parser(tokens).parse()
        output = renderer.render(tree)

    # 3. Output result
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(output + "\n")
    else:
        print(output)
    return output


def main() -> None:
    """
    Entry point for the prolang CLI.

    - Launches the REPL if no arguments are passed or `--repl` is specified.
    - Otherwise runs `run_prolang`; front-end errors are reported on stderr
      with exit status 1.
    """
    if len(sys.argv) == 1:
        # No args passed: open REPL instead
        from prolang.prolang_repl import start_repl

        start_repl()
        return
    parser = argparse.ArgumentParser(prog="prolang")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="tree",
        help="Output format (default: tree)",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unrecognized characters instead of skipping them",
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show token streams in the REPL"
    )

    args = parser.parse_args()

    if args.repl or args.source is None:
        from prolang.prolang_repl import start_repl

        fmt = "tree" if args.fmt == "tokens" else args.fmt
        start_repl(fmt=fmt, verbose=args.verbose, strict=args.strict)
        return

    try:
        run_prolang(
            source=args.source,
            is_string=args.string,
            fmt=args.fmt,
            out=args.out,
            strict=args.strict,
        )
    except (SyntaxError, ValueError, OSError, RecursionError) as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
