import io
import traceback

from prolang.prolang_cli import format_tokens
from prolang.prolang_lexer import Token, tokenize
from prolang.prolang_parser import Parser
from prolang.prolang_render import PRINTERS, Renderer


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def handle_command(src: str, state: dict[str, object]) -> bool:
    """Apply a REPL command to `state`. Returns False if `src` is not a command."""
    if src.lower() == "verbose-mode":
        state["verbose"] = not state["verbose"]
        print(f"[mode] >>> Verbose mode {'ON' if state['verbose'] else 'OFF'}")
        return True
    if src.lower() == "strict-mode":
        state["strict"] = not state["strict"]
        print(f"[mode] >>> Strict mode {'ON' if state['strict'] else 'OFF'}")
        return True
    if src.lower() == "format" or src.lower().startswith("format "):
        fmt = src[len("format") :].strip().lower()
        if not fmt:
            print(f"[mode] >>> Format is {state['fmt']}")
        elif fmt in PRINTERS:
            state["fmt"] = fmt
            print(f"[ok] >>> Output format set to {fmt}")
        else:
            print(f"[error] >>> Unknown output format: {fmt!r}")
        return True
    return False


def read_chunk() -> str | None:
    """Read lines until braces balance. Returns None on `exit`/`quit`."""
    src_lines: list[str] = []
    brace_count = 0
    while True:
        prompt = ">>> " if not src_lines else "... "
        line = input(prompt)
        if line.strip() in ("exit", "quit") and not src_lines:
            return None
        src_lines.append(line)
        brace_count += line.count("{") - line.count("}")
        if brace_count <= 0:
            return "\n".join(src_lines).strip()


def start_repl(fmt: str = "tree", verbose: bool = False, strict: bool = False) -> None:
    print(f"prolang REPL [format={fmt}]. Type 'exit' or 'quit' to leave.")
    state: dict[str, object] = {"fmt": fmt, "verbose": verbose, "strict": strict}

    while True:
        try:
            src = read_chunk()
            if src is None:
                print("Exiting prolang REPL.")
                return
            if not src or src.startswith("#"):
                continue
            if handle_command(src, state):
                continue

            try:
                tokens: list[Token] = tokenize(src, strict=bool(state["strict"]))
                if state["verbose"]:
                    print("[tokens] >>>")
                    print(format_tokens(tokens))
                tree = Parser(tokens).parse()
            except SyntaxError as e:
                print(f"[error] >>> {e}")
                continue

            try:
                print(Renderer(str(state["fmt"])).render(tree))
            except Exception:
                print_traceback()

        except (KeyboardInterrupt, EOFError):
            print("\nExiting prolang REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
