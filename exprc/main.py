import argparse
import sys

from . import __version__
from .codegen import generate
from .diagnostics import ExprSyntaxError, render
from .lexer import tokenize
from .parser import parse


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = ArgumentParser(
        prog="exprc",
        description="Compile an arithmetic expression to x86-64 assembly",
    )
    parser.add_argument("source", nargs="?", help="expression to compile, e.g. '(2+3)*4'")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="report each compiler stage on stderr"
    )
    parser.add_argument(
        "--emit-llvm", action="store_true", help="print LLVM IR instead of assembly"
    )
    parser.add_argument(
        "--eval", action="store_true", help="JIT-compile and print the value instead"
    )
    parser.add_argument("--version", action="version", version=f"exprc {__version__}")
    return parser


def parse_args(argv=None):
    """Parse the command line; an expression that looks like an option is still the source."""
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    if args.source is None and len(extra) == 1:
        args.source = extra[0]
    elif extra:
        parser.error(f"unrecognized arguments: {' '.join(extra)}")
    elif args.source is None:
        parser.error("the following arguments are required: source")
    return args


def _silent(message):
    pass


def front_end(source, log=_silent):
    log("Tokenizing")
    tokens = tokenize(source)
    log("Parsing")
    return parse(tokens, source)


def compile_source(source, log=_silent):
    """Source text in, assembly text out. Raises ExprSyntaxError on bad input."""
    ast = front_end(source, log)
    log("Generating assembly")
    return generate(ast)


def main(argv=None):
    args = parse_args(argv)

    def log(message):
        if args.verbose:
            print(message, file=sys.stderr)

    try:
        if args.emit_llvm or args.eval:
            # deferred so plain assembly output never loads LLVM
            from .compyler import LLVMCodeGen

            ast = front_end(args.source, log)
            log("Generating LLVM IR")
            module = LLVMCodeGen().create_main(ast)
            if args.eval:
                from .finisher import evaluate_module

                log("Running JIT")
                print(evaluate_module(module))
            else:
                print(module, end="")
        else:
            print(compile_source(args.source, log), end="")
    except ExprSyntaxError as e:
        print(render(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
