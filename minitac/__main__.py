# This file is the main entry point into minitac.

import sys

from minitac import lexer
from minitac import parser
from minitac import mini_to_tac
from minitac import serialization
from minitac.errors import CompileError, Diagnostics, format_position


def usage(fd):
    msg = """Usage: minitac [options] <file>
  --help: print this message.

Input:
  <file>: read mini source from 'file'.
  -: read mini source from stdin.
  -e 'y = x + 1;': use the given text as the mini source.

Output:
  -o foo.tac: write the three-address code to 'foo.tac'.
  -o -: write the three-address code to stdout (the default).

Observing the pipeline:
  --tokens: print the tokens and exit.
  --ast: print the mini AST and exit.
  --tac-ast: print the TAC AST and exit.
  --indent 4: control the indentation of ASTs.
  --lex: stop after lexing.
  --parse: stop after parsing.

Lexing:
  --strict: treat unrecognized characters as errors instead of warnings.

Example invocations:
  $ minitac -e 'y = x * 2 + 5;'
    Print:
      t0 = x * 2
      t1 = t0 + 5
      y = t1

  $ minitac -o foo.tac foo.mini
    Write the three-address code for foo.mini to foo.tac.

  $ minitac --ast foo.mini
    Print the mini AST for foo.mini.
"""
    fd.write(msg)


def parse_command_line(argv: list[str]) -> tuple[set, dict, list]:
    """Parse the command line, returning flags, options, and args.
    Flags don't expect an argument, e.g. '--strict'.
    Options expect an argument, e.g. '-o out.tac'.
    Args are everything left over after parsing flags and options.
    Raises ValueError if an option is missing its argument.
    """
    # flags don't expect an argument:
    flag_names = set([
        '--help',
        # stop early:
        '--lex', '--parse',
        # serialization flags:
        '--tokens', '--ast', '--tac-ast',
        # lexing:
        '--strict',
    ])
    # options expect a argument:
    option_names = set(['-o', '-e', '--indent'])
    flags = set()
    options = {}
    args = []
    i = 1
    while i < len(argv):
        arg = argv[i]
        if arg in flag_names:
            flags.add(arg)
        elif arg in option_names:
            i += 1
            if i >= len(argv):
                raise ValueError(f"option '{arg}' expects an argument.")
            options[arg] = argv[i]
        else:
            args.append(arg)
        i += 1
    return (flags, options, args)


def read_source(options: dict, args: list) -> str:
    "Acquire the source text from -e, stdin or a file."
    if '-e' in options:
        if len(args) > 0:
            raise ValueError("-e and an input filename are mutually exclusive.")
        return options['-e']
    if len(args) == 0:
        raise ValueError("no input filename given.")
    if len(args) > 1:
        raise ValueError("only one input filename is supported, multiple given: %s" % args)
    fname = args[0]
    sys.stderr.write(f"Input: {fname}\n")
    if fname == '-':
        return sys.stdin.read()
    with open(fname, encoding="utf-8") as fd:
        return fd.read()


def write_output(text: str, options: dict):
    o_fname = options.get('-o', '-')
    if o_fname == '-':
        sys.stdout.write(text)
    else:
        with open(o_fname, 'w') as fd:
            fd.write(text)
        sys.stderr.write(f"Wrote: {o_fname}\n")


def main(argv: list[str]) -> int:
    try:
        (flags, options, args) = parse_command_line(argv)
    except ValueError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    if '--help' in flags:
        usage(sys.stdout)
        return 0

    try:
        indent = int(options.get('--indent', '4'))
    except ValueError:
        sys.stderr.write(f"Error: --indent expects an integer, got '{options['--indent']}'.\n")
        return 1

    try:
        source = read_source(options, args)
    except UnicodeDecodeError as e:
        sys.stderr.write(f"Error: can't decode input: {e}\n")
        return 1
    except ValueError as e:
        sys.stderr.write(f"Error: {e}\n")
        usage(sys.stderr)
        return 1
    except OSError as e:
        sys.stderr.write(f"Error: can't read input: {e}\n")
        return 1

    diagnostics = Diagnostics()
    try:
        # tokenize.
        tokens = lexer.tokenize(source, diagnostics, strict='--strict' in flags)
        for diag in diagnostics:
            sys.stderr.write(f"Warning: {diag}\n")
        if '--tokens' in flags:
            write_output("".join(f"{token}\n" for token in tokens), options)
            return 0
        if '--lex' in flags:
            return 0

        # build the AST.
        p = parser.Parser(tokens)
        mini_ast = p.parse_assignment()
    except CompileError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    leftover = p.remaining()
    if len(leftover) > 0:
        where = format_position(leftover[0].line, leftover[0].column)
        sys.stderr.write(f"Warning: ignoring {len(leftover)} token(s) after the assignment, starting {where}\n")
    if '--ast' in flags:
        try:
            text = serialization.to_exprs_str(mini_ast, indent=indent)
        except RecursionError:
            sys.stderr.write("Error: the AST is too deep to print.\n")
            return 1
        write_output(text + "\n", options)
        return 0
    if '--parse' in flags:
        return 0

    # generate three-address code.
    tac_ast = mini_to_tac.mini_to_tac(mini_ast)
    if '--tac-ast' in flags:
        write_output(serialization.to_exprs_str(tac_ast, indent=indent) + "\n", options)
        return 0
    write_output(tac_ast.text(), options)
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
