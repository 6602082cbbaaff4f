"""CLI entry point: `casematch PATTERN VALUE` or `python -m casematch PATTERN VALUE`."""

import sys


def main(argv=None) -> int:
    import argparse
    import json
    import logging
    from .compiler.driver import CompilerDriver

    parser = argparse.ArgumentParser(
        prog="casematch",
        description="Match a JSON value against a pattern and print the bindings.",
    )
    parser.add_argument("pattern", help="Pattern text, e.g. '[head, *tail]'")
    parser.add_argument("value", help="Candidate value as JSON, e.g. '[1, 2, 3]'")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only set the exit status")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        value = json.loads(args.value)
    except json.JSONDecodeError as e:
        sys.stderr.write(f"casematch: error: value is not valid JSON: {e}\n")
        return 1

    result = CompilerDriver().compile(args.pattern)
    if not result.success:
        result.reporter.print_errors()
        return 1

    bindings = result.pattern.match(value)
    if bindings is None:
        if not args.quiet:
            sys.stderr.write(f"casematch: no match\n{result.pattern.show_position()}\n")
        return 1

    if not args.quiet:
        sys.stdout.write(json.dumps(bindings, sort_keys=True) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
