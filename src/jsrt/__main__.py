"""Command line for trying out coercions and operators.

    python -m jsrt + '"a"' 1
    python -m jsrt boolean '""'
    python -m jsrt - -- -Infinity 1
"""

import argparse
import sys

import jsrt


COERCIONS = ("number", "boolean", "string")


def render(value, fixed=False):
    """Literal text for a result value."""
    if isinstance(value, jsrt.Number):
        return jsrt.format_number(value.data, fixed=fixed)
    return value.format()


def evaluate(op, operands, fixed=False):
    """Run one coercion or operator on parsed operands.

    Args:
        op: (str) Coercion name or binary operator symbol
        operands: (list[Value]) One or two operands
        fixed: (bool) Fixed six decimal number rendering
    Returns:
        (str) Rendered result
    Raises:
        ValueError: If the operator is unknown or the operand count is wrong
    """
    if op in COERCIONS:
        if len(operands) != 1:
            raise ValueError(f"'{op}' takes exactly one operand")
        value = operands[0]
        match op:
            case "number":
                return jsrt.format_number(jsrt.to_number(value), fixed=fixed)
            case "boolean":
                return "true" if jsrt.to_boolean(value) else "false"
            case "string":
                return jsrt.to_string(value, fixed=fixed).data

    if op not in jsrt.BINARY_OPERATORS:
        raise ValueError(f"Unknown operator: {op}")
    if len(operands) != 2:
        raise ValueError(f"'{op}' takes exactly two operands")
    left, right = operands
    if op == "+":
        result = jsrt.generic_plus(left, right, fixed=fixed)
    else:
        result = jsrt.binary(op, left, right)
    return render(result, fixed=fixed)


def _show_rich(op, operands, output):
    """Print operands and result as a rich table."""
    import rich.console
    import rich.table

    table = rich.table.Table(title=f"jsrt {op}")
    table.add_column("")
    table.add_column("kind")
    table.add_column("value")
    for name, value in zip(("left", "right"), operands):
        table.add_row(name, value.kind.value, value.format())
    table.add_row("result", "", output)
    rich.console.Console().print(table)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="jsrt",
        description="Apply runtime coercions and generic operators to literals")
    parser.add_argument("op",
        help="Coercion (number, boolean, string) or operator "
             f"({' '.join(jsrt.BINARY_OPERATORS)})")
    parser.add_argument("operands", nargs="+",
        help="Literal operands: numbers, true, false, or quoted strings "
             "(put -- first when an operand starts with '-' and is not a number)")
    parser.add_argument("--fixed", action="store_true",
        help="Render numbers with six fixed decimals")
    parser.add_argument("--rich", action="store_true",
        help="Show operands and result in a rich table")

    args = parser.parse_args(argv)

    try:
        operands = [jsrt.parse_literal(text) for text in args.operands]
        output = evaluate(args.op, operands, fixed=args.fixed)
    except jsrt.ParseError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        if e.position is not None:
            print(f"  at character {e.position}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.rich:
        _show_rich(args.op, operands, output)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
