import argparse
import json
import sys

import pyperclip
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .bases import (
    SUPPORTED_BASES,
    ConversionError,
    ConversionResult,
    NumeralBase,
    convert,
    convert_number,
    parse_base,
    sanitize,
)
from .currency import (
    CURRENCY_NAMES,
    DEFAULT_FROM,
    DEFAULT_TO,
    EXCHANGE_RATES,
    CurrencyError,
    convert_currency,
    format_rate,
    parse_amount,
)
from .dice import roll_dice

console = Console()
err_console = Console(stderr=True)

BASE_CHOICES = "/".join(map(str, SUPPORTED_BASES))


def _fail(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


def _base_arg(value: str) -> NumeralBase:
    try:
        return parse_base(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        err_console.print(f"[yellow]Could not copy to clipboard:[/yellow] {escape(str(e))}")
        return
    console.print("[dim]Copied to clipboard.[/dim]")


def render_result(result: ConversionResult, source: NumeralBase) -> Table:
    table = Table(show_header=False, box=box.ROUNDED, border_style="blue")
    table.add_column(style="cyan bold")
    table.add_column(style="white" if result.ok else "red")

    for base in NumeralBase:
        label = base.label
        if base is source:
            label += " *"
        table.add_row(label, escape(result.value_for(base)))
    return table


def cmd_convert(args: argparse.Namespace) -> None:
    text = args.number
    if args.sanitize:
        text = sanitize(text, args.base)

    if args.to is not None:
        try:
            output = convert_number(text, args.base, args.to)
        except ConversionError as e:
            _fail(str(e))
        if args.json:
            print(json.dumps({args.to.name.lower(): output}))
        else:
            console.print(output, markup=False, highlight=False)
        if args.copy:
            _copy_to_clipboard(output)
        return

    result = convert(text, args.base)

    if args.json:
        payload = result.as_dict()
        payload["error"] = None if result.ok else result.error.kind
        print(json.dumps(payload, indent=2))
    else:
        console.print(render_result(result, args.base))

    if not result.ok:
        if args.verbose:
            err_console.print(f"[dim]{result.error.kind}: {escape(str(result.error))}[/dim]")
        sys.exit(1)

    if args.copy:
        _copy_to_clipboard("\n".join(f"{label}: {value}" for label, value in result.fields()))


def cmd_sanitize(args: argparse.Namespace) -> None:
    console.print(sanitize(args.text, args.base), markup=False, highlight=False)


def render_rates() -> Table:
    table = Table(title="Exchange rates (per unit, in IDR)", box=box.ROUNDED, border_style="blue")
    table.add_column("Code", style="cyan bold")
    table.add_column("Currency")
    table.add_column("Rate", justify="right")
    for code, rate in EXCHANGE_RATES.items():
        table.add_row(code, CURRENCY_NAMES.get(code, ""), format_rate(rate))
    return table


def cmd_currency(args: argparse.Namespace) -> None:
    if args.list:
        console.print(render_rates())
        return

    try:
        amount = parse_amount(args.amount or "")
    except CurrencyError as e:
        _fail(str(e))

    if amount is None:
        _fail("Provide an amount to convert.")

    try:
        quote = convert_currency(amount, args.from_code, args.to_code)
    except CurrencyError as e:
        _fail(str(e))

    if args.json:
        print(json.dumps({
            "amount": quote.amount,
            "from": quote.from_code,
            "to": quote.to_code,
            "result": quote.result,
            "unit_rate": quote.unit_rate,
        }, indent=2))
        return

    console.print(f"[bold green]{escape(quote.summary())}[/bold green]")
    console.print(f"[dim]{escape(quote.detail())}[/dim]")


def cmd_dice(args: argparse.Namespace) -> None:
    try:
        faces = roll_dice(args.count)
    except ValueError as e:
        _fail(str(e))
    console.print("  ".join(f"[bold]{face}[/bold]" for face in faces))
    if len(faces) > 1:
        console.print(f"[dim]Total: {sum(faces)}[/dim]")


def interactive_mode() -> None:
    console.print(f"[bold cyan]=== Base Converter ({BASE_CHOICES.replace('/', ' / ')}) ===[/bold cyan]")
    console.print("Type 'q' in any field to exit.\n")

    while True:
        try:
            src_base_str = input(f"Source base ({BASE_CHOICES}): ").strip()
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting.")
            return

        if src_base_str.lower() == "q":
            console.print("Exiting.")
            return

        try:
            src_base = parse_base(src_base_str)
        except ValueError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}\n")
            continue

        try:
            raw = input(f"Number in {src_base.label.lower()}: ").strip()
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting.")
            return

        if raw.lower() == "q":
            console.print("Exiting.")
            return

        num_str = sanitize(raw, src_base)
        if num_str != raw:
            console.print(f"[dim]Using '{escape(num_str)}'[/dim]")

        console.print(render_result(convert(num_str, src_base), src_base))
        console.print()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixtool",
        description="Numeral base converter with currency and dice helpers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  radixtool convert 255                 # all four bases
  radixtool convert ff -b hex --to 2    # single target
  radixtool sanitize "0x1F-zz" -b 16
  radixtool currency 25 --from USD --to IDR
  radixtool dice -n 3

Run without arguments for interactive mode.
        """
    )
    sub = parser.add_subparsers(dest="command")

    p_convert = sub.add_parser("convert", help="Convert a number to every base")
    p_convert.add_argument("number", help="Number to convert")
    p_convert.add_argument(
        "-b", "--base", type=_base_arg, default=NumeralBase.DECIMAL,
        help=f"Source base ({BASE_CHOICES}, or a name like hex; default: 10)",
    )
    p_convert.add_argument("--to", type=_base_arg, help="Print only this base")
    p_convert.add_argument("--sanitize", action="store_true", help="Drop characters illegal in the source base first")
    p_convert.add_argument("--json", action="store_true", help="Output JSON")
    p_convert.add_argument("--copy", action="store_true", help="Copy the result to the clipboard")
    p_convert.add_argument("-v", "--verbose", action="store_true", help="Show why a conversion failed")
    p_convert.set_defaults(func=cmd_convert)

    p_sanitize = sub.add_parser("sanitize", help="Strip characters illegal in a base")
    p_sanitize.add_argument("text", help="Raw text")
    p_sanitize.add_argument("-b", "--base", type=_base_arg, default=NumeralBase.DECIMAL, help="Base (default: 10)")
    p_sanitize.set_defaults(func=cmd_sanitize)

    p_currency = sub.add_parser("currency", help="Convert between currencies using a static rate table")
    p_currency.add_argument("amount", nargs="?", help="Amount to convert")
    p_currency.add_argument("--from", dest="from_code", default=DEFAULT_FROM, help=f"Source currency (default: {DEFAULT_FROM})")
    p_currency.add_argument("--to", dest="to_code", default=DEFAULT_TO, help=f"Target currency (default: {DEFAULT_TO})")
    p_currency.add_argument("--list", action="store_true", help="Show the rate table")
    p_currency.add_argument("--json", action="store_true", help="Output JSON")
    p_currency.set_defaults(func=cmd_currency)

    p_dice = sub.add_parser("dice", help="Roll six-sided dice")
    p_dice.add_argument("-n", "--count", type=int, default=3, help="Number of dice (default: 3)")
    p_dice.set_defaults(func=cmd_dice)

    return parser


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) == 0:
        interactive_mode()
        return

    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(1)
    args.func(args)

