#!/usr/bin/env python3

from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from chalked_cases import cases
from chalked_cases.cases import Text
from chalked_cases.errors import DeveloperError, InvalidArgument

StyleFunction = Callable[[str], str]


class CaseOption(str, Enum):
    CAMEL = "camel"
    SNAKE = "snake"
    KEBAB = "kebab"
    TITLE = "title"
    PASCAL = "pascal"
    CONSTANT = "constant"
    SPLIT = "split"


CONVERTERS: Dict[CaseOption, Callable[[Text], str]] = {
    CaseOption.CAMEL: cases.camel_case,
    CaseOption.SNAKE: cases.snake_case,
    CaseOption.KEBAB: cases.kebab_case,
    CaseOption.TITLE: cases.title_case,
    CaseOption.PASCAL: cases.pascal_case,
    CaseOption.CONSTANT: cases.constant_case,
}

_unhandled = set(CaseOption) - set(CONVERTERS) - {CaseOption.SPLIT}
if _unhandled:
    raise DeveloperError(f"No converter for case options: {sorted(option.value for option in _unhandled)}")


def to_case_option(case_option: Union[str, CaseOption]) -> CaseOption:
    try:
        return CaseOption(case_option)
    except ValueError:
        valid = ", ".join(option.value for option in CaseOption)
        raise InvalidArgument(f"Unknown case option: {case_option!r} (expected one of {valid})") from None


def chalked_cases(text: Text, case_option: Union[str, CaseOption], style: StyleFunction) -> Union[str, List[str]]:
    """
    Convert a string to the preferred case, or split it, while applying the passed style.

    When `case_option` is "split", `text` must be a string. For all other case options,
    `text` can be a string or a list of string pieces.

    Parameters
    ----------
    text : str or list of str
        The string (pieces) to convert and style.
    case_option : str or CaseOption
        Case to convert to, or "split".
    style : callable
        Style to apply, e.g. `chalk.blue.bold`. For "split" it is applied to each piece.

    Returns
    -------
    str or list of str
        The styled string, or the styled pieces for "split".
    """
    option = to_case_option(case_option)

    if option in CONVERTERS:
        return style(CONVERTERS[option](text))

    if option is CaseOption.SPLIT:
        if not isinstance(text, str):
            raise InvalidArgument("str needs to be a string")
        return [style(piece) for piece in cases.split_pieces(text)]

    raise DeveloperError(f"Case option {option.value!r} has no handler")


def main(text_list: Iterable[str], case_option: Union[str, CaseOption], style: StyleFunction) -> List[Union[str, List[str]]]:
    """
    Loop over the main functionality
    """

    return [chalked_cases(text, case_option, style) for text in text_list]


def cli() -> None:

    # CLI inputs
    import argparse
    import os
    import sys

    import click
    from dotenv import load_dotenv

    from chalked_cases.styling import from_names

    load_dotenv()

    parser = argparse.ArgumentParser(description="Convert strings to another case and style them for the terminal.")

    parser.add_argument("case", choices=[option.value for option in CaseOption], help="Case to convert to, or 'split' to break each string into pieces.")
    parser.add_argument("text", nargs="*", help="Strings to convert. Ignored when --file is given.")
    parser.add_argument("-f", "--file", type=argparse.FileType("r"), help="File containing a list of strings to convert. Each line of the file must be a string that we want to convert.")
    parser.add_argument("-c", "--color", nargs="+", default=None, help="Style names to apply, e.g. '--color blue bold'. Defaults to $CHALKED_CASES_COLOR.")
    parser.add_argument("--color-always", action="store_true", help="Keep styling when output is not a terminal. Without it, styling is removed from piped or redirected output.")
    parser.add_argument("--no-color", action="store_true", help="Print without styling. Also enabled by a non-empty $NO_COLOR.")

    args = parser.parse_args()

    if args.file:
        text_list = [line.strip() for line in args.file if line.strip()]
    else:
        text_list = args.text

    if not text_list:
        parser.error("no input: pass strings as arguments or use --file")

    names = args.color if args.color is not None else os.getenv("CHALKED_CASES_COLOR", "").split()
    enabled = not args.no_color and not os.getenv("NO_COLOR")


    # Main
    try:
        style = from_names(names, enabled=enabled)
        results = main(text_list, args.case, style)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


    # Secondary effects
    for result in results:
        line = " ".join(result) if isinstance(result, list) else result
        click.echo(line, color=True if args.color_always and enabled else None)


if __name__ == "__main__":
    cli()
