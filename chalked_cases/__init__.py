"""
Convert strings between cases while applying styles for the terminal.

    >>> from chalked_cases import chalked_cases, chalk
    >>> chalked_cases("hello world", "camel", chalk.blue)  # blue "helloWorld"
    >>> chalked_cases("helloWorld", "split", chalk.bold)   # ["hello", "world"], both bold

The styling API is available under the `chalk` namespace.
"""

from chalked_cases.converter import CaseOption, chalked_cases
from chalked_cases.errors import DeveloperError, InvalidArgument
from chalked_cases.styling import Chalk, chalk, from_names, strip

__all__ = [
    "CaseOption",
    "Chalk",
    "DeveloperError",
    "InvalidArgument",
    "chalk",
    "chalked_cases",
    "from_names",
    "strip",
]
