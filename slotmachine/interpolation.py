"""Placeholder substitution for nested slot cards.

Works like the PSR-3 context interpolation example: each key of the
substitution mapping is wrapped in the delimiters and every occurrence of the
resulting token is replaced in one pass.
"""

import re
import warnings
from collections.abc import Mapping, Sequence
from typing import Any

from slotmachine.errors import BadDelimiterCount

DEFAULT_DELIMITERS = ("{", "}")


def interpolate(
    template: Any,
    substitutions: Mapping[str, Any],
    delimiters: Sequence[str] = DEFAULT_DELIMITERS,
) -> Any:
    """Replace each ``{key}`` token in ``template`` with its substitution.

    Tokens without a substitution are left untouched. The template is scanned
    once with the longest token tried first at every position, so substituted
    text is never scanned again.

    Raises:
        BadDelimiterCount: fewer than two delimiters were given.
    """
    if (tokens := len(delimiters)) < 2:
        raise BadDelimiterCount(tokens)
    if tokens > 2:
        warnings.warn("Too many delimiter tokens given, using the first two.", UserWarning, stacklevel=2)

    opening, closing = delimiters[0], delimiters[1]
    replace = {f"{opening}{key}{closing}": str(value) for key, value in substitutions.items()}
    if not replace:
        return template

    pattern = re.compile("|".join(re.escape(token) for token in sorted(replace, key=len, reverse=True)))
    return pattern.sub(lambda match: replace[match.group(0)], str(template))
