# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves a dash-prefixed token to one of a command's tagged options.

Matching is staged; a stage is consulted only when every earlier stage found
nothing:
1. Exact: `-file` matches the option `file`.
2. Prefix: `-fi` matches the option `file`.
3. Negation: `-nove` matches the toggle `verbose` through `noverbose`.

More than one candidate at the first productive stage is ambiguous. Nothing at
any stage is unknown.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from cmdtree.command import Command
from cmdtree.exceptions import AmbiguousOptionError, UnknownOptionError
from cmdtree.logger import logger
from cmdtree.parameter import Parameter

DEFAULT_NEGATION = "no"


@dataclass(frozen=True)
class OptionMatch:
    """A resolved option; `negated` is set when the negation stage matched."""

    parameter: Parameter
    negated: bool = False

    @property
    def toggle_value(self) -> bool:
        return not self.negated


def is_option_token(token: str) -> bool:
    return token.startswith("-")


def match_option(
    token: str,
    options: Sequence[Parameter],
    negation: str = DEFAULT_NEGATION,
    path: Sequence[Command] = (),
) -> OptionMatch | None:
    """
    Match `token` against the declared tagged options.

    Args:
        token (str): A normalized token (double dashes already folded).
        options (Sequence[Parameter]): Tagged options in declaration order.
        negation (str): Prefix that turns a toggle off, `no` by default.
        path (Sequence[Command]): Commands matched so far, used in errors.

    Returns:
        OptionMatch | None: The match, or None when `token` is not dash-prefixed.

    Raises:
        UnknownOptionError: If no option matches at any stage.
        AmbiguousOptionError: If a stage yields several candidates.
    """
    if not is_option_token(token):
        return None

    stripped = token[1:]
    negated = False

    candidates = [option for option in options if option.token == stripped]
    if not candidates:
        candidates = [option for option in options if option.token.startswith(stripped)]
    if not candidates:
        candidates = [
            option
            for option in options
            if option.type.is_toggle and (negation + option.token).startswith(stripped)
        ]
        negated = True

    if not candidates:
        raise UnknownOptionError(f"-{stripped}", path)
    if len(candidates) > 1:
        raise AmbiguousOptionError(f"-{stripped}", candidates, path)

    match = OptionMatch(candidates[0], negated)
    logger.debug(
        "Matched '%s' to %s%s",
        token,
        match.parameter.usage_token,
        " (negated)" if negated else "",
    )
    return match
