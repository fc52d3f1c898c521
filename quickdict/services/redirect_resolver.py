"""Resolution of ``@@@LINK=`` alias entries."""

import logging
import re

from quickdict.interfaces import DictionaryIndex
from quickdict.models import DefinitionResult, ResultKind

logger = logging.getLogger(__name__)

# Target runs to the next tag, line break or end of text and may contain spaces
REDIRECT_MARKER_RE = re.compile(r"@@@LINK=\s*([^<\r\n]+)", re.IGNORECASE)


def find_redirect_target(markup: str) -> str | None:
    """Extract the alias target from definition markup.

    Args:
        markup: Raw definition markup

    Returns:
        Target headword, or None if the markup is not an alias
    """
    match = REDIRECT_MARKER_RE.search(markup)
    if not match:
        return None
    target = match.group(1).strip().strip("\x00").strip()
    return target or None


class RedirectResolver:
    """Follow alias markers from a headword to the entry holding its definition.

    By default exactly one hop is followed: the target's own markup is
    returned as-is even if it is an alias too. Raising ``max_hops`` allows
    longer chains; a visited set stops the walk on cycles.
    """

    def __init__(self, index: DictionaryIndex, max_hops: int = 1):
        """Initialize the resolver.

        Args:
            index: Loaded dictionary index used to look up alias targets
            max_hops: Maximum number of alias markers to follow
        """
        self.index = index
        self.max_hops = max_hops

    def resolve(self, headword: str, raw_markup: str) -> DefinitionResult:
        """Resolve a headword's markup, following alias markers.

        Args:
            headword: Headword the markup was found under
            raw_markup: Markup returned by the index for ``headword``

        Returns:
            LOCAL result (with ``redirected_from`` set when an alias was
            followed), or REDIRECT_FAILED naming the missing target
        """
        current_word = headword
        current_markup = raw_markup
        visited = {headword}
        hops = 0

        target = find_redirect_target(raw_markup)
        while target is not None and hops < self.max_hops:
            if target in visited:
                logger.warning(f"Redirect cycle detected at '{target}' while resolving '{headword}'")
                break

            logger.debug(f"Redirecting: {current_word} -> {target}")
            target_markup = self.index.lookup(target)
            hops += 1

            if target_markup is None:
                return DefinitionResult(
                    display_word=headword,
                    kind=ResultKind.REDIRECT_FAILED,
                    query=headword,
                    missing_target=target,
                )

            visited.add(target)
            current_word, current_markup = target, target_markup
            target = find_redirect_target(current_markup)

        return DefinitionResult(
            display_word=current_word,
            kind=ResultKind.LOCAL,
            markup=current_markup,
            redirected_from=headword if current_word != headword else None,
            query=headword,
        )
