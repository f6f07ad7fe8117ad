from __future__ import annotations

import re
from collections.abc import Sequence

from staff_lookup.core.config import NavigationPolicy
from staff_lookup.models.employee import Suggestion
from staff_lookup.models.navigation import Destination, DetailView, FilteredListing, NoOp

_DIGITS_RE = re.compile(r"[0-9]+")


def is_numeric_identifier(text: str) -> bool:
    return _DIGITS_RE.fullmatch(text) is not None


def _is_exact_match(text: str, suggestion: Suggestion) -> bool:
    if text == suggestion.id:
        return True
    return suggestion.name is not None and text.lower() == suggestion.name.lower()


def _resolve_strict(text: str, suggestions: Sequence[Suggestion]) -> Destination:
    if len(suggestions) == 1 and _is_exact_match(text, suggestions[0]):
        return DetailView(identifier=suggestions[0].id)
    if is_numeric_identifier(text):
        return DetailView(identifier=text)
    return FilteredListing(query=text)


def _resolve_loose(text: str, suggestions: Sequence[Suggestion]) -> Destination:
    for suggestion in suggestions:
        if suggestion.id == text:
            return DetailView(identifier=suggestion.id)
    if len(suggestions) == 1:
        return DetailView(identifier=suggestions[0].id)
    if is_numeric_identifier(text):
        return DetailView(identifier=text)
    return FilteredListing(query=text)


def resolve(
    committed_text: str,
    suggestions: Sequence[Suggestion],
    policy: NavigationPolicy = NavigationPolicy.STRICT,
) -> Destination:
    """Decide where a committed search should take the user.

    Blank input never navigates. Under the strict policy a lone suggestion
    is opened only when the input is exactly its id or (ignoring case) its
    name; a digits-only input is always treated as an identifier lookup;
    everything else goes to the filtered listing. The loose policy opens any
    suggestion whose id equals the input, or the only suggestion regardless
    of how it matched.

    The resolver does not check that the identifier exists.
    """
    text = committed_text.strip()
    if not text:
        return NoOp()

    if NavigationPolicy(policy) is NavigationPolicy.LOOSE:
        return _resolve_loose(text, suggestions)
    return _resolve_strict(text, suggestions)


def auto_navigate(live_text: str, suggestions: Sequence[Suggestion], enabled: bool) -> Destination:
    """Destination for jumping straight to a record while the user types."""
    if not enabled or not live_text.strip() or len(suggestions) != 1:
        return NoOp()
    return DetailView(identifier=suggestions[0].id)
