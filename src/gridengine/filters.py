"""Search strategies for header filter option lists.

The header filter popup shows the distinct values of a column; typing in its
search box narrows that list. Strategies match against each option's label.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models.column import FilterOption


class FilterBase:
    """Base class for option search strategies"""

    def filter_matches(self, options: Sequence[FilterOption], current_text: str) -> list[FilterOption]:
        """Filter options based on current search text"""
        raise NotImplementedError()


class NoneFilter(FilterBase):
    """No filtering strategy"""

    def filter_matches(self, options, current_text):
        return list(options)


class PrefixFilter(FilterBase):
    """Simple prefix matching strategy"""

    def filter_matches(self, options, current_text):
        if not current_text:
            return list(options)

        current_text = current_text.lower()
        return [opt for opt in options if opt.label.lower().startswith(current_text)]


class ContainsFilter(FilterBase):
    """Contains matching strategy with word boundary prioritization"""

    def filter_matches(self, options, current_text):
        if not current_text:
            return list(options)

        current_lower = current_text.lower()

        # Split into two groups: matches at word boundaries vs matches anywhere
        word_start_matches = []
        other_matches = []

        for opt in options:
            label = opt.label
            label_lower = label.lower()
            if current_lower not in label_lower:
                continue

            # Match after common word delimiters or at an uppercase letter
            match_pos = label_lower.find(current_lower)
            if match_pos == 0 or label[match_pos - 1] in "_- " or label[match_pos].isupper():
                word_start_matches.append(opt)
            else:
                other_matches.append(opt)

        return word_start_matches + other_matches


FILTER_STRATEGIES: dict[str, FilterBase] = {
    "none": NoneFilter(),
    "prefix": PrefixFilter(),
    "contains": ContainsFilter(),
}


def search_filter_options(
    options: Sequence[FilterOption], text: str, mode: str = "contains"
) -> list[FilterOption]:
    """Narrow a filter option list by search text.

    Args:
        options: Options shown in a column's filter list
        text: What the user typed in the filter search box
        mode: Strategy name (none, prefix, contains)

    Returns:
        Matching options, best matches first
    """
    strategy = FILTER_STRATEGIES.get(mode, FILTER_STRATEGIES["contains"])
    return strategy.filter_matches(options, text)
