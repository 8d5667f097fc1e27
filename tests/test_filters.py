from gridengine.filters import ContainsFilter, NoneFilter, PrefixFilter, search_filter_options
from gridengine.models.column import FilterOption


def opts(*labels):
    return [FilterOption(value=label, label=label) for label in labels]


def labels(options):
    return [o.label for o in options]


class TestContainsFilter:
    def test_word_boundaries_rank_first(self):
        """Matches at word starts come before buried matches"""
        options = opts("metadata", "parseData", "User Data", "mandatary", "update_data", "validate", "data_file")

        result = labels(ContainsFilter().filter_matches(options, "data"))

        assert len(result) == 6
        assert "validate" not in result
        assert set(result[:4]) == {"parseData", "User Data", "update_data", "data_file"}
        assert set(result[4:]) == {"metadata", "mandatary"}

    def test_case_insensitive(self):
        result = ContainsFilter().filter_matches(opts("Seoul", "BUSAN"), "busan")
        assert labels(result) == ["BUSAN"]

    def test_empty_text_returns_all(self):
        assert len(ContainsFilter().filter_matches(opts("a", "b"), "")) == 2


class TestOtherStrategies:
    def test_prefix(self):
        result = PrefixFilter().filter_matches(opts("dev", "devops", "ops"), "dev")
        assert labels(result) == ["dev", "devops"]

    def test_none(self):
        assert len(NoneFilter().filter_matches(opts("a", "b"), "zzz")) == 2


class TestSearchFilterOptions:
    def test_defaults_to_contains(self):
        assert labels(search_filter_options(opts("alpha", "beta"), "ph")) == ["alpha"]

    def test_unknown_mode_falls_back(self):
        assert labels(search_filter_options(opts("alpha", "beta"), "et", mode="fuzzy")) == ["beta"]

    def test_numeric_values_search_by_label(self):
        options = [FilterOption(value=31, label="31"), FilterOption(value=25, label="25")]
        assert [o.value for o in search_filter_options(options, "3", "prefix")] == [31]
