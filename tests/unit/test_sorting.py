#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for sorting the list of acronyms."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from acrodoc.exceptions import InvalidConfigurationError, UnknownSortCriterionError
from acrodoc.registry import AcronymRegistry
from acrodoc.sorting import SortCriterion, resolve_sort_criterion, sort_acronyms


@pytest.fixture
def mixed_case_registry() -> AcronymRegistry:
    """Provide a registry whose shortnames differ in case."""
    registry = AcronymRegistry()
    registry.register("b", "b", "bee")
    registry.register("A", "A", "Ay")
    registry.register("C", "C", "Cee")
    return registry


def _shortnames(acronyms) -> list[str]:
    return [acronym.shortname_text for acronym in acronyms]


@pytest.mark.unit
class TestSortAcronyms:
    """Test the sorting criteria."""

    def test_alphabetical_is_case_sensitive(self, mixed_case_registry) -> None:
        """Test that upper-case letters sort before lower-case ones."""
        result = sort_acronyms(mixed_case_registry.all_entries(), "alphabetical", include_unused=True)
        assert _shortnames(result) == ["A", "C", "b"]

    def test_alphabetical_case_insensitive(self, mixed_case_registry) -> None:
        """Test case-insensitive alphabetical sorting."""
        result = sort_acronyms(mixed_case_registry.all_entries(), "alphabetical-case-insensitive", True)
        assert _shortnames(result) == ["A", "b", "C"]

    def test_initial_follows_definition_order(self, mixed_case_registry) -> None:
        """Test sorting by definition order."""
        entries = mixed_case_registry.all_entries()
        shuffled = [entries[2], entries[0], entries[1]]

        result = sort_acronyms(shuffled, SortCriterion.INITIAL, include_unused=True)

        assert [acronym.definition_order for acronym in result] == [0, 1, 2]

    def test_usage_excludes_unused(self, mixed_case_registry) -> None:
        """Test sorting by usage order with unused acronyms excluded."""
        mixed_case_registry.mark_used("C")
        mixed_case_registry.mark_used("b")

        result = sort_acronyms(mixed_case_registry.all_entries(), "usage", include_unused=False)

        assert [acronym.key for acronym in result] == ["C", "b"]

    def test_exclude_unused_with_alphabetical(self, mixed_case_registry) -> None:
        """Test that unused acronyms can be excluded from any criterion."""
        mixed_case_registry.mark_used("C")
        result = sort_acronyms(mixed_case_registry.all_entries(), "alphabetical", include_unused=False)
        assert [acronym.key for acronym in result] == ["C"]

    def test_usage_with_include_unused_is_rejected(self, mixed_case_registry) -> None:
        """Test that usage sorting cannot include unused acronyms."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            sort_acronyms(mixed_case_registry.all_entries(), "usage", include_unused=True)
        assert "include_unused" in str(exc_info.value)

    def test_unknown_criterion(self, mixed_case_registry) -> None:
        """Test that unknown criteria raise with the criterion name."""
        with pytest.raises(UnknownSortCriterionError) as exc_info:
            sort_acronyms(mixed_case_registry.all_entries(), "random", include_unused=True)
        assert exc_info.value.criterion == "random"

    def test_resolve_sort_criterion(self) -> None:
        """Test resolution of criterion names."""
        assert resolve_sort_criterion("initial") is SortCriterion.INITIAL
        assert resolve_sort_criterion(SortCriterion.USAGE) is SortCriterion.USAGE
        with pytest.raises(UnknownSortCriterionError):
            resolve_sort_criterion("bogus")

    def test_input_not_modified(self, mixed_case_registry) -> None:
        """Test that a new list is returned."""
        entries = mixed_case_registry.all_entries()
        result = sort_acronyms(entries, "alphabetical", include_unused=True)

        assert result is not entries
        assert [acronym.key for acronym in entries] == ["b", "A", "C"]

    @given(st.permutations(list(range(6))))
    def test_initial_is_total_order(self, order) -> None:
        """Property: sorting by definition order is independent of input order."""
        registry = AcronymRegistry()
        for index in range(6):
            registry.register(f"K{index}", f"K{index}", f"Key {index}")
        entries = registry.all_entries()

        result = sort_acronyms([entries[i] for i in order], "initial", include_unused=True)

        assert [acronym.definition_order for acronym in result] == list(range(6))
