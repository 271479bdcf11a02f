# Path: resconfig/tests/unit/test_resolver.py
"""
Unit Tests for the best-match resolver

Tests:
- Elimination of contradicting candidates
- Axis-by-axis refinement and precedence
- Tie-breaking and input order
- MatchResult reporting
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from resconfig.configuration import FolderConfiguration
from resconfig.constants import Density, QualifierAxis
from resconfig.matcher import (
    BestMatchResolver,
    Configurable,
    QualifierTiebreaker,
    ResourceFolder,
    find_matching_configurable,
    find_matching_configurables,
)
from resconfig.qualifiers import DensityQualifier, LanguageQualifier


def names(configurables):
    return [c.name for c in configurables]


class BareConfigurable(Configurable):
    """Configurable without a name attribute."""

    def __init__(self, configuration):
        self.configuration = configuration

    def get_configuration(self):
        return self.configuration


class TestElimination:
    """Test removal of candidates that contradict the reference."""

    def test_conflicting_language_removed(self, folder_config, folders):
        """values-fr cannot serve an English device."""
        reference = folder_config('values-en-rUS')
        matches = find_matching_configurables(
            reference, folders('values', 'values-fr')
        )
        assert names(matches) == ['values']

    def test_no_candidates(self, folder_config):
        """An empty list gives no matches."""
        assert find_matching_configurables(folder_config('values-en'), []) == []

    def test_none_candidates(self, folder_config):
        """None is treated as an empty list."""
        assert find_matching_configurables(folder_config('values-en'), None) == []
        assert find_matching_configurable(folder_config('values-en'), None) is None

    def test_none_reference_raises(self, folders):
        """A reference is required."""
        with pytest.raises(ValueError):
            find_matching_configurables(None, folders('values'))

    def test_nothing_matches(self, folder_config, folders):
        """All candidates can be eliminated."""
        reference = folder_config('values-en')
        assert find_matching_configurables(reference, folders('values-fr', 'values-de')) == []

    def test_candidate_without_configuration(self, folder_config):
        """Candidates with no configuration are eliminated."""
        reference = folder_config('values-en')
        keep = BareConfigurable(folder_config('values'))
        matches = find_matching_configurables(reference, [BareConfigurable(None), keep])
        assert matches == [keep]


class TestRefinement:
    """Test the axis-by-axis refinement."""

    def test_most_specific_locale_wins(self, folder_config, folders):
        """values-en-rUS beats values-en for en-US."""
        reference = folder_config('values-en-rUS-xhdpi')
        best = find_matching_configurable(
            reference, folders('values', 'values-en', 'values-en-rUS', 'values-fr')
        )
        assert best.name == 'values-en-rUS'

    def test_language_beats_default(self, folder_config, folders):
        """A language folder beats the default folder."""
        reference = folder_config('values-en-rGB')
        best = find_matching_configurable(reference, folders('values', 'values-en', 'values-en-rUS'))
        assert best.name == 'values-en'

    def test_precedence_beats_count(self, folder_config, folders):
        """A higher-priority axis wins over several lower ones."""
        reference = folder_config('drawable-en-port-hdpi-v21')
        best = find_matching_configurable(
            reference, folders('drawable-port-hdpi-v21', 'drawable-en')
        )
        assert best.name == 'drawable-en'

    def test_exact_density_wins(self, folder_config, folders):
        """The exact density is picked."""
        reference = folder_config('drawable-hdpi')
        best = find_matching_configurable(
            reference, folders('drawable-mdpi', 'drawable-hdpi', 'drawable-xhdpi')
        )
        assert best.name == 'drawable-hdpi'

    def test_higher_density_preferred(self, folder_config, folders):
        """XHIGH device prefers hdpi over mdpi."""
        reference = folder_config('drawable-xhdpi')
        best = find_matching_configurable(reference, folders('drawable-mdpi', 'drawable-hdpi'))
        assert best.name == 'drawable-hdpi'

    def test_density_beats_default(self, folder_config, folders):
        """Any density folder beats the folder without one."""
        reference = folder_config('drawable-xxhdpi')
        best = find_matching_configurable(reference, folders('drawable', 'drawable-ldpi'))
        assert best.name == 'drawable-ldpi'

    def test_closest_width(self, folder_config, folders):
        """The largest width that fits wins."""
        reference = folder_config('layout-w600dp')
        best = find_matching_configurable(
            reference, folders('layout-w320dp', 'layout-w480dp', 'layout-w720dp')
        )
        assert best.name == 'layout-w480dp'

    def test_closest_version(self, folder_config, folders):
        """The newest version not above the device wins."""
        reference = folder_config('values-v21')
        best = find_matching_configurable(
            reference, folders('values', 'values-v14', 'values-v19', 'values-v23')
        )
        assert best.name == 'values-v19'

    def test_keyboard_soft_preferred(self, folder_config, folders):
        """For a soft-keyboard device keyssoft beats keysexposed."""
        reference = folder_config('layout-keyssoft')
        best = find_matching_configurable(
            reference, folders('layout-keysexposed', 'layout-keyssoft')
        )
        assert best.name == 'layout-keyssoft'

    def test_axes_unset_on_reference_are_skipped(self, folder_config, folders):
        """Candidates differing only on axes the reference lacks tie."""
        reference = folder_config('values-en')
        matches = find_matching_configurables(
            reference, folders('values-en-land', 'values-en-port')
        )
        assert names(matches) == ['values-en-land', 'values-en-port']


class TestTies:
    """Test ties and input order."""

    def test_ambiguous_keeps_input_order(self, folder_config, folders):
        """Indistinguishable candidates are returned in input order."""
        reference = folder_config('values-en')
        candidates = folders('values-en-land', 'values-en-port')
        best = find_matching_configurable(reference, list(reversed(candidates)))
        assert best.name == 'values-en-port'

    def test_input_not_modified(self, folder_config, folders):
        """The candidate list is left untouched."""
        reference = folder_config('values-en-rUS')
        candidates = folders('values', 'values-en', 'values-fr')
        snapshot = list(candidates)
        find_matching_configurables(reference, candidates)
        assert candidates == snapshot

    def test_idempotent(self, folder_config, folders):
        """Same input, same output."""
        reference = folder_config('drawable-en-xhdpi')
        candidates = folders('drawable', 'drawable-hdpi', 'drawable-en-mdpi', 'drawable-en-hdpi')
        first = find_matching_configurables(reference, candidates)
        second = find_matching_configurables(reference, candidates)
        assert names(first) == names(second) == ['drawable-en-hdpi']

    def test_folder_configuration_delegates(self, folder_config, folders):
        """FolderConfiguration exposes the resolver."""
        reference = folder_config('values-fr')
        candidates = folders('values', 'values-fr')
        assert reference.find_matching_configurable(candidates).name == 'values-fr'
        assert names(reference.find_matching_configurables(candidates)) == ['values-fr']


class TestMatchResult:
    """Test the decision trail reported by the resolver."""

    def test_result_fields(self, folder_config, folders):
        """The result records eliminations and axis decisions."""
        reference = folder_config('values-en-rUS-xhdpi')
        result = BestMatchResolver().resolve(
            reference, folders('values', 'values-en', 'values-en-rUS', 'values-fr')
        )
        assert result.candidate_count == 4
        assert result.eliminated == ['values-fr']
        assert [d.axis for d in result.axis_decisions] == [
            QualifierAxis.LANGUAGE, QualifierAxis.REGION
        ]
        assert result.axis_decisions[0].removed == ['values']
        assert result.best_match.name == 'values-en-rUS'
        assert not result.is_ambiguous

    def test_density_decision_names_best_match(self, folder_config, folders):
        """Axis decisions carry the preferred segment."""
        reference = folder_config('drawable-xhdpi')
        result = BestMatchResolver().resolve(reference, folders('drawable-mdpi', 'drawable-hdpi'))
        decision = result.axis_decisions[0]
        assert decision.axis is QualifierAxis.DENSITY
        assert decision.best_match == 'hdpi'
        assert decision.removed == ['drawable-mdpi']

    def test_to_dict(self, folder_config, folders):
        """to_dict is JSON-friendly."""
        reference = folder_config('values-en')
        result = BestMatchResolver().resolve(reference, folders('values', 'values-en'))
        data = result.to_dict()
        assert data['reference'] == '-en'
        assert data['reference_display'] == 'Language en'
        assert data['matches'] == ['values-en']
        assert data['axis_decisions'] == [
            {'axis': 'language', 'best_match': None, 'removed': ['values']}
        ]
        assert data['ambiguous'] is False

    def test_ambiguous_flag(self, folder_config, folders):
        """Several remaining matches are reported as ambiguous."""
        result = BestMatchResolver().resolve(
            folder_config('values'), folders('values-land', 'values-port')
        )
        assert result.is_ambiguous

    def test_unnamed_configurable_uses_repr(self, folder_config):
        """Configurables without a name are described by repr."""
        item = BareConfigurable(folder_config('values-fr'))
        result = BestMatchResolver().resolve(folder_config('values-en'), [item])
        assert result.eliminated == [repr(item)]


class TestTiebreaker:
    """Test per-axis selection."""

    def test_no_candidate_sets_axis(self):
        """found is False when every qualifier is None."""
        found, best = QualifierTiebreaker().select([None, None], LanguageQualifier('en'))
        assert not found
        assert best is None

    def test_no_preference(self):
        """Plain qualifiers are found but none is preferred."""
        found, best = QualifierTiebreaker().select(
            [LanguageQualifier('en'), None], LanguageQualifier('en')
        )
        assert found
        assert best is None

    def test_density_preference(self):
        """Density picks the higher dpi."""
        found, best = QualifierTiebreaker().select(
            [DensityQualifier(Density.MEDIUM), DensityQualifier(Density.HIGH)],
            DensityQualifier(Density.XHIGH)
        )
        assert found
        assert best == DensityQualifier(Density.HIGH)


class TestResourceFolder:
    """Test the ResourceFolder candidate model."""

    def test_from_name(self):
        """Valid names build a folder."""
        folder = ResourceFolder.from_name('drawable-en-hdpi')
        assert folder.base_name == 'drawable'
        assert folder.configuration.density.value is Density.HIGH
        assert str(folder) == 'drawable-en-hdpi'

    def test_from_invalid_name(self):
        """Invalid names give None."""
        assert ResourceFolder.from_name('drawable-hdpi-en') is None

    def test_get_configuration(self):
        """The configuration is exposed through Configurable."""
        folder = ResourceFolder.from_name('values-fr')
        assert isinstance(folder.get_configuration(), FolderConfiguration)
