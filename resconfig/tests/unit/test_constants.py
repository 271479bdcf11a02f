# Path: resconfig/tests/unit/test_constants.py
"""
Unit Tests for constants.py

Tests the resource enums and fixed values:
- Axis order
- Enum lookup by folder segment
- Density dpi values
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from resconfig.constants import (
    QUALIFIER_COUNT,
    Density,
    Keyboard,
    KeyboardState,
    QualifierAxis,
    ResourceFolderType,
    ScreenOrientation,
    ScreenSize,
    UiMode,
    STATUS_OK,
    STATUS_FAIL,
    STATUS_INFO,
)


class TestQualifierAxis:
    """Test the axis table."""

    def test_axis_count(self):
        """There are 21 qualifier axes."""
        assert QUALIFIER_COUNT == 21

    def test_axes_are_contiguous(self):
        """Axis indices run from 0 to QUALIFIER_COUNT - 1."""
        assert [int(a) for a in QualifierAxis] == list(range(QUALIFIER_COUNT))

    def test_locale_precedes_density(self):
        """Language outranks density, density outranks version."""
        assert QualifierAxis.LANGUAGE < QualifierAxis.DENSITY < QualifierAxis.VERSION

    def test_first_and_last(self):
        """Country code is first, version is last."""
        assert QualifierAxis(0) is QualifierAxis.COUNTRY_CODE
        assert QualifierAxis(QUALIFIER_COUNT - 1) is QualifierAxis.VERSION


class TestResourceEnum:
    """Test enum lookup by folder segment."""

    def test_get_enum_known_value(self):
        """Known segment returns the member."""
        assert ScreenOrientation.get_enum('land') is ScreenOrientation.LANDSCAPE

    def test_get_enum_unknown_value(self):
        """Unknown segment returns None."""
        assert ScreenSize.get_enum('huge') is None

    def test_get_enum_empty_value(self):
        """Empty segment never matches, even UiMode.NORMAL."""
        assert UiMode.get_enum('') is None

    def test_get_enum_is_case_sensitive(self):
        """Lookup expects lower-cased segments."""
        assert ScreenSize.get_enum('LARGE') is None

    def test_display_values(self):
        """Members carry short and long display values."""
        assert ScreenSize.XLARGE.short_display_value == 'X-Large'
        assert ScreenSize.XLARGE.long_display_value == 'Extra Large Screen'

    def test_long_display_defaults_to_short(self):
        """A member without a long display reuses the short one."""
        assert UiMode.CAR.long_display_value == UiMode.CAR.short_display_value

    def test_value_is_folder_segment(self):
        """The enum value is the folder segment."""
        assert Keyboard('12key') is Keyboard.TWELVEKEY
        assert KeyboardState.SOFT.value == 'keyssoft'


class TestDensity:
    """Test density members."""

    @pytest.mark.parametrize('density,dpi', [
        (Density.LOW, 120),
        (Density.MEDIUM, 160),
        (Density.TV, 213),
        (Density.HIGH, 240),
        (Density.XHIGH, 320),
        (Density.XXHIGH, 480),
        (Density.XXXHIGH, 640),
    ])
    def test_dpi_values(self, density, dpi):
        """Density buckets have the standard dpi values."""
        assert density.dpi_value == dpi

    def test_get_enum_by_dpi(self):
        """dpi lookup returns the matching bucket."""
        assert Density.get_enum_by_dpi(240) is Density.HIGH

    def test_get_enum_by_unknown_dpi(self):
        """Unknown dpi returns None."""
        assert Density.get_enum_by_dpi(241) is None

    def test_since_values(self):
        """Density members record the API level that added them."""
        assert Density.XXHIGH.since == 16
        assert Density.ANYDPI.since == 21


class TestMiscConstants:
    """Test folder types and status markers."""

    def test_folder_type_values(self):
        """Folder types use the on-disk base names."""
        assert ResourceFolderType('values') is ResourceFolderType.VALUES
        assert ResourceFolderType.DRAWABLE.value == 'drawable'

    def test_status_markers_are_ascii(self):
        """CLI markers are plain ASCII."""
        for marker in (STATUS_OK, STATUS_FAIL, STATUS_INFO):
            assert marker.isascii()
