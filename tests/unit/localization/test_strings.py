"""Unit tests for the localized strings table."""

import dataclasses
import datetime as dt

import pytest

from workday_reports.exceptions import InvalidLanguageError
from workday_reports.localization import LOCALIZED_STRINGS, Language, resolve


class TestResolve:
    """Test looking up strings for a language."""

    def test_every_language_has_strings(self):
        """Test that the table covers the whole enum."""
        assert set(LOCALIZED_STRINGS) == set(Language)

    def test_resolve_accepts_raw_value(self):
        """Test that resolve validates raw values."""
        assert resolve("French").language is Language.FRENCH

    def test_resolve_rejects_unknown_language(self):
        """Test that resolve raises for unsupported languages."""
        with pytest.raises(InvalidLanguageError):
            resolve("Spanish")

    def test_table_is_read_only(self):
        """Test that the table cannot be modified."""
        with pytest.raises(TypeError):
            LOCALIZED_STRINGS[Language.ENGLISH] = LOCALIZED_STRINGS[Language.FRENCH]

    def test_strings_are_frozen(self):
        """Test that individual records are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            resolve(Language.ENGLISH).document_title = "Changed"


class TestLocalizedStrings:
    """Test formatting rules of each language."""

    @pytest.mark.parametrize("language", list(Language))
    def test_twelve_months(self, language):
        """Test that each language names 12 months."""
        assert len(resolve(language).month_names) == 12

    @pytest.mark.parametrize("language", list(Language))
    def test_seven_column_labels(self, language):
        """Test that each language labels the 7 table columns."""
        assert len(resolve(language).column_labels) == 7

    def test_french_date_format(self):
        """Test that French dates read DD/MM/YYYY."""
        assert resolve(Language.FRENCH).format_date(dt.date(2024, 3, 7)) == "07/03/2024"

    def test_english_date_format(self):
        """Test that English dates read MM/DD/YYYY."""
        assert resolve(Language.ENGLISH).format_date(dt.date(2024, 3, 7)) == "03/07/2024"

    def test_date_format_from_parts(self):
        """Test the date template with separate day, month and year."""
        assert resolve(Language.FRENCH).date_format(1, 12, 2023) == "01/12/2023"

    def test_month_names(self):
        """Test first and last month names in both languages."""
        assert resolve(Language.ENGLISH).month_name(1) == "January"
        assert resolve(Language.FRENCH).month_name(12) == "Décembre"

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_out_of_range(self, month):
        """Test that invalid months are rejected."""
        with pytest.raises(ValueError, match="between 1 and 12"):
            resolve(Language.ENGLISH).month_name(month)

    def test_period_text(self):
        """Test the localized period line."""
        assert resolve(Language.ENGLISH).period_text(8, 2024) == "Period: August 2024"
        assert resolve(Language.FRENCH).period_text(8, 2024) == "Période : Août 2024"

    def test_footer_generated_on(self):
        """Test the localized generation timestamp."""
        assert (
            resolve(Language.ENGLISH).footer_generated_on("04/02/2024", "09:15:30")
            == "Generated on 04/02/2024 at 09:15:30"
        )
        assert (
            resolve(Language.FRENCH).footer_generated_on("02/04/2024", "09:15:30")
            == "Généré le 02/04/2024 à 09:15:30"
        )

    def test_footer_page(self):
        """Test the localized page label."""
        assert resolve(Language.ENGLISH).footer_page(1, 3) == "Page 1 of 3"
        assert resolve(Language.FRENCH).footer_page(2, 3) == "Page 2 sur 3"

    def test_fixed_phrases(self):
        """Test sentinel texts used in the table."""
        french = resolve(Language.FRENCH)
        english = resolve(Language.ENGLISH)
        assert french.not_computed == "non calculé"
        assert english.not_computed == "not computed"
        assert french.overnight_marker == "Oui"
        assert english.overnight_marker == "Yes"
        assert french.end_time_placeholder == english.end_time_placeholder == "/"
