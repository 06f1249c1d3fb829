"""Per-language strings and formatting rules for workday reports.

The table is built once at import time and exposed read-only. Each entry is
a frozen LocalizedStrings record holding month names, labels, fixed phrases
and the templates used for dates and page footers.
"""

import datetime as dt
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from workday_reports.localization.languages import Language, parse_language


@dataclass(frozen=True)
class LocalizedStrings:
    """Formatting rules and fixed text for one language.

    Attributes:
        language: Language these strings belong to
        month_names: The 12 month names, January first
        document_title: Title shown in the report header
        period_template: Template for the period line ({month}, {year})
        column_labels: Labels of the 7 table columns
        no_data_message: Row text when no workday was recorded
        not_computed: Work time shown for shifts without an end time
        overnight_marker: Text shown for overnight entries
        end_time_placeholder: End time shown when a shift is still open
        total_label: Label of the total row
        date_template: Template for a civil date ({day}, {month}, {year})
        generated_on_template: Footer template ({date}, {time})
        page_template: Footer template ({current}, {total})
    """

    language: Language
    month_names: Tuple[str, ...]
    document_title: str
    period_template: str
    column_labels: Tuple[str, ...]
    no_data_message: str
    not_computed: str
    overnight_marker: str
    end_time_placeholder: str
    total_label: str
    date_template: str
    generated_on_template: str
    page_template: str

    def month_name(self, month: int) -> str:
        """Return the name of a 1-based month."""
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        return self.month_names[month - 1]

    def period_text(self, month: int, year: int) -> str:
        return self.period_template.format(month=self.month_name(month), year=year)

    def date_format(self, day: int, month: int, year: int) -> str:
        return self.date_template.format(day=day, month=month, year=year)

    def format_date(self, value: dt.date) -> str:
        return self.date_format(value.day, value.month, value.year)

    def footer_generated_on(self, date: str, time: str) -> str:
        return self.generated_on_template.format(date=date, time=time)

    def footer_page(self, current: int, total: int) -> str:
        return self.page_template.format(current=current, total=total)


_SHARED_LABELS = {
    "end_time_placeholder": "/",
    "total_label": "Total",
}

_ENGLISH = LocalizedStrings(
    language=Language.ENGLISH,
    month_names=(
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
    document_title="Monthly workday report",
    period_template="Period: {month} {year}",
    column_labels=(
        "#",
        "Date",
        "Start time",
        "End time",
        "Break",
        "Overnight",
        "Worked time",
    ),
    no_data_message="No workday was recorded for the selected period.",
    not_computed="not computed",
    overnight_marker="Yes",
    date_template="{month:02d}/{day:02d}/{year}",
    generated_on_template="Generated on {date} at {time}",
    page_template="Page {current} of {total}",
    **_SHARED_LABELS,
)

_FRENCH = LocalizedStrings(
    language=Language.FRENCH,
    month_names=(
        "Janvier",
        "Février",
        "Mars",
        "Avril",
        "Mai",
        "Juin",
        "Juillet",
        "Août",
        "Septembre",
        "Octobre",
        "Novembre",
        "Décembre",
    ),
    document_title="Relevé des journées mensuel",
    period_template="Période : {month} {year}",
    column_labels=(
        "#",
        "Date",
        "Heure de début",
        "Heure de fin",
        "Coupure",
        "Découchage",
        "Temps travaillé",
    ),
    no_data_message=(
        "Aucune journée n'a été enregistrée pour la période sélectionnée."
    ),
    not_computed="non calculé",
    overnight_marker="Oui",
    date_template="{day:02d}/{month:02d}/{year}",
    generated_on_template="Généré le {date} à {time}",
    page_template="Page {current} sur {total}",
    **_SHARED_LABELS,
)

LOCALIZED_STRINGS: Mapping[Language, LocalizedStrings] = MappingProxyType(
    {
        Language.ENGLISH: _ENGLISH,
        Language.FRENCH: _FRENCH,
    }
)


def resolve(language) -> LocalizedStrings:
    """Look up the strings for a language.

    Args:
        language: A Language, or a raw value accepted by parse_language

    Returns:
        LocalizedStrings for that language

    Raises:
        InvalidLanguageError: If the language is not supported
    """
    return LOCALIZED_STRINGS[parse_language(language)]
