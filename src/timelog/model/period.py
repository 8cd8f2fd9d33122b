# SPDX-License-Identifier: MIT

from enum import Enum


class Period(str, Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "this-week"
    LAST_WEEK = "last-week"
    THIS_MONTH = "this-month"
    LAST_MONTH = "last-month"
    YTD = "ytd"
    LAST_YEAR = "last-year"

    @property
    def canonical_name(self) -> str:
        """Lowercase name used on the plugin wire, e.g. 'thisweek'."""
        return self.value.replace("-", "")

    @property
    def display_title(self) -> str:
        return PERIOD_TITLES[self]


PERIOD_TITLES: dict[Period, str] = {
    Period.TODAY: "Today",
    Period.YESTERDAY: "Yesterday",
    Period.THIS_WEEK: "This Week",
    Period.LAST_WEEK: "Last Week",
    Period.THIS_MONTH: "This Month",
    Period.LAST_MONTH: "Last Month",
    Period.YTD: "Year To Date",
    Period.LAST_YEAR: "Last Year",
}
