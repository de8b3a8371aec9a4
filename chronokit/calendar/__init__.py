"""Calendrical values of differing precision and their ordering contract."""
from .precision import ArbitraryPrecisionDate, CalendarDate, Year, YearMonth, is_leap_year

__all__ = ["ArbitraryPrecisionDate", "CalendarDate", "Year", "YearMonth", "is_leap_year"]
