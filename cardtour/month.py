"""
Calendar months as another raw-value enumeration.
"""

from cardtour.raw_value import RawValueEnum


class Month(RawValueEnum):
    jan = 1
    feb = 2
    mar = 3
    apr = 4
    may = 5
    jun = 6
    jul = 7
    aug = 8
    sep = 9
    oct = 10
    nov = 11
    dec = 12

    def month_number(self) -> int:
        return self.raw_value
