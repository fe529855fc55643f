"""Apply stringops functions to pandas columns.

These helpers are for data pipelines that hold text in a `pandas.Series`.
Each function is applied element by element; missing values are left as they are.
"""

__docformat__ = 'google'

__all__ = [
    'apply_operation',
    'classify'
]

from typing import Any, Callable
import pandas as pd
from stringops.strings import is_alphabetic, is_digits, is_whitespace

PREDICATES = {
    'is_alphabetic': is_alphabetic,
    'is_digits': is_digits,
    'is_whitespace': is_whitespace
}
"""Column name to predicate used by `classify`."""

def apply_operation(series: pd.Series, operation: Callable[..., Any], *args) -> pd.Series:
    """
    Apply a text function to every non-missing element of a Series.

    Args:
        series: Text values; NaN and None are passed through
        operation: A `stringops.strings` function taking text first
        *args: Remaining arguments for the operation

    Returns:
        New Series with the same index and name

    Example:
        >>> from stringops.strings import replace
        >>> apply_operation(pd.Series(['go go', 'lang']), replace, 'go', 'Golang').tolist()
        ['Golang Golang', 'lang']
    """
    return series.map(lambda text: operation(text, *args), na_action='ignore')

def classify(series: pd.Series) -> pd.DataFrame:
    """
    Evaluate every classification predicate on each element.

    Args:
        series: Text values; NaN and None are not evaluated

    Returns:
        DataFrame with one nullable `boolean` column per predicate, indexed like
        the input. Rows that are missing in the input are `pd.NA` in every column.

    Example:
        >>> result = classify(pd.Series(['abc', '123', '', None]))
        >>> result.is_digits.iloc[:3].tolist() == [False, True, True]
        True
        >>> result.is_digits.isna().tolist() == [False, False, False, True]
        True
    """
    return pd.DataFrame(
        {
            name: series.map(predicate, na_action='ignore').astype('boolean')
            for name, predicate in PREDICATES.items()
        },
        index=series.index
    )
