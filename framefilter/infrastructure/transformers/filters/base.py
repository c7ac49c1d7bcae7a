"""
Base class for DataFrame filters.
"""

from abc import ABC, abstractmethod
import pandas as pd


class DataFrameFilter(ABC):
    """
    Abstract base class for DataFrame filters.

    A DataFrame filter removes rows and never changes columns: the output
    keeps every column, in order, with its dtype where possible.
    """

    @abstractmethod
    def filter(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Filter a DataFrame.

        Args:
            df: Input DataFrame

        Returns:
            pd.DataFrame: Filtered DataFrame
        """
        pass
