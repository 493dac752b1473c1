"""
Core domain layer: question records, the dataset abstraction with its facet
values and filtered views, and the filter state.
"""

from .dataset import Dataset, FacetValueSets
from .filter_state import FilterState
from .question import QuestionRecord, as_values

__all__ = ["Dataset", "FacetValueSets", "FilterState", "QuestionRecord", "as_values"]
