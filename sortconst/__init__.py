"""In-place quicksort and shellsort with caller-supplied ordering, in ``sortconst.sorting``."""

__version__ = "1.0.1"
__all__ = ["sorting"]