from .walk import walk
from .check import check
from .roundtrip import roundtrip

__all__ = ['walk', 'check', 'roundtrip']
