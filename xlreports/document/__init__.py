"""Document composition tree."""
from .element import Element, TableElement, PHASES
