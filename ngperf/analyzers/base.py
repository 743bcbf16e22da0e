"""Base classes for rule plugins."""

from abc import ABC, abstractmethod
from typing import ClassVar, List, Literal

from ..models import ComponentRecord, Finding

Family = Literal["change-detection", "template", "subscription", "bundle"]


class Rule(ABC):
    """Contract for rules that turn a component record into findings."""

    name: ClassVar[str]
    family: ClassVar[Family]

    def supports(self, record: ComponentRecord) -> bool:
        """Return True when this rule has something to inspect in the record."""
        return True

    @abstractmethod
    def evaluate(self, record: ComponentRecord) -> List[Finding]:
        """Produce findings without mutating the record."""
