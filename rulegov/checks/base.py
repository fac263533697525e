"""Base classes for document checks."""

from abc import ABC, abstractmethod
from typing import Iterable

from ..models import Document, Finding, Severity


class DocumentCheck(ABC):
    """Contract for checks that emit findings for a single governance document."""

    name: str = "check"

    @abstractmethod
    def run(self, document: Document) -> Iterable[Finding]:
        """Return the findings raised against ``document``, in a stable order."""

    @staticmethod
    def error(document: Document, message: str) -> Finding:
        return Finding(severity=Severity.ERROR, document_id=document.document_id, message=message)

    @staticmethod
    def warning(document: Document, message: str) -> Finding:
        return Finding(severity=Severity.WARNING, document_id=document.document_id, message=message)
