"""Pipeline orchestration: read the corpus, analyze documents, aggregate, report."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from .aggregator import CorpusAggregator
from .analyzer import DocumentAnalyzer
from .constants import PASSING_OVERALL_SCORE
from .logging import get_logger
from .models import Category, CorpusResult, Document, Finding, HealthRecord
from .reports.base import ReportSink
from .sources import DocumentSource, MetadataProvider, StructuralPresenceChecker

_CATEGORY_ORDER: tuple[Category, ...] = (Category.RULE, Category.WORKFLOW)


@dataclass
class AuditOutcome:
    """Result of a governance audit run."""

    result: CorpusResult
    fail_under: int = PASSING_OVERALL_SCORE

    @property
    def findings(self) -> List[Finding]:
        return self.result.findings

    @property
    def error_count(self) -> int:
        return sum(1 for finding in self.findings if finding.is_error)

    @property
    def validation_passed(self) -> bool:
        return self.error_count == 0

    @property
    def passed(self) -> bool:
        return self.validation_passed and self.result.overall_score >= self.fail_under

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1


class Orchestrator:
    """Coordinates one audit run over injected collaborators."""

    def __init__(
        self,
        analyzer: DocumentAnalyzer | None = None,
        aggregator: CorpusAggregator | None = None,
        *,
        workers: int = 1,
    ) -> None:
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self.analyzer = analyzer or DocumentAnalyzer()
        self.aggregator = aggregator or CorpusAggregator()
        self.workers = workers
        self.logger = get_logger("orchestrator")

    def run(
        self,
        source: DocumentSource,
        metadata: MetadataProvider,
        presence_checker: StructuralPresenceChecker,
        sinks: Sequence[ReportSink] = (),
        *,
        now: datetime | None = None,
        fail_under: int = PASSING_OVERALL_SCORE,
    ) -> AuditOutcome:
        now = now or datetime.now(timezone.utc)
        documents = self.collect_documents(source, metadata)
        self.logger.info("Analyzing %d governance documents", len(documents))

        analyzed = self._analyze_all(documents, now)
        findings: List[Finding] = []
        records: List[HealthRecord] = []
        for document_findings, record in analyzed:
            findings.extend(document_findings)
            records.append(record)

        presence = presence_checker.check()
        result = self.aggregator.aggregate(findings, records, presence)
        self.logger.info(
            "Validation score %d/100, health %d/100, overall %d/100",
            result.validation_score,
            result.overall_health,
            result.overall_score,
        )

        for sink in sinks:
            sink.emit(result.findings, result)

        return AuditOutcome(result=result, fail_under=fail_under)

    def collect_documents(
        self, source: DocumentSource, metadata: MetadataProvider
    ) -> List[Document]:
        """Read every document of every category; any read failure propagates."""
        documents: List[Document] = []
        for category in _CATEGORY_ORDER:
            count = 0
            for document_id, raw_text in source.iter_documents(category):
                documents.append(
                    Document(
                        document_id=document_id,
                        category=category,
                        raw_text=raw_text,
                        last_modified=metadata.last_modified(document_id),
                    )
                )
                count += 1
            self.logger.debug("Collected %d %s", count, category.value)
        # Stable report order regardless of source order: by id, checks in fixed order.
        documents.sort(key=lambda document: document.document_id)
        return documents

    def _analyze_all(
        self, documents: Sequence[Document], now: datetime
    ) -> List[Tuple[List[Finding], HealthRecord]]:
        def _analyze(document: Document) -> Tuple[List[Finding], HealthRecord]:
            findings, record = self.analyzer.analyze(document, now=now)
            self.logger.debug(
                "%s: health %d, %d findings",
                document.document_id,
                record.health_score,
                len(findings),
            )
            return findings, record

        if self.workers == 1 or len(documents) < 2:
            return [_analyze(document) for document in documents]

        # map() yields results in input order, which keeps findings stable.
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            return list(executor.map(_analyze, documents))


def run_audit(
    source: DocumentSource,
    metadata: MetadataProvider,
    presence_checker: StructuralPresenceChecker,
    sinks: Iterable[ReportSink] = (),
    *,
    now: Optional[datetime] = None,
    workers: int = 1,
    fail_under: int = PASSING_OVERALL_SCORE,
) -> AuditOutcome:
    """Run a complete audit with default analyzer and aggregator."""
    orchestrator = Orchestrator(workers=workers)
    return orchestrator.run(
        source,
        metadata,
        presence_checker,
        list(sinks),
        now=now,
        fail_under=fail_under,
    )


__all__ = ["AuditOutcome", "Orchestrator", "run_audit"]
