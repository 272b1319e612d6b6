"""
Demo driver: exercise every utility once and collect a report.

``run_demo`` is the only place the utilities meet.  The memoizing cache
is wired to :func:`~utilsuite.core.numeric.big_fib`, and the Fibonacci
lookups run as a time-boxed batch on a named pool.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any

from utilsuite.core.cache import MemoizingCache
from utilsuite.core.config import UtilSuiteSettings, get_settings
from utilsuite.core.fileio import read_text, write_text
from utilsuite.core.functional import partition_count
from utilsuite.core.logging import LogContext, get_logger
from utilsuite.core.numeric import big_fib
from utilsuite.core.registry import FactoryRegistry
from utilsuite.core.shapes import Circle, Rectangle, describe_shape
from utilsuite.core.tags import TagRegistry
from utilsuite.core.text import levenshtein, title_case
from utilsuite.execution.pipeline import run_with_fallback
from utilsuite.execution.pool import invoke_all_timed, new_named_pool

logger = get_logger(__name__)

tags = TagRegistry()


@tags.tag("Data Model")
@dataclass
class Person:
    name: str = ""
    age: int = 0


@dataclass
class DemoReport:
    title: str
    distance: int
    person_created: bool
    fibonacci: list[int]
    pipeline: str
    file_content: str
    partition: dict[bool, int]
    tagged: list[tuple[str, str]]
    shapes: list[str]
    cache_stats: dict[str, int] = field(default_factory=dict)

    def lines(self) -> list[str]:
        return [
            f"Title case: {self.title}",
            f"Levenshtein('kitten','sitting') = {self.distance}",
            f"Registry create Person: present? {str(self.person_created).lower()}",
            f"Fibonacci (memoized): {self.fibonacci}",
            f"Pipeline result: {self.pipeline}",
            f"File content: {self.file_content}",
            f"Partition counts (even/odd): {self.partition}",
            *(f"[Important] {name} - {value}" for name, value in self.tagged),
            f"Shapes: {', '.join(self.shapes)}",
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "distance": self.distance,
            "person_created": self.person_created,
            "fibonacci": self.fibonacci,
            "pipeline": self.pipeline,
            "file_content": self.file_content,
            "partition": {str(k).lower(): v for k, v in self.partition.items()},
            "tagged": [list(t) for t in self.tagged],
            "shapes": self.shapes,
            "cache_stats": self.cache_stats,
        }


def _flaky_payload(rng: random.Random) -> str:
    if rng.random() < 0.5:
        raise RuntimeError("random failure")
    return "payload"


def run_demo(
    settings: UtilSuiteSettings | None = None,
    *,
    rng: random.Random | None = None,
) -> DemoReport:
    """Run every utility once and return what each produced."""
    settings = settings or get_settings()
    rng = rng or random.Random()

    registry = FactoryRegistry()
    registry.register("Person", Person, description="Demo data model")

    fib = MemoizingCache(big_fib, name="big_fib")
    with LogContext(demo_step="fibonacci"):
        with new_named_pool(settings.pool_name_prefix, settings.pool_size) as pool:
            outcome = invoke_all_timed(
                pool,
                [lambda n=n: fib.get(n) for n in settings.fib_inputs],
                settings.batch_timeout_ms,
            )

    with LogContext(demo_step="pipeline"):
        pipeline = run_with_fallback(
            lambda: _flaky_payload(rng),
            lambda s: "mapped:" + s.upper(),
            lambda exc: "fallback:" + str(exc),
        )

    with LogContext(demo_step="fileio"):
        path = write_text(settings.demo_output_path, "Hello from util-suite!")
        content = read_text(path)

    report = DemoReport(
        title=title_case("java UTILITY suite demo") or "",
        distance=levenshtein("kitten", "sitting"),
        person_created=registry.instantiate("Person") is not None,
        fibonacci=outcome.results,
        pipeline=pipeline,
        file_content=content,
        partition=partition_count([1, 2, 3, 4, 5, 6], lambda i: i % 2 == 0),
        tagged=tags.scan(Person, run_demo),
        shapes=[describe_shape(Circle(2.5)), describe_shape(Rectangle(3, 4))],
        cache_stats=fib.stats().to_dict(),
    )
    logger.info("demo.complete", fib_results=len(report.fibonacci), pipeline=pipeline)
    return report
