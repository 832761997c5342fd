"""
Property orchestration service.

Runs one property at a time, times it and packages a PropertyResult. A
property violation ends that property's run and is recorded; configuration
errors are harness defects and propagate to the caller.
"""

import logging
import time
from collections.abc import Callable, Iterable

import psutil
from hypothesis import HealthCheck, given, settings
from hypothesis import seed as hypothesis_seed

from ..core.drivers import ByteSliceDriver, SeededDriver
from ..core.exceptions import PropertyViolation
from ..core.types import EngineFactory
from ..domain.configuration import HarnessConfig, build_engine
from ..generators import Generator
from ..properties import ALL_PROPERTIES, Property
from .property_result import PropertyResult, RunState

logger = logging.getLogger(__name__)


class PropertyRunner:
    """
    Sequential property runner.

    Each invocation moves IDLE -> RUNNING -> SUCCEEDED | FAILED. Nothing is
    retried and counterexamples are not reduced here; Hypothesis shrinks
    them in ``run`` and the seeded and replay modes report them as drawn.
    """

    def __init__(
        self,
        config: HarnessConfig | None = None,
        engine_factory: EngineFactory = build_engine,
        track_memory: bool = False,
        seed: int | None = None,
    ):
        """
        Initialize property runner.

        Args:
            config: Supplies the iteration budget; defaults to HarnessConfig()
            engine_factory: Builds codec instances from configurations
            track_memory: Record resident-memory growth per property
            seed: Fixes Hypothesis and seeded-driver randomness when set
        """
        self.config = config or HarnessConfig()
        self.engine_factory = engine_factory
        self.track_memory = track_memory
        self.seed = seed
        self.state = RunState.IDLE
        self._process = psutil.Process() if track_memory else None

    def run(self, prop: Property, generator: Generator | None = None) -> PropertyResult:
        """
        Run ``prop`` under Hypothesis for the configured iteration budget.

        Args:
            prop: Property to check
            generator: Replaces the property's own generator; it must produce
                values of the same shape
        """
        source = generator or prop.generator
        executed = 0

        def execute(value):
            nonlocal executed
            executed += 1
            prop.check(value, self.engine_factory)

        test = given(source.as_strategy())(execute)
        test = settings(
            max_examples=self.config.iterations,
            database=None,
            deadline=None,
            report_multiple_bugs=False,
            suppress_health_check=list(HealthCheck),
        )(test)
        if self.seed is not None:
            test = hypothesis_seed(self.seed)(test)

        return self._execute(prop.name, test, lambda: executed)

    def run_seeded(
        self, prop: Property, seed: int | None = None, iterations: int | None = None
    ) -> PropertyResult:
        """
        Run ``prop`` from a seeded driver without shrinking.

        Draws the driver cannot complete are skipped and do not count as
        iterations.
        """
        driver = SeededDriver(seed if seed is not None else self.seed)
        budget = iterations or self.config.iterations
        executed = 0

        def body():
            nonlocal executed
            for _ in range(budget):
                value = prop.generator.generate(driver)
                if value is None:
                    logger.debug(f"{prop.name}: driver exhausted, draw skipped")
                    continue
                executed += 1
                prop.check(value, self.engine_factory)

        return self._execute(prop.name, body, lambda: executed)

    def replay(self, prop: Property, data: bytes) -> PropertyResult:
        """Replay a single draw of ``prop`` from a recorded byte corpus."""
        executed = 0

        def body():
            nonlocal executed
            value = prop.generator.generate(ByteSliceDriver(data))
            if value is None:
                logger.info(f"{prop.name}: corpus of {len(data)} bytes too short, draw skipped")
                return
            executed += 1
            prop.check(value, self.engine_factory)

        return self._execute(prop.name, body, lambda: executed)

    def run_check(self, name: str, check: Callable[[], bool | None]) -> PropertyResult:
        """
        Time an ad hoc check closure.

        The closure fails by returning False or raising PropertyViolation.
        It owns its own iteration, so the configured budget is reported.
        """

        def body():
            if check() is False:
                raise PropertyViolation(f"{name}: check returned False")

        return self._execute(name, body, lambda: self.config.iterations)

    def run_all(self, props: Iterable[Property] = ALL_PROPERTIES) -> list[PropertyResult]:
        """Run properties one after another; a failure never stops its siblings."""
        results = [self.run(prop) for prop in props]
        failed = [result.property_name for result in results if not result.success]
        if failed:
            logger.warning(f"{len(failed)} of {len(results)} properties failed: {failed}")
        else:
            logger.info(f"All {len(results)} properties passed")
        return results

    def _execute(
        self, name: str, body: Callable[[], None], iterations: Callable[[], int]
    ) -> PropertyResult:
        self.state = RunState.RUNNING
        logger.info(f"Running property {name}")
        memory_before = self._resident_memory()
        start_time = time.perf_counter()

        try:
            body()
        except PropertyViolation as e:
            execution_time = time.perf_counter() - start_time
            self.state = RunState.FAILED
            logger.warning(f"Property {name} failed after {iterations()} iterations: {e.message}")
            return PropertyResult.failed(
                property_name=name,
                iterations_run=iterations(),
                execution_time=execution_time,
                error_message=e.message,
                counterexample=e.counterexample,
                memory_usage=self._memory_growth(memory_before),
            )
        except Exception as e:
            self.state = RunState.FAILED
            logger.error(f"Property {name} aborted: {e}")
            raise

        execution_time = time.perf_counter() - start_time
        self.state = RunState.SUCCEEDED
        logger.info(f"Property {name} passed {iterations()} iterations in {execution_time:.3f}s")
        return PropertyResult.passed(
            property_name=name,
            iterations_run=iterations(),
            execution_time=execution_time,
            memory_usage=self._memory_growth(memory_before),
        )

    def _resident_memory(self) -> int | None:
        if self._process is None:
            return None
        return self._process.memory_info().rss

    def _memory_growth(self, before: int | None) -> int | None:
        after = self._resident_memory()
        if before is None or after is None:
            return None
        return max(0, after - before)
