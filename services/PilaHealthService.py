# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: PilaHealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from health.TestRunner import TestRunner
from api.schemas.health import DeepHealthResponse, HealthResponse, SmokeTestSummary


@dataclass
class PilaHealthService:
    """
    Wraps TestRunner, which smoke-tests the text layer reader,
    the extractor and the upload API configuration.
    Returns HealthResponse / DeepHealthResponse for API layer
    """

    test_runner: TestRunner

    def basic_health(self) -> HealthResponse:
        """Static view of the running configuration; touches no PDF and no network."""
        cfg = self.test_runner.cfg
        extractor = self.test_runner.extractor
        reader = self.test_runner.reader

        if cfg.upload_configured:
            message = "PILA extractor API running"
        else:
            missing = ", ".join(cfg.missing_upload_env_vars())
            message = f"PILA extractor API running; upload disabled (missing {missing})"

        return HealthResponse(
            status="ok",
            message=message,
            upload_configured=cfg.upload_configured,
            extraction_variant=extractor.variant.value,
            min_digits=extractor.min_digits,
            text_reader=getattr(reader, "name", type(reader).__name__),
        )

    def deep_health(self, run_upstream: bool = False) -> DeepHealthResponse:
        results = self.test_runner.run_all(run_upstream=run_upstream)

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            results=results,
            summary=SmokeTestSummary(total=total, passed=passed, failed=failed),
            missing_env_vars=self.test_runner.cfg.missing_upload_env_vars(),
        )
