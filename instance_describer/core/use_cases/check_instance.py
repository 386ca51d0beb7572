# instance_describer/core/use_cases/check_instance.py
import structlog
from typing import Any, Callable

from instance_describer.core.domain.describers import MatchResult
from instance_describer.core.domain.exceptions import InstanceMismatchError

logger = structlog.get_logger()


class CheckInstance:
    """
    Use Case: runs a describer against a node and reports the outcome.

    Responsibilities:
    1. Evaluates the describer (pure, never raises for a mismatch).
    2. Logs the outcome with the failure reason as context.
    3. Optionally turns a mismatch into an InstanceMismatchError.
    """

    def __init__(self, describer: Callable[[Any], Any], log_results: bool = True):
        self.describer = describer
        self.log_results = log_results

    def execute(self, node: Any) -> MatchResult:
        matched, reason = self.describer(node)
        result = MatchResult(matched, reason)

        if self.log_results:
            if result.matched:
                logger.debug("instance_check_passed", describer=type(self.describer).__name__)
            else:
                logger.info(
                    "instance_check_failed",
                    describer=type(self.describer).__name__,
                    reason=result.reason,
                )

        return result

    def assert_matches(self, node: Any) -> None:
        """
        Raises:
            InstanceMismatchError with the describer's reason.
        """
        result = self.execute(node)
        if not result.matched:
            raise InstanceMismatchError(result.reason or "Instance did not match")
