"""Exception telemetry."""

import traceback
from dataclasses import dataclass

from insightspy.core.models import ExceptionDetails
from insightspy.core.telemetry.base import MeasuredTelemetry
from insightspy.core.telemetry.trace import SeverityLevel


@dataclass
class ExceptionTelemetry(MeasuredTelemetry):
    """A handled or unhandled exception.

    Example:
        ```python
        try:
            charge(order)
        except PaymentError as exc:
            telemetry = ExceptionTelemetry(exc, severity=SeverityLevel.ERROR)
        ```
    """

    exception: BaseException
    severity: SeverityLevel | None = None
    problem_id: str | None = None


def exception_chain(exc: BaseException) -> list[BaseException]:
    """Return ``exc`` followed by its causes, outermost first.

    Follows ``__cause__``, then ``__context__`` unless suppressed. Cycles
    are cut.
    """
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return chain


def exception_details(exc: BaseException) -> tuple[ExceptionDetails, ...]:
    """Describe every exception in the chain of ``exc``.

    Each entry points at the exception that wrapped it through ``outer_id``.
    """
    details = []
    for index, item in enumerate(exception_chain(exc)):
        tb = item.__traceback__
        details.append(
            ExceptionDetails(
                id=index,
                outer_id=index - 1 if index else None,
                type_name=type(item).__qualname__,
                message=str(item),
                has_full_stack=tb is not None,
                stack="".join(traceback.format_tb(tb)) if tb is not None else None,
            )
        )
    return tuple(details)
