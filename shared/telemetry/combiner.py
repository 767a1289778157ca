from typing import Sequence

from shared.telemetry.models import PairedSample, Sample


def combine(
    primary: Sequence[Sample],
    secondary: Sequence[Sample],
    default: float = 0.0,
) -> list[PairedSample]:
    """Left-outer join of two series on exact timestamp equality.

    Every primary sample yields exactly one paired record, in primary order.
    When the secondary series has no sample at that timestamp the paired
    value is ``default``; with the default of 0 a missing reading cannot be
    told apart from a genuine zero.
    """
    by_time: dict = {}
    for s in secondary:
        by_time.setdefault(s.time, s.value)  # first match wins
    return [
        PairedSample(time=s.time, first=s.value, second=by_time.get(s.time, default))
        for s in primary
    ]
