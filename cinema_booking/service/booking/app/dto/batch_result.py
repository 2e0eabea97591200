import attrs


@attrs.define(frozen=True)
class BatchResult:
    """Outcome of a bulk write: number of affected bookings"""

    count: int
