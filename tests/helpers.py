"""
Test doubles shared across the test suite.
"""


class FakeClock:
    """Manually advanced clock in seconds."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class StubImplementation:
    """
    Records every capability call and advances the clock by ``cost`` seconds.

    Operations listed in ``failing`` raise RuntimeError instead.
    """

    version = "0.0.1"

    def __init__(self, name="Stub", clock=None, cost=0.001, failing=()):
        self.name = name
        self.clock = clock
        self.cost = cost
        self.failing = set(failing)
        self.calls = []
        self.cleanup_calls = 0

    async def _record(self, operation, *args):
        self.calls.append((operation, args))
        if self.clock is not None:
            self.clock.advance(self.cost)
        if operation in self.failing:
            raise RuntimeError(f"{operation} failed")

    async def create_rows(self, count):
        await self._record("create_rows", count)

    async def replace_all(self, rows):
        await self._record("replace_all", rows)

    async def partial_update(self, rows):
        await self._record("partial_update", rows)

    async def select_row(self, row_id):
        await self._record("select_row", row_id)

    async def swap_rows(self, first_id, second_id):
        await self._record("swap_rows", first_id, second_id)

    async def remove_row(self, row_id):
        await self._record("remove_row", row_id)

    async def append_rows(self, rows):
        await self._record("append_rows", rows)

    async def clear_rows(self):
        await self._record("clear_rows")

    def cleanup(self):
        self.cleanup_calls += 1
