# shared test doubles for the game session


class FixedLanes:
    """Lane source that cycles through a fixed list of lanes."""

    def __init__(self, *lanes):
        self.lanes = list(lanes)
        self.calls = 0

    def randrange(self, n):
        lane = self.lanes[self.calls % len(self.lanes)]
        self.calls += 1
        assert 0 <= lane < n
        return lane


def run_ticks(session, count, start=0, step=16):
    """Tick ``count`` frames at a steady pace; returns the last timestamp."""
    now = start
    for i in range(count):
        now = start + i * step
        session.tick(now)
    return now
