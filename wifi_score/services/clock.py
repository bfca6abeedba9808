"""Wall clock and monotonic time source."""

import time


class SystemClock:
    """Clock backed by the host's system time."""

    def get_wall_clock_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def get_elapsed_since_boot_millis(self) -> int:
        return time.monotonic_ns() // 1_000_000
