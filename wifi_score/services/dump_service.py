"""
Dump request router.

Diagnostic dump requests name the component to dump by tag (for example
WifiScoreReport.DUMP_ARG). A request without a tag dumps every registered
component, each under a "== tag ==" heading.
"""

from typing import Dict, List, Optional, TextIO

import structlog

from wifi_score.core.exceptions import DumpTargetNotFoundError
from wifi_score.services.protocols import Dumpable

log = structlog.get_logger(__name__)


class DumpService:
    """Routes dump requests to components registered by tag."""

    def __init__(self) -> None:
        self._targets: Dict[str, Dumpable] = {}

    def register(self, tag: str, target: Dumpable) -> None:
        self._targets[tag] = target

    @property
    def tags(self) -> List[str]:
        return list(self._targets)

    def dump(self, sink: TextIO, args: Optional[List[str]] = None) -> None:
        """
        Write the requested dump to `sink`.

        Args:
            sink: Text stream to write to
            args: First item selects the target by tag; the rest is passed
                through to the target. Empty or None dumps every target.

        Raises:
            DumpTargetNotFoundError: If the requested tag is not registered
        """
        args = list(args or [])
        if args:
            tag = args[0]
            target = self._targets.get(tag)
            if target is None:
                raise DumpTargetNotFoundError(f"No dump target registered for {tag!r}")
            log.info("dump_requested", target=tag)
            target.dump(sink, args[1:])
            return

        log.info("dump_requested", target="all")
        for tag, target in self._targets.items():
            print(f"== {tag} ==", file=sink)
            target.dump(sink, [])
