"""Driver descriptors for APDU and HTTP backends."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class DriverType(Enum):
    """Kind of backend a driver provides."""

    APDU = "apdu"
    HTTP = "http"


InitHook = Callable[[Any], None]
MainHook = Callable[[Any, Sequence[str]], int]
FiniHook = Callable[[Any], None]


@dataclass(frozen=True)
class Driver:
    """A named backend with optional init, main and fini hooks.

    ``init`` prepares the interface and raises on failure. ``main`` runs the
    driver's command line and returns an exit code. ``fini`` releases whatever
    ``init`` acquired.
    """

    type: DriverType
    name: str
    init: Optional[InitHook] = None
    main: Optional[MainHook] = None
    fini: Optional[FiniHook] = None

    def run(self, interface: Any, argv: Sequence[str]) -> int:
        """Initialise, run ``main`` with ``argv`` and always finalise.

        If ``init`` raises, neither ``main`` nor ``fini`` is called.
        A driver without ``main`` exits with 0.
        """
        if self.init is not None:
            self.init(interface)
        try:
            if self.main is None:
                return 0
            return self.main(interface, list(argv))
        finally:
            if self.fini is not None:
                self.fini(interface)