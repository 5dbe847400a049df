"""Search Session - background dispatch with a single state channel.

Validation runs on the caller's thread. Geocoding and the USGS query
run on one background worker. Every resulting SearchState is delivered
through the on_state callback, optionally marshalled by a dispatch hook
onto the presentation thread. From submission until its result has
been delivered the session is busy and further submissions are refused.
"""

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from datetime import date
from typing import Callable

from quake_locator.core.search import SearchForm, to_criteria
from quake_locator.core.state import SearchState
from quake_locator.orchestrator import Orchestrator


logger = logging.getLogger(__name__)


StateListener = Callable[[SearchState], None]
Dispatcher = Callable[[Callable[[], None]], None]


def _call_now(callback: Callable[[], None]) -> None:
    callback()


class SearchSession:
    """Runs one search at a time in the background.

    Attributes:
        state: The last state published
    """

    def __init__(
        self,
        orchestrator: Orchestrator,
        on_state: StateListener,
        dispatch: Dispatcher | None = None,
        executor: Executor | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            orchestrator: Performs the actual work
            on_state: Receives every published state
            dispatch: Runs a callback on the presentation thread
                (defaults to calling it immediately)
            executor: Background executor (a single worker if not provided)
        """
        self.orchestrator = orchestrator
        self.on_state = on_state
        self.dispatch = dispatch or _call_now
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="quake-search",
        )
        self._lock = threading.Lock()
        self._busy = False
        self.state = SearchState()

    @property
    def busy(self) -> bool:
        """True while a request is in flight."""
        with self._lock:
            return self._busy

    def _publish(self, state: SearchState, finished: bool = False) -> None:
        def apply() -> None:
            self.state = state
            try:
                self.on_state(state)
            finally:
                # Free only once the result has reached the listener
                if finished:
                    with self._lock:
                        self._busy = False

        self.dispatch(apply)

    def _run(self, work: Callable[[], SearchState]) -> SearchState:
        try:
            state = work()
        except Exception as e:
            logger.exception("Background search failed")
            state = SearchState.failed(e)

        self._publish(state, finished=True)
        return state

    def _start(self, work: Callable[[], SearchState]) -> Future | None:
        with self._lock:
            if self._busy:
                logger.info("Search already in progress, ignoring request")
                return None
            self._busy = True

        self._publish(SearchState.loading())
        return self._executor.submit(self._run, work)

    def submit_search(self, form: SearchForm) -> Future | None:
        """Validate the form now and search in the background.

        Returns:
            Future resolving to the final SearchState, or None if the form
            was invalid or a search is already running
        """
        if self.busy:
            logger.info("Search already in progress, ignoring request")
            return None

        invalid = self.orchestrator.validate(form)
        if invalid is not None:
            self._publish(invalid)
            return None

        criteria = to_criteria(form)
        return self._start(lambda: self.orchestrator.search(criteria))

    def submit_quick_search(
        self,
        location: str,
        today: date | None = None,
    ) -> Future | None:
        """Run a quick search in the background.

        Returns:
            Future resolving to the final SearchState, or None if the
            location was blank or a search is already running
        """
        if self.busy:
            logger.info("Search already in progress, ignoring request")
            return None

        invalid = self.orchestrator.validate_quick(location)
        if invalid is not None:
            self._publish(invalid)
            return None

        return self._start(lambda: self.orchestrator.quick_search(location, today))

    def close(self) -> None:
        """Wait for running work and release the worker."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "SearchSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
