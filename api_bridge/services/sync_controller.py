"""Sync Controller - load the person list and save drafts through the transport.

Invariants:
    - save: IDLE -> VALIDATING -> {REJECTED | SUBMITTING -> {COMPLETED | FAILED}}
    - REJECTED is decided before any await: zero transport calls, state already
      updated (under inline dispatch) when save() returns
    - Exactly one transport call per accepted save: PATCH when the existing
      record has a nonzero id, POST otherwise
    - load() never raises for transport or decode failures: [] plus load_error_text
    - Load and save errors are tracked separately; one never clears the other
    - Presentation-visible state is mutated only through `dispatch`, including
      the caller's on_closed / on_error callbacks
    - One request in flight per controller (asyncio.Lock)

Design Decisions:
    - A None transport result on save still ends in COMPLETED and closes the
      form, unless settings.report_save_failures is on (then FAILED, form open)
    - dispatch defaults to running the update inline; UIs with their own loop
      pass loop_dispatcher(loop)
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from api_bridge.config import Settings, get_settings
from api_bridge.core.domain_types import SyncState
from api_bridge.core.errors import (
    ApiBridgeError, DecodeFailure, ErrorContext, TransportFailure, ValidationFailure,
)
from api_bridge.core.record_codec import (
    build_payload, decode_list, encode_payload, validate_draft,
)
from api_bridge.core.transport_protocol import Transport
from api_bridge.schemas.persona import Person, PersonDraft

logger = logging.getLogger(__name__)

Update = Callable[[], None]
Dispatch = Callable[[Update], None]


def run_inline(update: Update) -> None:
    update()


def loop_dispatcher(loop: asyncio.AbstractEventLoop) -> Dispatch:
    """Dispatcher that applies state updates on `loop`, from any thread."""
    def dispatch(update: Update) -> None:
        loop.call_soon_threadsafe(update)
    return dispatch


@dataclass
class SyncViewState:
    """State observed by the presentation layer."""
    records: list[Person] = field(default_factory=list)
    load_error: ApiBridgeError | None = None
    save_state: SyncState = SyncState.IDLE
    save_error: ApiBridgeError | None = None

    @property
    def load_error_text(self) -> str | None:
        return self.load_error.user_message if self.load_error else None

    @property
    def save_error_text(self) -> str | None:
        return self.save_error.user_message if self.save_error else None


class SyncController:
    """Orchestrates load and save for the Person resource."""

    def __init__(
        self,
        transport: Transport,
        settings: Settings | None = None,
        dispatch: Dispatch = run_inline,
    ) -> None:
        self.transport = transport
        self.settings = settings or get_settings()
        self.endpoint = self.settings.persona_endpoint
        self.state = SyncViewState()
        self._dispatch = dispatch
        self._lock = asyncio.Lock()

    # -- load -----------------------------------------------------------------

    async def load(self) -> list[Person]:
        """GET the list. Failures yield [] and set load_error_text."""
        async with self._lock:
            text = await self.transport.get(self.endpoint)

        try:
            if text is None:
                raise TransportFailure("GET", self.endpoint)
            records = decode_list(text)
        except (TransportFailure, DecodeFailure) as e:
            logger.error(
                "Person list load failed: %s", e.code,
                extra={
                    "error_code": e.code, "path": self.endpoint,
                    "debug_info": e.context.debug_info,
                },
            )
            self._apply(self._set_records([], e))
            return []

        logger.info(
            "Person list loaded", extra={"record_count": len(records)},
        )
        self._apply(self._set_records(records, None))
        return records

    # -- save -----------------------------------------------------------------

    async def save(
        self,
        draft: PersonDraft,
        existing: Person | None = None,
        on_closed: Update | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> SyncState:
        """Validate, then create (POST) or update (PATCH) one record.

        on_closed runs when the form should close, on_error receives the
        user-facing text on REJECTED / FAILED. Both go through dispatch.
        """
        existing_id = existing.id if existing is not None and existing.id else None
        self._apply(self._set_save_state(SyncState.VALIDATING))
        try:
            validate_draft(draft)
        except ValidationFailure as e:
            logger.info(
                "Save rejected: %s", e.message,
                extra={"error_code": e.code, "person_id": existing_id},
            )
            self._apply(self._set_save_state(SyncState.REJECTED, e))
            self._notify_error(on_error, e)
            return SyncState.REJECTED

        payload = build_payload(draft, existing_id)
        body = encode_payload(payload)
        self._apply(self._set_save_state(SyncState.SUBMITTING))

        async with self._lock:
            if existing_id:
                method = "PATCH"
                result = await self.transport.patch(self.endpoint, body)
            else:
                method = "POST"
                result = await self.transport.post(self.endpoint, body)

        log_extra = {"method": method, "path": self.endpoint, "person_id": existing_id}
        if result is None:
            failure = TransportFailure(
                method, self.endpoint, ErrorContext(person_id=existing_id),
            )
            if self.settings.report_save_failures:
                logger.error(
                    "Save failed: %s", failure.message,
                    extra={**log_extra, "error_code": failure.code},
                )
                self._apply(self._set_save_state(SyncState.FAILED, failure))
                self._notify_error(on_error, failure)
                return SyncState.FAILED
            # Current behavior: the form closes as if the save had succeeded
            logger.warning(
                "Save returned no result; closing form anyway",
                extra={**log_extra, "error_code": failure.code},
            )
        else:
            logger.info("Save completed", extra=log_extra)

        self._apply(self._set_save_state(SyncState.COMPLETED))
        if on_closed is not None:
            self._apply(on_closed)
        return SyncState.COMPLETED

    # -- state updates --------------------------------------------------------

    def _apply(self, update: Update) -> None:
        self._dispatch(update)

    def _notify_error(
        self, on_error: Callable[[str], None] | None, error: ApiBridgeError,
    ) -> None:
        if on_error is not None:
            message = error.user_message
            self._apply(lambda: on_error(message))

    def _set_records(
        self, records: list[Person], error: ApiBridgeError | None,
    ) -> Update:
        def update() -> None:
            self.state.records = records
            self.state.load_error = error
        return update

    def _set_save_state(
        self, save_state: SyncState, error: ApiBridgeError | None = None,
    ) -> Update:
        def update() -> None:
            self.state.save_state = save_state
            self.state.save_error = error
        return update
