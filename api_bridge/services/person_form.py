"""Person Form - lifecycle of one draft from open to close.

Invariants:
    - The draft is created when the form opens and dropped when it closes
    - Edit mode iff the seed person has a nonzero id
    - is_valid mirrors the controller's validation (both names non-blank)
    - A closed form never submits again
"""

import logging
from datetime import date

from api_bridge.core.category_maps import (
    parse_role, parse_sex, role_display, sex_display,
)
from api_bridge.core.domain_types import SyncState
from api_bridge.schemas.persona import Person, PersonDraft
from api_bridge.services.sync_controller import SyncController

logger = logging.getLogger(__name__)


class PersonForm:
    """Create/edit form state for a single Person."""

    def __init__(
        self,
        controller: SyncController,
        person: Person | None = None,
        today: date | None = None,
    ) -> None:
        self.controller = controller
        self.person = person
        self.draft: PersonDraft | None = (
            PersonDraft.from_person(person, today) if person is not None
            else PersonDraft.empty(today)
        )
        self.closed = False
        self.error_text: str | None = None

    @property
    def is_edit(self) -> bool:
        return self.person is not None and bool(self.person.id)

    @property
    def is_valid(self) -> bool:
        if self.draft is None:
            return False
        return bool(self.draft.first_name.strip() and self.draft.last_name.strip())

    # Picker bindings: labels in, closed codes stored on the draft.
    # On a closed form the setters are no-ops, like submit.

    @property
    def sex_label(self) -> str:
        return sex_display(self.draft.sex) if self.draft else sex_display(None)

    @sex_label.setter
    def sex_label(self, label: str) -> None:
        if self.draft is None:
            logger.warning("Sex change on a closed form ignored")
            return
        self.draft.sex = parse_sex(label)

    @property
    def role_label(self) -> str:
        return role_display(self.draft.role) if self.draft else role_display(None)

    @role_label.setter
    def role_label(self, label: str) -> None:
        if self.draft is None:
            logger.warning("Role change on a closed form ignored")
            return
        self.draft.role = parse_role(label)

    async def submit(self) -> SyncState:
        """Save the draft.

        closed / error_text are set by callbacks that run through the
        controller's dispatch, so with a loop dispatcher they land once the
        loop applies them, not when submit() returns.
        """
        if self.closed or self.draft is None:
            logger.warning("Submit on a closed form ignored")
            return SyncState.REJECTED

        self.error_text = None
        return await self.controller.save(
            self.draft, self.person,
            on_closed=self._close, on_error=self._show_error,
        )

    def cancel(self) -> None:
        self._close()

    def _show_error(self, message: str) -> None:
        self.error_text = message

    def _close(self) -> None:
        self.closed = True
        self.draft = None
        self.error_text = None
