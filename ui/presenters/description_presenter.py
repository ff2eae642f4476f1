"""Description presenter - keeps the structured editor and the stored text in step.

Handles the product form's description workflow:
- Load stored description text (edit mode) into structured fields
- Regenerate the description on every field edit
- Auto-populate flavour, weight and servings from catalog state
- Reset / clean actions
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from PySide6.QtCore import QObject, QTimer, Signal

from config.constants import DEFAULT_PLEASE_NOTE
from config.container import Container
from domain.models import ProductDetails, SizeVariant, StructuredDescription, Subcategory, find_subcategory
from domain.services.sync_state import DescriptionSyncGuard, SyncState
from domain.services.text_sanitizer import (
    clean_canonical_text,
    clean_fields,
    count_words,
    is_blank_placeholder,
    is_over_word_limit,
)
from ui.adapters.details_mapper import DetailsMapper

Deferrer = Callable[[Callable[[], None]], None]


def _next_tick(callback: Callable[[], None]) -> None:
    QTimer.singleShot(0, callback)


class DescriptionPresenter(QObject):
    """Presenter for the structured description editor.

    Owns the structured record and the current description text. The host
    form listens to the signals and feeds external changes back through
    the ``load_*`` / ``set_*`` methods.
    """

    description_changed = Signal(str)
    details_changed = Signal(object)
    short_description_changed = Signal(str)

    def __init__(
        self,
        container: Optional[Container] = None,
        initial_details: Optional[Mapping[str, Any]] = None,
        defer: Optional[Deferrer] = None,
    ) -> None:
        """Initialize presenter.

        Args:
            container: DI container (creates new one if not provided)
            initial_details: camelCase form values overlaid on the listing defaults
            defer: Schedules a callback for the next event loop tick
        """
        super().__init__()
        self._container = container if container is not None else Container()
        self._defer = defer if defer is not None else _next_tick
        self._rules = self._container.new_auto_population_rules()
        self._guard = DescriptionSyncGuard()
        self._pending_push = False

        details = DetailsMapper.from_form(initial_details, ProductDetails.listing_defaults())
        self._record = StructuredDescription(details=details)
        self._description = ""

        self._subcategory_name: Optional[str] = None
        self._base_weight = ""
        self._variants: tuple[SizeVariant, ...] = ()

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def record(self) -> StructuredDescription:
        return self._record

    @property
    def overview(self) -> str:
        return self._record.overview

    @property
    def details(self) -> ProductDetails:
        return self._record.details

    @property
    def please_note(self) -> str:
        return self._record.please_note

    @property
    def description(self) -> str:
        return self._description

    @property
    def sync_state(self) -> SyncState:
        return self._guard.state

    @property
    def weight_manually_edited(self) -> bool:
        return self._rules.weight_manually_edited

    def get_word_count(self) -> int:
        return count_words(self._record.overview)

    def is_overview_too_long(self) -> bool:
        return is_over_word_limit(self._record.overview)

    def details_for_form(self) -> dict[str, str]:
        return DetailsMapper.to_form(self._record.details)

    # ------------------------------------------------------------------
    # External inputs
    # ------------------------------------------------------------------

    def load_description(self, text: Optional[str]) -> None:
        """Accept description text from the host (edit-mode load or echo)."""
        self._description = text or ""
        if not self._description.strip():
            return
        if self._guard.is_syncing:
            logging.debug("load_description skipped while syncing")
            return
        parsed = self._container.parse_description.execute(self._description, self._record)
        self._update(parsed)

    def load_short_description(self, text: Optional[str]) -> None:
        """An initial short description replaces the overview."""
        if text and text.strip():
            self._update(replace(self._record, overview=text.strip()))

    def set_primary_subcategory(
        self,
        subcategory_id: Union[int, str, None],
        subcategories: Sequence[Subcategory],
    ) -> None:
        subcategory = find_subcategory(subcategories, subcategory_id)
        self._subcategory_name = subcategory.name if subcategory is not None else None
        details = self._rules.apply_flavour(self._record.details, self._subcategory_name)
        self._update(replace(self._record, details=details))

    def set_base_weight(
        self,
        base_weight: Optional[str],
        variants: Optional[Sequence[SizeVariant]] = None,
    ) -> None:
        self._base_weight = base_weight or ""
        if variants is not None:
            self._variants = tuple(variants)
        details = self._rules.on_base_weight_changed(
            self._record.details, self._base_weight, self._variants
        )
        self._update(replace(self._record, details=details))

    def set_variants(self, variants: Sequence[SizeVariant]) -> None:
        self._variants = tuple(variants)
        details = self._rules.apply_weight(self._record.details, self._base_weight, self._variants)
        self._update(replace(self._record, details=details))

    # ------------------------------------------------------------------
    # Operator edits
    # ------------------------------------------------------------------

    def set_overview(self, text: str) -> None:
        if is_blank_placeholder(text):
            text = ""
        self._update(replace(self._record, overview=text))

    def set_detail(self, field: str, value: str) -> None:
        """Apply a direct edit to one details field (snake_case name)."""
        details = self._record.details.with_field(field, value)
        if field == "weight":
            self._rules.mark_weight_edited()
            details = self._rules.apply_weight(details, self._base_weight, self._variants)
        elif field == "cake_flavour":
            details = self._rules.apply_flavour(details, self._subcategory_name)
        self._update(replace(self._record, details=details))

    def set_please_note(self, text: str) -> None:
        self._update(replace(self._record, please_note=text))

    def reset(self) -> None:
        """Blank every field, restore the default note and clear the description."""
        self._record = StructuredDescription(
            overview="",
            details=ProductDetails(),
            please_note=DEFAULT_PLEASE_NOTE,
        )
        self._pending_push = False
        self._description = ""
        self.details_changed.emit(self._record.details)
        self.short_description_changed.emit("")
        self.description_changed.emit("")

    def clean(self) -> None:
        """Drop leftover "()" values from the fields and the description."""
        cleaned = clean_fields(self._record)
        if cleaned.details != self._record.details:
            self.details_changed.emit(cleaned.details)
        if cleaned.overview != self._record.overview:
            self.short_description_changed.emit(cleaned.overview)
        self._record = cleaned
        self._pending_push = False
        self._description = clean_canonical_text(self._description)
        self.description_changed.emit(self._description)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _update(self, record: StructuredDescription) -> None:
        previous = self._record
        if record.details.weight != previous.details.weight:
            record = replace(record, details=self._rules.apply_servings(record.details))
        if record == previous:
            return

        self._record = record
        if record.details != previous.details:
            self.details_changed.emit(record.details)
        if record.overview != previous.overview:
            self.short_description_changed.emit(record.overview)
        self._push_description()

    def _push_description(self) -> None:
        if self._guard.is_syncing:
            self._pending_push = True
            return
        text = self._container.generate_description.execute(
            self._record.overview,
            self._record.details,
            self._record.please_note,
        )
        if not text.strip() or text == self._description:
            return

        self._guard.begin()
        self._description = text
        logging.debug("description regenerated chars=%d", len(text))
        self.description_changed.emit(text)
        self._defer(self._finish_sync)

    def _finish_sync(self) -> None:
        self._guard.release()
        if self._pending_push:
            self._pending_push = False
            self._push_description()
