"""The quote a provider edits and sends to a client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from quotekit.models.line_items import LineItem, parse_line_item

if TYPE_CHECKING:
    from quotekit.data.templates import QuoteTemplate


class Quote(BaseModel):
    """A collection of line items plus the text shown alongside them.

    ``line_items`` is ``None`` for a quote whose items were never loaded;
    calculations treat that the same as an empty list.

    Editing methods never mutate the quote. Each returns a new ``Quote``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    line_items: list[LineItem] | None = None
    title: str = ""
    terms: str = ""
    notes: str = ""

    @field_validator("title", "terms", "notes", mode="before")
    @classmethod
    def _text_or_blank(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @property
    def items(self) -> list[LineItem]:
        return list(self.line_items or [])

    def add_line_item(self, item: Any) -> Quote:
        """Append an item, assigning the next free integer id if it has none."""
        parsed = parse_line_item(item)
        if parsed.id is None:
            parsed = parsed.model_copy(update={"id": self._next_id()})
        return self.model_copy(update={"line_items": [*self.items, parsed]})

    def update_line_item(self, item_id: int | str, item: Any) -> Quote:
        """Replace the item with ``item_id``. Unknown ids leave the quote as is."""
        parsed = parse_line_item(item)
        if parsed.id != item_id:
            parsed = parsed.model_copy(update={"id": item_id})
        updated = [parsed if existing.id == item_id else existing for existing in self.items]
        return self.model_copy(update={"line_items": updated})

    def remove_line_item(self, item_id: int | str) -> Quote:
        remaining = [existing for existing in self.items if existing.id != item_id]
        return self.model_copy(update={"line_items": remaining})

    def apply_template(self, template: QuoteTemplate | None) -> Quote:
        """Replace items and terms with a template's. ``None`` means a blank start."""
        if template is None:
            return self
        items = [
            item.model_copy(update={"id": index})
            for index, item in enumerate(template.default_line_items, start=1)
        ]
        return self.model_copy(update={"line_items": items, "terms": template.terms})

    def _next_id(self) -> int:
        numeric_ids = [
            item.id for item in self.items
            if isinstance(item.id, int) and not isinstance(item.id, bool)
        ]
        return max(numeric_ids, default=0) + 1
