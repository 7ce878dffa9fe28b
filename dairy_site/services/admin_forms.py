"""
Admin form controller.

Drives the add/edit dialog of every management page:

    Closed -> Add       -> (submit) -> Closed
    Closed -> Edit(row) -> (submit) -> Closed
    Add -> (saved, activation failed) -> Edit(saved row)

The dialog state lives in the query string (``?dialog=add``,
``?edit=<id>``); a failed submit re-renders the dialog with the submitted
values and the field errors. Form values are always a flat mapping of input
name to string (checkboxes to bool), the same shape the browser posts back.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from dairy_site.entities import FEATURE_ITEM_KEYS, EntityConfig
from dairy_site.schemas import join_lines, validate
from dairy_site.schemas.content import MAX_FEATURE_ITEMS
from dairy_site.services.active_row import set_active, set_inactive
from dairy_site.services.collections import CollectionClient, CollectionError
from dairy_site.services.notifications import Notifier
from dairy_site.services.storage import StorageClient, StorageError, is_map_embed, looks_like_image_url

logger = logging.getLogger(__name__)

IMAGE_WARNING = "This URL does not look like an image file. It will be saved anyway."
UPLOAD_PLACEHOLDER = "https://storage.invalid/pending-upload"


# ============================================================================
# Form mode
# ============================================================================

@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class Add:
    pass


@dataclass(frozen=True)
class Edit:
    item: Dict[str, Any]

    @property
    def item_id(self) -> str:
        return str(self.item["id"])


FormMode = Union[Closed, Add, Edit]


@dataclass
class FormState:
    mode: FormMode
    values: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    image_warning: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return not isinstance(self.mode, Closed)

    @property
    def is_edit(self) -> bool:
        return isinstance(self.mode, Edit)


@dataclass
class ImageUpload:
    content: bytes
    filename: str
    content_type: Optional[str] = None


@dataclass
class SubmitOutcome:
    ok: bool
    form: FormState
    row: Optional[Dict[str, Any]] = None


# ============================================================================
# Form value encoding
# ============================================================================

def feature_item_key(index: int, key: str) -> str:
    return f"feature_items.{index}.{key}"


def flatten_feature_items(items: Optional[List[Mapping[str, Any]]]) -> Dict[str, str]:
    items = list(items or [])
    values: Dict[str, str] = {}
    for index in range(MAX_FEATURE_ITEMS):
        item = items[index] if index < len(items) else {}
        for key in FEATURE_ITEM_KEYS:
            value = item.get(key)
            values[feature_item_key(index, key)] = "" if value is None else str(value)
    return values


def unflatten_feature_items(form_values: Mapping[str, Any]) -> List[Dict[str, str]]:
    """Rebuild the item list from ``feature_items.<i>.<key>`` inputs; blank slots are dropped."""
    items = []
    for index in range(MAX_FEATURE_ITEMS):
        item = {key: str(form_values.get(feature_item_key(index, key)) or "").strip() for key in FEATURE_ITEM_KEYS}
        if any(item.values()):
            items.append(item)
    return items


def next_order_index(items: List[Mapping[str, Any]]) -> int:
    indexes = [item["order_index"] for item in items if item.get("order_index") is not None]
    return max(indexes) + 1 if indexes else 0


def to_form_values(entity: EntityConfig, row: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Row -> dialog inputs. None becomes "", arrays become newline-joined text."""
    row = row or {}
    bool_fields = set(entity.fields_of_kind("bool"))
    values: Dict[str, Any] = {}
    for name in entity.field_names():
        value = row.get(name)
        if name in bool_fields:
            values[name] = bool(value)
        elif name in entity.lines_fields:
            values[name] = join_lines(value)
        elif value is None:
            values[name] = ""
        else:
            values[name] = str(value)
    if entity.has_feature_items:
        values.update(flatten_feature_items(row.get("feature_items")))
    return values


def parse_form(entity: EntityConfig, form: Mapping[str, Any]) -> Dict[str, Any]:
    """Posted form data -> form values. Unchecked checkboxes are not posted at all."""
    bool_fields = set(entity.fields_of_kind("bool"))
    values: Dict[str, Any] = {}
    for name in entity.field_names():
        if name in bool_fields:
            values[name] = str(form.get(name, "")).lower() in ("on", "true", "1")
        else:
            value = form.get(name)
            values[name] = value if isinstance(value, str) else ""
    if entity.has_feature_items:
        for index in range(MAX_FEATURE_ITEMS):
            for key in FEATURE_ITEM_KEYS:
                name = feature_item_key(index, key)
                value = form.get(name)
                values[name] = value if isinstance(value, str) else ""
    return values


def image_warning(entity: EntityConfig, url: Optional[str]) -> Optional[str]:
    if not url or looks_like_image_url(url):
        return None
    if entity.allow_map_embed and is_map_embed(url):
        return None
    return IMAGE_WARNING


# ============================================================================
# Controller
# ============================================================================

class AdminFormController:
    """Add/edit/delete orchestration for one entity type."""

    def __init__(
        self,
        entity: EntityConfig,
        client: CollectionClient,
        storage: StorageClient,
        notifier: Notifier,
    ):
        self.entity = entity
        self.client = client
        self.storage = storage
        self.notifier = notifier
        self.submitting = False

    async def load(self) -> List[Dict[str, Any]]:
        """Re-fetch the whole collection. A failed fetch shows a toast and yields []."""
        try:
            return await self.client.list(
                self.entity.table,
                order_by=self.entity.order_by,
                ascending=self.entity.ascending,
            )
        except CollectionError as e:
            self.notifier.notify("error", f"Failed to load {self.entity.label_plural.lower()}", e.message)
            return []

    async def load_single(self) -> Optional[Dict[str, Any]]:
        """The row of a singleton table, None when not configured yet."""
        try:
            return await self.client.get_single(self.entity.table)
        except CollectionError as e:
            self.notifier.notify("error", f"Failed to load {self.entity.label.lower()}", e.message)
            return None

    def closed(self) -> FormState:
        return FormState(mode=Closed())

    def open_add(self, items: Optional[List[Mapping[str, Any]]] = None) -> FormState:
        values = to_form_values(self.entity, None)
        if self.entity.ordered:
            values["order_index"] = str(next_order_index(items or []))
        return FormState(mode=Add(), values=values)

    def open_edit(self, row: Dict[str, Any]) -> FormState:
        values = to_form_values(self.entity, row)
        warning = None
        if self.entity.image_field:
            warning = image_warning(self.entity, values.get(self.entity.image_field))
        return FormState(mode=Edit(item=row), values=values, image_warning=warning)

    def open_singleton(self, row: Optional[Dict[str, Any]]) -> FormState:
        """Singletons are edited in place: Edit when the row exists, Add otherwise."""
        if row:
            return self.open_edit(row)
        return self.open_add()

    def _prepare(self, form_values: Mapping[str, Any]) -> Dict[str, Any]:
        values = dict(form_values)
        if self.entity.has_feature_items:
            for key in list(values):
                if key.startswith("feature_items."):
                    del values[key]
            values["feature_items"] = unflatten_feature_items(form_values)
        return values

    async def _default_order_index(self, mode: FormMode) -> int:
        if isinstance(mode, Edit) and mode.item.get("order_index") is not None:
            return mode.item["order_index"]
        items = await self.client.list(self.entity.table, columns="id,order_index")
        return next_order_index(items)

    async def submit(
        self,
        mode: FormMode,
        form_values: Dict[str, Any],
        upload: Optional[ImageUpload] = None,
    ) -> SubmitOutcome:
        """
        Validate, resolve the image, then insert or update.

        Validation errors return the dialog state without any network call.
        Backend failures notify and return the dialog state with the submitted
        values so nothing has to be re-entered.
        """
        entity = self.entity
        warning = None
        if entity.image_field and not upload:
            warning = image_warning(entity, form_values.get(entity.image_field))

        def stay_open(errors: Optional[Dict[str, str]] = None) -> SubmitOutcome:
            state = FormState(mode=mode, values=form_values, errors=errors or {}, image_warning=warning)
            return SubmitOutcome(ok=False, form=state)

        if self.submitting:
            return stay_open({"__all__": "A submission is already in progress."})

        prepared = self._prepare(form_values)
        if upload and entity.image_field:
            # Stands in for the uploaded file's URL until the upload succeeds
            prepared[entity.image_field] = UPLOAD_PLACEHOLDER
        result = validate(entity.schema, prepared)
        if not result.valid:
            return stay_open(result.errors)

        row = dict(result.value)
        activate = False
        if entity.active_field:
            activate = bool(row.pop(entity.active_field, False))

        self.submitting = True
        try:
            try:
                if upload and entity.image_field:
                    row[entity.image_field] = await self.storage.upload_image(
                        upload.content,
                        upload.filename,
                        folder=entity.storage_folder or entity.key,
                        mime_type=upload.content_type,
                        max_width=entity.max_width,
                    )

                if entity.ordered and row.get("order_index") is None:
                    row["order_index"] = await self._default_order_index(mode)

                if isinstance(mode, Edit):
                    saved = await self.client.update(entity.table, mode.item_id, row)
                else:
                    saved = await self.client.insert(entity.table, row)
            except (CollectionError, StorageError) as e:
                action = "update" if isinstance(mode, Edit) else "create"
                logger.warning(f"Failed to {action} {entity.table} row: {e}")
                self.notifier.notify("error", f"Failed to {action} {entity.label.lower()}", str(e))
                return stay_open()

            verb = "updated" if isinstance(mode, Edit) else "created"
            self.notifier.notify("success", f"{entity.label} {verb} successfully")

            if entity.active_field:
                try:
                    saved = await self._apply_active(mode, saved, activate)
                except CollectionError as e:
                    # The row is stored: a retry from this dialog updates it instead of inserting again
                    action = "activate" if activate else "deactivate"
                    logger.warning(f"Failed to {action} {entity.table}/{saved.get('id')}: {e}")
                    self.notifier.notify("error", f"Failed to {action} {entity.label.lower()}", e.message)
                    values = {**to_form_values(entity, saved), entity.active_field: activate}
                    state = FormState(mode=Edit(item=saved), values=values, image_warning=warning)
                    return SubmitOutcome(ok=False, form=state, row=saved)
        finally:
            self.submitting = False

        if warning:
            self.notifier.notify("warning", warning)
        return SubmitOutcome(ok=True, form=self.closed(), row=saved)

    async def _apply_active(self, mode: FormMode, saved: Dict[str, Any], activate: bool) -> Dict[str, Any]:
        field_name = self.entity.active_field
        row_id = str(saved["id"])
        if activate:
            await set_active(self.client, self.entity.table, row_id)
            saved = {**saved, field_name: True}
        elif isinstance(mode, Edit) and mode.item.get(field_name):
            await set_inactive(self.client, self.entity.table, row_id)
            saved = {**saved, field_name: False}
        return saved

    async def delete(self, row_id: str) -> bool:
        """Remove one row. The confirmation prompt happens in the browser before the POST."""
        try:
            await self.client.remove(self.entity.table, row_id)
        except CollectionError as e:
            logger.warning(f"Failed to delete {self.entity.table}/{row_id}: {e}")
            self.notifier.notify("error", f"Failed to delete {self.entity.label.lower()}", e.message)
            return False
        self.notifier.notify("success", f"{self.entity.label} deleted successfully")
        return True

    async def toggle_active(self, row_id: str) -> bool:
        """Flip the active flag of one row; activating deactivates every other row."""
        field_name = self.entity.active_field
        try:
            row = await self.client.get_one(self.entity.table, row_id)
            if row.get(field_name):
                await set_inactive(self.client, self.entity.table, row_id)
                message = f"{self.entity.label} deactivated"
            else:
                await set_active(self.client, self.entity.table, row_id)
                message = f"{self.entity.label} activated"
        except CollectionError as e:
            self.notifier.notify("error", f"Failed to update {self.entity.label.lower()}", e.message)
            return False
        self.notifier.notify("success", message)
        return True
