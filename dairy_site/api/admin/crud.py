"""
Management pages built from the entity registry.

``build_collection_router`` gives a list page with an add/edit dialog and
delete buttons; ``build_singleton_router`` gives an always-open edit form for
one-row tables (banner, site settings). Both post back and redirect
(Post/Redirect/Get) so every mutation ends with a fresh fetch.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse
from starlette.datastructures import FormData, UploadFile

from dairy_site.api.deps import Collections, Notify, Storage
from dairy_site.entities import EntityConfig
from dairy_site.services.admin_forms import (
    Add,
    AdminFormController,
    Edit,
    FormState,
    ImageUpload,
    parse_form,
)
from dairy_site.services.collections import CollectionError, NotFoundError
from dairy_site.web.templating import render


def upload_field(entity: EntityConfig) -> Optional[str]:
    if not entity.image_field:
        return None
    return f"{entity.image_field}_file"


async def read_upload(entity: EntityConfig, form: FormData) -> Optional[ImageUpload]:
    """The file chosen in the image input, if any. An empty file input is no upload."""
    name = upload_field(entity)
    if not name:
        return None
    file = form.get(name)
    if not isinstance(file, UploadFile) or not file.filename:
        return None
    content = await file.read()
    if not content:
        return None
    return ImageUpload(content=content, filename=file.filename, content_type=file.content_type)


def render_admin(request: Request, template: str, context: Dict[str, Any], status_code: int = 200):
    context = {"admin": getattr(request.state, "admin", None), **context}
    return render(request, template, context, status_code=status_code)


def render_collection(
    request: Request,
    entity: EntityConfig,
    items: List[Dict[str, Any]],
    form: FormState,
    status_code: int = 200,
):
    context = {
        "entity": entity,
        "items": items,
        "form": form,
        "upload_field": upload_field(entity),
    }
    return render_admin(request, "admin/collection.html", context, status_code=status_code)


def build_collection_router(entity: EntityConfig) -> APIRouter:
    router = APIRouter()

    def redirect_to_list() -> RedirectResponse:
        return RedirectResponse(entity.admin_path, status_code=status.HTTP_303_SEE_OTHER)

    async def submit(request: Request, controller: AdminFormController, mode):
        form = await request.form()
        values = parse_form(entity, form)
        upload = await read_upload(entity, form)

        outcome = await controller.submit(mode, values, upload)
        if outcome.ok:
            return redirect_to_list()

        items = await controller.load()
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY if outcome.form.errors else status.HTTP_200_OK
        return render_collection(request, entity, items, outcome.form, status_code=status_code)

    @router.get("")
    async def list_page(
        request: Request,
        client: Collections,
        storage: Storage,
        notifier: Notify,
        dialog: Optional[str] = None,
        edit: Optional[str] = None,
    ):
        controller = AdminFormController(entity, client, storage, notifier)
        items = await controller.load()

        form = controller.closed()
        if dialog == "add":
            form = controller.open_add(items)
        elif edit:
            row = next((item for item in items if str(item.get("id")) == edit), None)
            if row is None:
                notifier.notify("error", f"{entity.label} not found")
            else:
                form = controller.open_edit(row)
        return render_collection(request, entity, items, form)

    @router.post("")
    async def create_item(request: Request, client: Collections, storage: Storage, notifier: Notify):
        controller = AdminFormController(entity, client, storage, notifier)
        return await submit(request, controller, Add())

    @router.post("/{item_id}")
    async def update_item(
        item_id: str,
        request: Request,
        client: Collections,
        storage: Storage,
        notifier: Notify,
    ):
        controller = AdminFormController(entity, client, storage, notifier)
        try:
            row = await client.get_one(entity.table, item_id)
        except CollectionError as e:
            message = f"{entity.label} not found" if isinstance(e, NotFoundError) else f"Failed to load {entity.label.lower()}"
            notifier.notify("error", message, e.message)
            return redirect_to_list()
        return await submit(request, controller, Edit(item=row))

    @router.post("/{item_id}/delete")
    async def delete_item(
        item_id: str,
        client: Collections,
        storage: Storage,
        notifier: Notify,
    ):
        controller = AdminFormController(entity, client, storage, notifier)
        await controller.delete(item_id)
        return redirect_to_list()

    if entity.active_field:
        @router.post("/{item_id}/toggle")
        async def toggle_item(
            item_id: str,
            client: Collections,
            storage: Storage,
            notifier: Notify,
        ):
            controller = AdminFormController(entity, client, storage, notifier)
            await controller.toggle_active(item_id)
            return redirect_to_list()

    return router


def build_singleton_router(entity: EntityConfig) -> APIRouter:
    router = APIRouter()

    def render_form(request: Request, form: FormState, status_code: int = 200):
        context = {"entity": entity, "form": form, "upload_field": upload_field(entity)}
        return render_admin(request, "admin/singleton.html", context, status_code=status_code)

    @router.get("")
    async def edit_page(request: Request, client: Collections, storage: Storage, notifier: Notify):
        controller = AdminFormController(entity, client, storage, notifier)
        row = await controller.load_single()
        return render_form(request, controller.open_singleton(row))

    @router.post("")
    async def save(request: Request, client: Collections, storage: Storage, notifier: Notify):
        controller = AdminFormController(entity, client, storage, notifier)
        try:
            row = await client.get_single(entity.table)
        except CollectionError as e:
            notifier.notify("error", f"Failed to save {entity.label.lower()}", e.message)
            return RedirectResponse(entity.admin_path, status_code=status.HTTP_303_SEE_OTHER)
        mode = Edit(item=row) if row else Add()

        form = await request.form()
        outcome = await controller.submit(mode, parse_form(entity, form), await read_upload(entity, form))
        if outcome.ok:
            return RedirectResponse(entity.admin_path, status_code=status.HTTP_303_SEE_OTHER)

        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY if outcome.form.errors else status.HTTP_200_OK
        return render_form(request, outcome.form, status_code=status_code)

    return router
