# table_endpoints.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response
from pydantic import BaseModel

from jsontables.repositories import AsyncDocumentStore

router = APIRouter(tags=["tables"])
logger = logging.getLogger(__name__)


class NewTableBody(BaseModel):
    name: str
    fields: dict[str, Any] | None = None


class NewFieldBody(BaseModel):
    key: str
    value: Any = None


def get_store(request: Request) -> AsyncDocumentStore:
    return request.app.state.store


# -------------------------------------------------------------------
# Tables
# -------------------------------------------------------------------
@router.get("/tables")
async def list_tables(store: AsyncDocumentStore = Depends(get_store)) -> dict[str, list[str]]:
    return {"tables": await store.table_names()}


@router.post("/tables", status_code=201)
async def create_table(body: NewTableBody, store: AsyncDocumentStore = Depends(get_store)) -> dict[str, str]:
    await store.new_table(body.name, body.fields)
    logger.info("TABLE CREATED: %s", body.name)
    return {"name": body.name}


@router.get("/tables/{name}")
async def read_table(name: str, store: AsyncDocumentStore = Depends(get_store)) -> dict[str, Any]:
    return await store.table_content(name)


@router.delete("/tables/{name}", status_code=204)
async def drop_table(name: str, store: AsyncDocumentStore = Depends(get_store)) -> Response:
    await store.drop_table(name)
    logger.info("TABLE DROPPED: %s", name)
    return Response(status_code=204)


# -------------------------------------------------------------------
# Records
# -------------------------------------------------------------------
@router.post("/tables/{name}/records", status_code=201)
async def append_record(
    name: str,
    record: dict[str, Any] = Body(...),
    store: AsyncDocumentStore = Depends(get_store),
) -> dict[str, str]:
    record_id = await store.append(name, record)
    return {"id": record_id}


@router.get("/tables/{name}/records/{record_id}")
async def read_record(name: str, record_id: str, store: AsyncDocumentStore = Depends(get_store)) -> dict[str, Any]:
    return await store.get_record(name, record_id)


@router.post("/tables/{name}/records/{record_id}/fields", status_code=201)
async def append_field(
    name: str,
    record_id: str,
    body: NewFieldBody,
    store: AsyncDocumentStore = Depends(get_store),
) -> dict[str, Any]:
    await store.append_value(name, record_id, body.key, body.value)
    return await store.get_record(name, record_id)


@router.delete("/tables/{name}/records/{record_id}", status_code=204)
async def delete_record(name: str, record_id: str, store: AsyncDocumentStore = Depends(get_store)) -> Response:
    await store.delete(record_id, name)
    return Response(status_code=204)


@router.get("/document")
async def read_document(store: AsyncDocumentStore = Depends(get_store)) -> dict[str, Any]:
    return await store.snapshot()
