"""
Generic record API router for the resort collections.
"""
from typing import Any

from fastapi import APIRouter, Body, Depends

from phongnews.dependencies.services import get_record_service
from phongnews.schemas.common import OkResponse
from phongnews.services.record_service import RecordService

router = APIRouter(prefix="/api/data", tags=["Data"])


@router.get("/{table}", summary="List all records of a collection")
async def list_records(
    table: str,
    records: RecordService = Depends(get_record_service),
):
    """The stored list is returned as is, without a response model."""
    return await records.list_records(table)


@router.post("/{table}", response_model=OkResponse, summary="Create a record")
async def create_record(
    table: str,
    body: dict[str, Any] = Body(...),
    records: RecordService = Depends(get_record_service),
):
    """Any JSON object is accepted; the server assigns ``id``."""
    await records.create(table, body)
    return OkResponse()


@router.put("/{table}/{record_id}", response_model=OkResponse, summary="Merge fields into a record")
async def update_record(
    table: str,
    record_id: str,
    body: dict[str, Any] = Body(...),
    records: RecordService = Depends(get_record_service),
):
    await records.update(table, record_id, body)
    return OkResponse()


@router.delete("/{table}/{record_id}", response_model=OkResponse, summary="Delete a record")
async def delete_record(
    table: str,
    record_id: str,
    records: RecordService = Depends(get_record_service),
):
    """Deleting an unknown id succeeds."""
    await records.delete(table, record_id)
    return OkResponse()
