from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.encoders import jsonable_encoder
from typing import Any, Dict, List, Optional

from ..modules.models import (
    ProjectParameterCodeReq,
    ProjectParameterReq,
    Result,
    UpdateProjectParameterReq,
    UpdateProjectWorkerGroupsReq,
)
from .store import ProjectResourceStore, Status, StoreError

router = APIRouter()


def get_store(request: Request) -> ProjectResourceStore:
    """The store lives on the app so each app instance has its own data."""
    return request.app.state.store


def success(data: Any = None) -> Dict[str, Any]:
    return Result(code=Status.SUCCESS.value, msg="success", data=jsonable_encoder(data, by_alias=True)).model_dump()


def failure(error: StoreError) -> Dict[str, Any]:
    # Business errors still answer 200; the envelope code carries the failure
    return Result(code=error.status.value, msg=error.message).model_dump()


@router.get("/projects/{project_code}/project-parameter")
async def query_project_parameter_list_paging(
    project_code: int,
    page_no: int = Query(1, alias="pageNo"),
    page_size: int = Query(10, alias="pageSize"),
    search_val: Optional[str] = Query(None, alias="searchVal"),
    data_type: Optional[str] = Query(None, alias="projectParameterDataType"),
    store: ProjectResourceStore = Depends(get_store),
):
    """
    List a project's parameters one page at a time.

    Filters by name substring and data type, newest first.
    """
    try:
        page = store.query_parameters(project_code, page_no, page_size, search_val, data_type)
    except StoreError as e:
        return failure(e)
    return success(page)


@router.get("/projects/{project_code}/project-parameter/{code}")
async def query_project_parameter_by_code(
    project_code: int,
    code: int,
    store: ProjectResourceStore = Depends(get_store),
):
    try:
        return success(store.get_parameter(project_code, code))
    except StoreError as e:
        return failure(e)


@router.post("/projects/{project_code}/project-parameter")
async def create_project_parameter(
    project_code: int,
    request: ProjectParameterReq,
    store: ProjectResourceStore = Depends(get_store),
):
    """Create a parameter; the answer carries the code the store assigned."""
    try:
        return success(store.create_parameter(project_code, request))
    except StoreError as e:
        return failure(e)


@router.put("/projects/{project_code}/project-parameter/{code}")
async def update_project_parameter(
    project_code: int,
    code: int,
    request: UpdateProjectParameterReq,
    store: ProjectResourceStore = Depends(get_store),
):
    """
    Update the parameter named by the path code.

    The path wins if the body carries a different code.
    """
    try:
        return success(store.update_parameter(project_code, code, request))
    except StoreError as e:
        return failure(e)


@router.post("/projects/{project_code}/project-parameter/delete")
async def delete_project_parameter_by_code(
    project_code: int,
    request: ProjectParameterCodeReq,
    store: ProjectResourceStore = Depends(get_store),
):
    try:
        store.delete_parameter(project_code, request.code)
    except StoreError as e:
        return failure(e)
    return success()


@router.post("/projects/{project_code}/project-parameter/batch-delete")
async def delete_project_parameter_by_codes(
    project_code: int,
    request: List[ProjectParameterCodeReq] = Body(...),
    store: ProjectResourceStore = Depends(get_store),
):
    try:
        store.batch_delete_parameters(project_code, [item.code for item in request])
    except StoreError as e:
        return failure(e)
    return success()


@router.get("/projects/{project_code}/worker-group")
async def query_worker_groups_by_project_code(
    project_code: int,
    store: ProjectResourceStore = Depends(get_store),
):
    return success(store.get_worker_groups(project_code))


@router.post("/projects/{project_code}/worker-group")
async def assign_worker_groups(
    project_code: int,
    request: UpdateProjectWorkerGroupsReq,
    store: ProjectResourceStore = Depends(get_store),
):
    """Replace the project's worker-group assignment."""
    try:
        store.assign_worker_groups(project_code, request.worker_groups)
    except StoreError as e:
        return failure(e)
    return success()
