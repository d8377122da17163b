from typing import Any, List, Optional, Generic, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


T = TypeVar("T")


class WireModel(BaseModel):
    """Base for shapes that travel with camelCase keys"""
    model_config = ConfigDict(populate_by_name=True)


class ListReq(WireModel):
    """Paging and filter criteria for list endpoints"""
    page_no: int = Field(1, alias="pageNo")
    page_size: int = Field(10, alias="pageSize")
    search_val: Optional[str] = Field(None, alias="searchVal")
    project_parameter_data_type: Optional[str] = Field(None, alias="projectParameterDataType")


class ProjectParameterReq(WireModel):
    """Payload for creating a project parameter"""
    project_parameter_name: str = Field(alias="projectParameterName")
    project_parameter_value: str = Field(alias="projectParameterValue")
    project_parameter_data_type: str = Field("VARCHAR", alias="projectParameterDataType")


class UpdateProjectParameterReq(ProjectParameterReq):
    """Payload for updating a project parameter, addressed by its code"""
    code: int


class ProjectParameterCodeReq(WireModel):
    code: int


class UpdateProjectWorkerGroupsReq(WireModel):
    """Full replacement of a project's worker groups"""
    worker_groups: List[str] = Field(default_factory=list, alias="workerGroups")


class ProjectParameter(WireModel):
    """Project parameter as stored by the backend"""
    id: int
    code: int
    project_code: int = Field(alias="projectCode")
    param_name: str = Field(alias="paramName")
    param_value: str = Field(alias="paramValue")
    param_data_type: str = Field("VARCHAR", alias="paramDataType")
    create_time: datetime = Field(alias="createTime")
    update_time: datetime = Field(alias="updateTime")


class ProjectWorkerGroup(WireModel):
    id: int
    project_code: int = Field(alias="projectCode")
    worker_group: str = Field(alias="workerGroup")
    create_time: datetime = Field(alias="createTime")
    update_time: datetime = Field(alias="updateTime")


class PageInfo(WireModel, Generic[T]):
    """One page of a list query"""
    total_list: List[T] = Field(default_factory=list, alias="totalList")
    total: int = 0
    current_page: int = Field(1, alias="currentPage")
    page_size: int = Field(10, alias="pageSize")
    total_page: int = Field(0, alias="totalPage")


class Result(WireModel):
    """Envelope wrapped around every backend answer"""
    code: int = 0
    msg: str = "success"
    data: Any = None


def to_payload(data: Any) -> Any:
    """
    Turn a request shape into JSON-ready data.

    Models are dumped with their wire aliases, dropping unset optionals.
    Sequences keep their order and length. Anything else is returned as the
    very same object so plain dicts reach the wire untouched.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(data, (list, tuple)) and any(isinstance(item, BaseModel) for item in data):
        return [to_payload(item) for item in data]
    return data


def code_of(data: Any) -> Any:
    """Read ``code`` from a model or a mapping"""
    if isinstance(data, BaseModel):
        return data.code
    return data["code"]
