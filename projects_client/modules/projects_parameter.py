from typing import Any, Optional, Sequence, Union

from ..service import Transport, get_transport
from .models import (
    ListReq,
    ProjectParameterCodeReq,
    ProjectParameterReq,
    UpdateProjectParameterReq,
    code_of,
    to_payload,
)


async def query_project_parameter_list_paging(
    params: Union[ListReq, dict],
    project_code: int,
    transport: Optional[Transport] = None,
) -> Any:
    return await (transport or get_transport()).request(
        "get",
        f"/projects/{project_code}/project-parameter",
        params=to_payload(params),
    )


async def query_project_parameter_by_code(
    project_code: int,
    code: int,
    transport: Optional[Transport] = None,
) -> Any:
    return await (transport or get_transport()).request(
        "get",
        f"/projects/{project_code}/project-parameter/{code}",
    )


async def create_project_parameter(
    data: Union[ProjectParameterReq, dict],
    project_code: int,
    transport: Optional[Transport] = None,
) -> Any:
    return await (transport or get_transport()).request(
        "post",
        f"/projects/{project_code}/project-parameter",
        data=to_payload(data),
    )


async def update_project_parameter(
    data: Union[UpdateProjectParameterReq, dict],
    project_code: int,
    transport: Optional[Transport] = None,
) -> Any:
    """The parameter to update is addressed by ``data.code``."""
    return await (transport or get_transport()).request(
        "put",
        f"/projects/{project_code}/project-parameter/{code_of(data)}",
        data=to_payload(data),
    )


async def delete_project_parameter_by_code(
    data: Union[ProjectParameterCodeReq, dict],
    project_code: int,
    transport: Optional[Transport] = None,
) -> Any:
    return await (transport or get_transport()).request(
        "post",
        f"/projects/{project_code}/project-parameter/delete",
        data=to_payload(data),
    )


async def delete_project_parameter_by_codes(
    data: Sequence[Union[ProjectParameterCodeReq, dict]],
    project_code: int,
    transport: Optional[Transport] = None,
) -> Any:
    """Send the code list as the whole body, in the given order."""
    return await (transport or get_transport()).request(
        "post",
        f"/projects/{project_code}/project-parameter/batch-delete",
        data=to_payload(data),
    )
