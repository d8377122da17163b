from typing import Any, Optional, Union

from ..service import Transport, get_transport
from .models import UpdateProjectWorkerGroupsReq, to_payload


async def query_worker_groups_by_project_code(
    project_code: int,
    transport: Optional[Transport] = None,
) -> Any:
    return await (transport or get_transport()).request(
        "get",
        f"/projects/{project_code}/worker-group",
    )


async def assign_worker_groups(
    data: Union[UpdateProjectWorkerGroupsReq, dict],
    project_code: int,
    transport: Optional[Transport] = None,
) -> Any:
    """Replace, not merge, the worker groups assigned to the project."""
    return await (transport or get_transport()).request(
        "post",
        f"/projects/{project_code}/worker-group",
        data=to_payload(data),
    )
