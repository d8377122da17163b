"""
Project Resource Client

Async functions for a workflow scheduler's project-scoped REST resources:
project parameters and worker-group assignments.
"""

__version__ = "1.0.0"

from .modules import (
    query_project_parameter_list_paging,
    query_project_parameter_by_code,
    create_project_parameter,
    update_project_parameter,
    delete_project_parameter_by_code,
    delete_project_parameter_by_codes,
    query_worker_groups_by_project_code,
    assign_worker_groups,
)
from .modules.models import (
    ListReq,
    ProjectParameterReq,
    UpdateProjectParameterReq,
    ProjectParameterCodeReq,
    UpdateProjectWorkerGroupsReq,
    ProjectParameter,
    ProjectWorkerGroup,
    PageInfo,
    Result,
)
from .service import Transport, TransportSettings, get_transport, set_transport

__all__ = [
    "query_project_parameter_list_paging",
    "query_project_parameter_by_code",
    "create_project_parameter",
    "update_project_parameter",
    "delete_project_parameter_by_code",
    "delete_project_parameter_by_codes",
    "query_worker_groups_by_project_code",
    "assign_worker_groups",
    "ListReq",
    "ProjectParameterReq",
    "UpdateProjectParameterReq",
    "ProjectParameterCodeReq",
    "UpdateProjectWorkerGroupsReq",
    "ProjectParameter",
    "ProjectWorkerGroup",
    "PageInfo",
    "Result",
    "Transport",
    "TransportSettings",
    "get_transport",
    "set_transport",
]
