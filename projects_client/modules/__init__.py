"""
Project resource endpoints

One async function per REST endpoint under ``/projects/{projectCode}``.
"""

from .projects_parameter import (
    query_project_parameter_list_paging,
    query_project_parameter_by_code,
    create_project_parameter,
    update_project_parameter,
    delete_project_parameter_by_code,
    delete_project_parameter_by_codes,
)
from .projects_worker_group import (
    query_worker_groups_by_project_code,
    assign_worker_groups,
)

__all__ = [
    "query_project_parameter_list_paging",
    "query_project_parameter_by_code",
    "create_project_parameter",
    "update_project_parameter",
    "delete_project_parameter_by_code",
    "delete_project_parameter_by_codes",
    "query_worker_groups_by_project_code",
    "assign_worker_groups",
]
