from typing import Dict, Any, List, Optional, Iterable
from datetime import datetime
from enum import Enum
import logging
import math

from ..modules.models import (
    PageInfo,
    ProjectParameter,
    ProjectParameterReq,
    ProjectWorkerGroup,
    UpdateProjectParameterReq,
)

logger = logging.getLogger(__name__)


class Status(int, Enum):
    """Result codes answered in the envelope"""
    SUCCESS = 0
    REQUEST_PARAMS_NOT_VALID_ERROR = 10001
    PROJECT_PARAMETER_ALREADY_EXISTS = 10217
    PROJECT_PARAMETER_NOT_EXISTS = 10218
    DELETE_PROJECT_PARAMETER_ERROR = 10221
    WORKER_GROUP_NOT_EXIST = 10224


class StoreError(Exception):
    """A request the store refuses; carries the envelope status"""

    def __init__(self, status: Status, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class ProjectResourceStore:
    """In-memory project parameters and worker-group assignments"""

    def __init__(self, known_worker_groups: Optional[Iterable[str]] = None, first_code: int = 1):
        """
        Initialize the store with empty containers.

        ``known_worker_groups`` lists the names that may be assigned to a
        project; it defaults to just ``default``.
        """
        self.parameters: Dict[int, Dict[int, ProjectParameter]] = {}  # projectCode -> code -> parameter
        self.worker_groups: Dict[int, List[ProjectWorkerGroup]] = {}  # projectCode -> assignments
        self.known_worker_groups = set(known_worker_groups or ["default"])
        self._next_code = first_code
        self._next_id = 1

    def _project_parameters(self, project_code: int) -> Dict[int, ProjectParameter]:
        # Reads never create a project entry
        return self.parameters.get(project_code, {})

    def _find_by_name(self, project_code: int, name: str) -> Optional[ProjectParameter]:
        return next(
            (p for p in self._project_parameters(project_code).values() if p.param_name == name),
            None,
        )

    def _generate_code(self) -> int:
        # Codes are never reused, even after deletes
        code = self._next_code
        self._next_code += 1
        return code

    def _generate_id(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def create_parameter(self, project_code: int, request: ProjectParameterReq) -> ProjectParameter:
        """
        Create a parameter in a project.

        Names are unique per project; the code is assigned here.
        """
        if self._find_by_name(project_code, request.project_parameter_name):
            raise StoreError(
                Status.PROJECT_PARAMETER_ALREADY_EXISTS,
                f"project parameter {request.project_parameter_name} already exists",
            )

        now = datetime.now()
        parameter = ProjectParameter(
            id=self._generate_id(),
            code=self._generate_code(),
            project_code=project_code,
            param_name=request.project_parameter_name,
            param_value=request.project_parameter_value,
            param_data_type=request.project_parameter_data_type,
            create_time=now,
            update_time=now,
        )
        self.parameters.setdefault(project_code, {})[parameter.code] = parameter
        logger.info(f"[{project_code}] created project parameter {parameter.code} ({parameter.param_name})")
        return parameter

    def get_parameter(self, project_code: int, code: int) -> ProjectParameter:
        parameter = self._project_parameters(project_code).get(code)
        if not parameter:
            raise StoreError(Status.PROJECT_PARAMETER_NOT_EXISTS, f"project parameter {code} not exists")
        return parameter

    def update_parameter(self, project_code: int, code: int, request: UpdateProjectParameterReq) -> ProjectParameter:
        """
        Overwrite name, value and data type of an existing parameter.

        Renaming onto another parameter's name is refused.
        """
        parameter = self.get_parameter(project_code, code)

        clash = self._find_by_name(project_code, request.project_parameter_name)
        if clash and clash.code != code:
            raise StoreError(
                Status.PROJECT_PARAMETER_ALREADY_EXISTS,
                f"project parameter {request.project_parameter_name} already exists",
            )

        updated = parameter.model_copy(update={
            "param_name": request.project_parameter_name,
            "param_value": request.project_parameter_value,
            "param_data_type": request.project_parameter_data_type,
            "update_time": datetime.now(),
        })
        self.parameters[project_code][code] = updated
        logger.info(f"[{project_code}] updated project parameter {code}")
        return updated

    def delete_parameter(self, project_code: int, code: int) -> None:
        self.get_parameter(project_code, code)
        del self.parameters[project_code][code]
        logger.info(f"[{project_code}] deleted project parameter {code}")

    def batch_delete_parameters(self, project_code: int, codes: List[int]) -> None:
        """
        Delete every known code, then report the ones that were not found.

        A partial failure still removes the codes that exist.
        """
        missing = []
        for code in codes:
            if code in self._project_parameters(project_code):
                self.delete_parameter(project_code, code)
            elif code not in missing:
                missing.append(code)

        if missing:
            raise StoreError(
                Status.DELETE_PROJECT_PARAMETER_ERROR,
                "delete project parameter error: " + ",".join(str(code) for code in missing) + " not exists",
            )

    def query_parameters(
        self,
        project_code: int,
        page_no: int,
        page_size: int,
        search_val: Optional[str] = None,
        data_type: Optional[str] = None,
    ) -> PageInfo:
        """
        Filter, sort newest first, and cut one page out.

        ``search_val`` matches as a substring of the parameter name.
        """
        if page_no < 1 or page_size < 1:
            raise StoreError(Status.REQUEST_PARAMS_NOT_VALID_ERROR, "pageNo and pageSize must be positive")

        matches = [
            p for p in self._project_parameters(project_code).values()
            if (not search_val or search_val in p.param_name)
            and (not data_type or p.param_data_type == data_type)
        ]
        matches.sort(key=lambda p: (p.update_time, p.id), reverse=True)

        start = (page_no - 1) * page_size
        return PageInfo[ProjectParameter](
            total_list=matches[start:start + page_size],
            total=len(matches),
            current_page=page_no,
            page_size=page_size,
            total_page=math.ceil(len(matches) / page_size),
        )

    def assign_worker_groups(self, project_code: int, worker_groups: List[str]) -> List[ProjectWorkerGroup]:
        """
        Replace the project's worker groups with ``worker_groups``.

        Unknown names are refused and nothing changes. An empty list clears
        the assignment.
        """
        unknown = [name for name in worker_groups if name not in self.known_worker_groups]
        if unknown:
            raise StoreError(Status.WORKER_GROUP_NOT_EXIST, f"worker group {','.join(unknown)} not exist")

        now = datetime.now()
        assignments = [
            ProjectWorkerGroup(
                id=self._generate_id(),
                project_code=project_code,
                worker_group=name,
                create_time=now,
                update_time=now,
            )
            for name in dict.fromkeys(worker_groups)  # keep first occurrence order
        ]
        self.worker_groups[project_code] = assignments
        logger.info(f"[{project_code}] assigned worker groups {[a.worker_group for a in assignments]}")
        return assignments

    def get_worker_groups(self, project_code: int) -> List[ProjectWorkerGroup]:
        return list(self.worker_groups.get(project_code, []))

    def get_stats(self) -> Dict[str, Any]:
        """Counts of stored objects, for the health endpoint."""
        return {
            "projects": len(set(self.parameters) | set(self.worker_groups)),
            "parameters": sum(len(params) for params in self.parameters.values()),
            "worker_group_assignments": sum(len(groups) for groups in self.worker_groups.values()),
        }
