"""Tests for the worker-group endpoint functions."""

import asyncio

from projects_client.modules import assign_worker_groups, query_worker_groups_by_project_code
from projects_client.modules.models import UpdateProjectWorkerGroupsReq


class TestQueryWorkerGroups:

    def test_get_has_no_body_or_query(self, backend, recording_transport):
        backend.answer([{"id": 1, "projectCode": 7, "workerGroup": "default"}])

        result = asyncio.run(query_worker_groups_by_project_code(7, transport=recording_transport))

        assert backend.last.method == "GET"
        assert backend.last.path == "/dolphinscheduler/projects/7/worker-group"
        assert backend.last.raw_query == b""
        assert backend.last.content == b""
        assert result == [{"id": 1, "projectCode": 7, "workerGroup": "default"}]


class TestAssignWorkerGroups:

    def test_posts_payload_once(self, backend, recording_transport):
        asyncio.run(assign_worker_groups({"workerGroups": ["default"]}, 7, transport=recording_transport))

        assert len(backend.requests) == 1
        assert backend.last.method == "POST"
        assert backend.last.path == "/dolphinscheduler/projects/7/worker-group"
        assert backend.last.body == {"workerGroups": ["default"]}
        assert backend.last.raw_query == b""

    def test_model_payload(self, backend, recording_transport):
        request = UpdateProjectWorkerGroupsReq(worker_groups=["default", "gpu"])

        asyncio.run(assign_worker_groups(request, 7, transport=recording_transport))

        assert backend.last.body == {"workerGroups": ["default", "gpu"]}
