"""EnvelopeBuilder 단위 테스트"""

import logging
import re
from datetime import datetime, timezone

import pytest

from class_lib.goalserve.envelope import (
    GOALSERVE_API_ERROR,
    CallContext,
    EnvelopeBuilder,
    utc_timestamp,
)


@pytest.fixture
def builder():
    return EnvelopeBuilder(logging.getLogger("test"))


@pytest.fixture
def ctx():
    return CallContext(
        sport="nfl",
        data_type="roster",
        endpoint="/api/nfl/teams/1691/roster",
        llm_context="NFL team roster for team 1691",
        params={"teamId": "1691"},
    )


class TestSuccess:

    def test_shape(self, builder, ctx):
        payload = {"team": {"player": [{"name": "A"}]}}
        body = builder.success(ctx, payload)

        assert list(body) == ["success", "data", "llm_context", "metadata"]
        assert body["success"] is True
        assert body["data"] is payload
        assert body["llm_context"] == "NFL team roster for team 1691"

    def test_metadata(self, builder, ctx):
        metadata = builder.success(ctx, {})["metadata"]

        assert list(metadata) == ["sport", "dataType", "endpoint", "fetchedAt", "source", "params"]
        assert metadata["sport"] == "nfl"
        assert metadata["dataType"] == "roster"
        assert metadata["source"] == "goalserve"
        assert metadata["params"] == {"teamId": "1691"}

    def test_params_default_empty(self, builder):
        ctx = CallContext(sport="nba", data_type="scores", endpoint="/api/nba/scores", llm_context="x")
        assert builder.success(ctx, None)["metadata"]["params"] == {}


class TestFailure:

    def test_shape(self, builder, ctx):
        body = builder.failure(ctx, GOALSERVE_API_ERROR, "boom")

        assert list(body) == ["success", "error", "metadata"]
        assert body["success"] is False
        assert body["error"] == {"code": "GOALSERVE_API_ERROR", "message": "boom"}
        assert body["metadata"]["params"] == {"teamId": "1691"}


class TestTimestamp:

    def test_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())

    def test_fixed_time(self):
        now = datetime(2025, 12, 2, 18, 30, 5, 123456, tzinfo=timezone.utc)
        assert utc_timestamp(now) == "2025-12-02T18:30:05.123Z"
