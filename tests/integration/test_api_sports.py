"""종목별 피드 엔드포인트 통합 테스트 (업스트림: httpx.MockTransport)"""

import httpx
import pytest

from class_lib.goalserve.feeds import FEEDS

TEST_API_KEY = "test-secret-key"

SAMPLE_VALUES = {
    "date": "02.12.2025",
    "teamId": "1691",
    "playerId": "3139477",
    "fighterId": "77",
    "teamId1": "101",
    "teamId2": "202",
}


def _cases(implemented):
    cases = []
    for feed in FEEDS.values():
        for spec in feed.endpoints:
            if spec.implemented is not implemented:
                continue
            values = {name: SAMPLE_VALUES[name] for name in spec.path_params}
            path = f"/api/{feed.sport_id}{spec.route.format(**values)}"
            cases.append(pytest.param(feed, spec, values, path, id=f"{feed.sport_id}:{spec.operation}"))
    return cases


IMPLEMENTED = _cases(True)
NOT_IMPLEMENTED = _cases(False)


class TestScenarios:
    """대표 시나리오"""

    def test_nfl_team_roster(self, client, upstream):
        payload = {"team": {"id": "1691", "player": [{"name": "A"}]}}
        upstream.respond_with(lambda request: httpx.Response(200, json=payload))

        response = client.get("/api/nfl/teams/1691/roster")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == payload
        assert body["llm_context"] == "NFL team roster for team 1691"

        metadata = body["metadata"]
        assert metadata["sport"] == "nfl"
        assert metadata["dataType"] == "roster"
        assert metadata["endpoint"] == "/api/nfl/teams/1691/roster"
        assert metadata["source"] == "goalserve"
        assert metadata["params"] == {"teamId": "1691"}
        assert metadata["fetchedAt"].endswith("Z")

        sent = upstream.last
        assert sent.url.path == f"/getfeed/{TEST_API_KEY}/football/1691_rosters"
        assert list(sent.url.params.multi_items()) == [("json", "1")]

    def test_mlb_h2h(self, client, upstream):
        response = client.get("/api/mlb/h2h/101/202")

        assert response.status_code == 200
        body = response.json()
        assert body["llm_context"] == "MLB H2H comparison: team 101 vs team 202"
        assert body["metadata"]["dataType"] == "h2h"
        assert body["metadata"]["params"] == {"teamId1": "101", "teamId2": "202"}

        sent = upstream.last
        assert sent.url.path == f"/getfeed/{TEST_API_KEY}/baseball/usa"
        assert dict(sent.url.params) == {"json": "1", "h2h": "101,202"}

    def test_nba_schedule_with_odds(self, client, upstream):
        response = client.get("/api/nba/schedule?showOdds=1&date1=01.01.2025&date2=07.01.2025")

        assert response.status_code == 200
        assert response.json()["metadata"]["params"] == {
            "showOdds": "1", "date1": "01.01.2025", "date2": "07.01.2025",
        }

        sent = upstream.last
        assert sent.url.path == f"/getfeed/{TEST_API_KEY}/bsktbl/nba-shedule"
        assert list(sent.url.params.multi_items()) == [
            ("json", "1"), ("showodds", "1"), ("date1", "01.01.2025"), ("date2", "07.01.2025"),
        ]


class TestAllImplementedEndpoints:
    """구현된 모든 (종목, 오퍼레이션)"""

    @pytest.mark.parametrize("feed, spec, values, path", IMPLEMENTED)
    def test_success_envelope(self, client, upstream, feed, spec, values, path):
        response = client.get(path)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == {"ok": True}
        assert body["llm_context"] == feed.render_context(spec, values)
        assert body["metadata"]["sport"] == feed.sport_id
        assert body["metadata"]["dataType"] == spec.data_type
        assert body["metadata"]["endpoint"] == path
        assert body["metadata"]["params"] == values

        assert len(upstream.requests) == 1
        sent = upstream.last
        assert sent.method == "GET"
        assert sent.url.path.startswith(f"/getfeed/{TEST_API_KEY}/{feed.category}/")
        assert sent.url.params["json"] == "1"

    @pytest.mark.parametrize("feed, spec, values, path", IMPLEMENTED)
    def test_upstream_failure(self, client, upstream, feed, spec, values, path):
        """업스트림 상태와 무관하게 500 GOALSERVE_API_ERROR"""
        upstream.respond_with(lambda request: httpx.Response(404))

        response = client.get(path)

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "GOALSERVE_API_ERROR"
        assert body["metadata"]["params"] == values
        assert TEST_API_KEY not in response.text


class TestNotImplemented:
    """업스트림 매핑 없는 오퍼레이션 → 501"""

    @pytest.mark.parametrize("feed, spec, values, path", NOT_IMPLEMENTED)
    def test_not_implemented(self, client, upstream, feed, spec, values, path):
        response = client.get(path)

        assert response.status_code == 501
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_IMPLEMENTED"
        assert body["metadata"]["sport"] == feed.sport_id
        assert upstream.requests == []


class TestInvalidArguments:
    """잘못된 경로 파라미터 → 400 (업스트림 호출 없음)"""

    def test_malformed_date(self, client, upstream):
        response = client.get("/api/nfl/scores/2025-12-02")

        assert response.status_code == 400
        body = response.json()
        assert body["error"]["code"] == "INVALID_ARGUMENT"
        assert body["metadata"]["params"] == {"date": "2025-12-02"}
        assert upstream.requests == []

    def test_blank_identifier(self, client, upstream):
        response = client.get("/api/nfl/teams/%20/roster")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ARGUMENT"
        assert upstream.requests == []


class TestUpstreamErrors:
    """업스트림 실패 유형별"""

    def test_timeout(self, client, upstream):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        upstream.respond_with(handler)
        response = client.get("/api/nba/standings")

        assert response.status_code == 500
        assert "timed out" in response.json()["error"]["message"]

    def test_network_error_does_not_leak_key(self, client, upstream):
        def handler(request):
            raise httpx.ConnectError(f"cannot reach {request.url}", request=request)

        upstream.respond_with(handler)
        response = client.get("/api/nba/standings")

        assert response.status_code == 500
        assert TEST_API_KEY not in response.text
        assert "***" in response.json()["error"]["message"]

    def test_non_json_payload(self, client, upstream):
        upstream.respond_with(lambda request: httpx.Response(200, text="<scores/>"))
        response = client.get("/api/ufc/live")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "GOALSERVE_API_ERROR"


class TestQueryOptions:
    """쿼리 옵션 처리"""

    def test_unknown_and_gated_options_ignored(self, client, upstream):
        response = client.get("/api/nfl/standings?foo=bar&showOdds=1")

        assert response.status_code == 200
        assert response.json()["metadata"]["params"] == {}
        assert list(upstream.last.url.params.multi_items()) == [("json", "1")]

    @pytest.mark.parametrize("path", ["/api/nfl/schedule", "/api/nba/schedule", "/api/mlb/schedule", "/api/ufc/schedule"])
    def test_schedule_without_options(self, client, upstream, path):
        """옵션 없으면 json=1 만"""
        client.get(path)
        assert list(upstream.last.url.params.multi_items()) == [("json", "1")]

    @pytest.mark.parametrize("raw", ["1", "true"])
    def test_show_odds_forwarded(self, client, upstream, raw):
        client.get("/api/nba/schedule", params={"showOdds": raw})
        assert upstream.last.url.params["showodds"] == "1"

    def test_show_odds_false_not_forwarded(self, client, upstream):
        client.get("/api/ufc/schedule?showOdds=0")
        assert "showodds" not in upstream.last.url.params

    @pytest.mark.parametrize("raw", ["TRUE", "True", " 1 ", " true", "yes"])
    def test_show_odds_exact_match_only(self, client, upstream, raw):
        """"1" / "true" 외의 값은 모두 거짓"""
        response = client.get("/api/nba/schedule", params={"showOdds": raw})

        assert response.status_code == 200
        assert "showodds" not in upstream.last.url.params

    def test_raw_text_passthrough(self, client, upstream):
        """json=0 → 업스트림 본문 텍스트 그대로"""
        upstream.respond_with(lambda request: httpx.Response(200, text="<standings/>"))

        response = client.get("/api/nfl/standings?json=0")

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == "<standings/>"
        assert body["metadata"]["params"] == {"json": "0"}
        assert "json" not in upstream.last.url.params


class TestDeterminism:

    def test_repeat_call_same_request_and_body(self, client, upstream):
        """fetchedAt 외에는 동일"""
        first = client.get("/api/mlb/teams/119/batting").json()
        second = client.get("/api/mlb/teams/119/batting").json()

        assert len(upstream.requests) == 2
        assert upstream.requests[0].url == upstream.requests[1].url

        first["metadata"].pop("fetchedAt")
        second["metadata"].pop("fetchedAt")
        assert first == second


class TestAsyncClient:

    async def test_nba_roster(self, async_client, upstream):
        response = await async_client.get("/api/nba/teams/12/roster")

        assert response.status_code == 200
        assert response.json()["llm_context"] == "NBA team roster for team 12"
        assert upstream.last.url.path == f"/getfeed/{TEST_API_KEY}/bsktbl/12_rosters"

    async def test_nhl_not_implemented(self, async_client, upstream):
        response = await async_client.get("/api/nhl/standings")

        assert response.status_code == 501
        assert response.json()["error"]["code"] == "NOT_IMPLEMENTED"
        assert upstream.requests == []


class TestHeadToHeadOrder:
    """H2H 식별자 순서 유지"""

    @pytest.mark.parametrize("sport", ["nba", "mlb"])
    def test_order_preserved(self, client, upstream, sport):
        forward = client.get(f"/api/{sport}/h2h/101/202").json()
        reverse = client.get(f"/api/{sport}/h2h/202/101").json()

        assert upstream.requests[0].url != upstream.requests[1].url
        assert forward["llm_context"].endswith("team 101 vs team 202")
        assert reverse["llm_context"].endswith("team 202 vs team 101")
        assert reverse["metadata"]["params"] == {"teamId1": "202", "teamId2": "101"}

    @pytest.mark.parametrize("path", ["/api/nfl/h2h/202/101", "/api/nfl/teams/1691/team-stats"])
    def test_nfl_unmapped_not_implemented(self, client, upstream, path):
        """NFL 은 H2H / 팀 통계 업스트림 매핑 없음 → 501"""
        response = client.get(path)

        assert response.status_code == 501
        assert upstream.requests == []
