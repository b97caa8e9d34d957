"""
GoalServe Feed Table

스포츠별 업스트림 카테고리와 오퍼레이션 → 피드 경로 매핑.

GoalServe 경로 규칙은 종목마다 일관되지 않으므로 (예: "shedule" 오타,
nfl-standings vs mlb_standings, H2H 인코딩 방식) 모든 차이는 코드 분기가
아니라 이 테이블의 데이터로 표현한다.

    /{apiKey}/{category}/{segment}?json=1&{params}&{options}
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from class_lib.goalserve.options import OptionSet


PATH_PARAM_PATTERN = re.compile(r"\{(\w+)\}")

DATA_TYPES = frozenset({
    "scores", "standings", "schedule", "roster", "injuries",
    "player-stats", "team-stats", "play-by-play", "odds", "h2h",
    "player-image", "coverage", "fighters", "fighter-profile",
    "leaders", "transactions",
})


@dataclass(frozen=True)
class EndpointSpec:
    """(종목, 오퍼레이션) 단위 정적 엔드포인트 정의"""
    operation: str
    route: str
    data_type: str
    context: str
    summary: str = ""
    segment: Optional[str] = None
    params: Mapping[str, str] = field(default_factory=dict)
    options: OptionSet = OptionSet.NONE

    @property
    def implemented(self) -> bool:
        return self.segment is not None

    @property
    def path_params(self) -> tuple[str, ...]:
        """라우트에 선언된 순서대로의 필수 경로 파라미터"""
        return tuple(PATH_PARAM_PATTERN.findall(self.route))


@dataclass(frozen=True)
class SportFeedConfig:
    """종목별 정적 피드 설정"""
    sport_id: str
    label: str
    group: str
    category: Optional[str]
    endpoints: tuple[EndpointSpec, ...]

    def endpoint(self, operation: str) -> Optional[EndpointSpec]:
        for spec in self.endpoints:
            if spec.operation == operation:
                return spec
        return None

    def render_context(self, spec: EndpointSpec, path_params: Mapping[str, str]) -> str:
        return spec.context.format_map(_ContextValues(path_params, label=self.label))


class _ContextValues(dict):
    """llm_context 템플릿 치환값 (누락된 식별자는 빈 문자열)"""

    def __missing__(self, key):
        return ""


def _op(operation, route, data_type, context, summary="", segment=None, params=None,
        options=OptionSet.NONE) -> EndpointSpec:
    return EndpointSpec(
        operation=operation,
        route=route,
        data_type=data_type,
        context=context,
        summary=summary or context.replace("{label} ", ""),
        segment=segment,
        params=MappingProxyType(dict(params or {})),
        options=options,
    )


# 업스트림 공유 세그먼트 (선수 이미지, H2H 쿼리 방식, 날짜별 스코어 일부)
USA = "usa"


# ─────────────────────────────────────────────
# Football
# ─────────────────────────────────────────────

NFL = SportFeedConfig("nfl", "NFL", "football", "football", (
    _op("scores", "/scores", "scores", "{label} live scores for current week",
        "Live scores", segment="nfl-scores"),
    _op("scores_by_date", "/scores/{date}", "scores", "{label} box scores for {date}",
        "Box scores by date", segment="nfl-scores", params={"date": "{date}"}),
    _op("play_by_play", "/play-by-play", "play-by-play", "{label} live play-by-play",
        "Live play-by-play", segment="nfl-playbyplay-scores"),
    _op("play_by_play_by_date", "/play-by-play/{date}", "play-by-play",
        "{label} play-by-play for {date}", "Play-by-play by date"),
    _op("schedule", "/schedule", "schedule", "{label} schedule",
        "Schedule with optional odds", segment="nfl-shedule", options=OptionSet.SCHEDULE),
    _op("standings", "/standings", "standings", "{label} division standings",
        "Division standings", segment="nfl-standings"),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "{label} team roster for team {teamId}",
        "Team roster", segment="{teamId}_rosters"),
    _op("team_player_stats", "/teams/{teamId}/player-stats", "player-stats",
        "{label} player stats for team {teamId}", "Player season stats",
        segment="{teamId}_player_stats"),
    _op("team_stats", "/teams/{teamId}/team-stats", "team-stats",
        "{label} team stats for team {teamId}", "Team season stats"),
    _op("team_injuries", "/teams/{teamId}/injuries", "injuries",
        "{label} injury report for team {teamId}", "Injury reports",
        segment="{teamId}_injuries"),
    _op("player_image", "/players/{playerId}/image", "player-image",
        "{label} player image for player {playerId}", "Player headshot",
        segment=USA, params={"playerimage": "{playerId}"}),
    _op("h2h", "/h2h/{teamId1}/{teamId2}", "h2h",
        "{label} H2H comparison: team {teamId1} vs team {teamId2}", "Head-to-head"),
))

NCAAF = SportFeedConfig("ncaaf", "NCAA FBS", "football", None, (
    _op("scores", "/scores", "scores", "{label} live scores", "FBS live scores"),
    _op("scores_by_date", "/scores/{date}", "scores", "{label} box scores for {date}",
        "FBS box scores by date"),
    _op("fcs_scores", "/fcs/scores", "scores", "NCAA FCS live scores", "FCS live scores"),
    _op("fcs_schedule", "/fcs/schedule", "schedule", "NCAA FCS schedule", "FCS schedule"),
    _op("fcs_standings", "/fcs/standings", "standings", "NCAA FCS standings", "FCS standings"),
    _op("div3_scores", "/div3/scores", "scores", "NCAA Division III live scores",
        "Division III live scores"),
    _op("div3_schedule", "/div3/schedule", "schedule", "NCAA Division III schedule",
        "Division III schedule"),
    _op("div3_standings", "/div3/standings", "standings", "NCAA Division III standings",
        "Division III standings"),
    _op("play_by_play", "/play-by-play", "play-by-play", "{label} live play-by-play",
        "FBS live play-by-play"),
    _op("play_by_play_by_date", "/play-by-play/{date}", "play-by-play",
        "{label} play-by-play for {date}", "FBS play-by-play by date"),
    _op("schedule", "/schedule", "schedule", "{label} schedule", "FBS schedule",
        options=OptionSet.SCHEDULE),
    _op("standings", "/standings", "standings", "{label} standings", "FBS standings"),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "NCAA team roster for team {teamId}",
        "Team roster"),
    _op("team_stats", "/teams/{teamId}/stats", "team-stats", "NCAA team stats for team {teamId}",
        "Team stats"),
    _op("team_player_stats", "/teams/{teamId}/player-stats", "player-stats",
        "NCAA player stats for team {teamId}", "Player stats"),
    _op("player_image", "/players/{playerId}/image", "player-image",
        "NCAA player image for player {playerId}", "Player headshot"),
))

XFL = SportFeedConfig("xfl", "XFL", "football", None, (
    _op("scores", "/scores", "scores", "{label} live scores", "Live scores"),
    _op("schedule", "/schedule", "schedule", "{label} schedule", "Schedule",
        options=OptionSet.SCHEDULE),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "{label} team roster for team {teamId}",
        "Team roster"),
))

USFL = SportFeedConfig("usfl", "USFL", "football", None, (
    _op("scores", "/scores", "scores", "{label} live scores", "Live scores"),
    _op("schedule", "/schedule", "schedule", "{label} schedule", "Schedule",
        options=OptionSet.SCHEDULE),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "{label} team roster for team {teamId}",
        "Team roster"),
))


# ─────────────────────────────────────────────
# Basketball
# ─────────────────────────────────────────────

NBA = SportFeedConfig("nba", "NBA", "basketball", "bsktbl", (
    _op("scores", "/scores", "scores", "{label} live scores", "Live scores",
        segment="nba-scores"),
    _op("scores_by_date", "/scores/{date}", "scores", "{label} box scores for {date}",
        "Box scores by date", segment="nba-scores", params={"date": "{date}"}),
    _op("play_by_play", "/play-by-play", "play-by-play", "{label} live play-by-play",
        "Live play-by-play", segment="nba-playbyplay"),
    _op("play_by_play_by_date", "/play-by-play/{date}", "play-by-play",
        "{label} play-by-play for {date}", "Play-by-play by date"),
    _op("schedule", "/schedule", "schedule", "{label} schedule",
        "Schedule with optional odds", segment="nba-shedule", options=OptionSet.SCHEDULE),
    _op("standings", "/standings", "standings", "{label} division standings",
        "Division standings", segment="nba-standings"),
    _op("conference_standings", "/standings/conference", "standings",
        "{label} conference standings", "Conference standings", segment="nba_conf_standings"),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "{label} team roster for team {teamId}",
        "Team roster", segment="{teamId}_rosters"),
    _op("team_player_stats", "/teams/{teamId}/player-stats", "player-stats",
        "{label} player stats for team {teamId}", "Player season stats",
        segment="{teamId}_stats"),
    _op("team_stats", "/teams/{teamId}/team-stats", "team-stats",
        "{label} team stats for team {teamId}", "Team season stats",
        segment="{teamId}_team_stats"),
    _op("team_injuries", "/teams/{teamId}/injuries", "injuries",
        "{label} injury report for team {teamId}", "Injury reports",
        segment="{teamId}_injuries"),
    _op("player_image", "/players/{playerId}/image", "player-image",
        "{label} player image for player {playerId}", "Player headshot",
        segment=USA, params={"playerimage": "{playerId}"}),
    _op("h2h", "/h2h/{teamId1}/{teamId2}", "h2h",
        "{label} H2H comparison: team {teamId1} vs team {teamId2}", "Head-to-head",
        segment=USA, params={"h2h": "{teamId1},{teamId2}"}),
    _op("coverage", "/coverage", "coverage", "{label} feed coverage", "Feed coverage",
        segment="coverage"),
    _op("ap_rankings", "/rankings/ap", "standings", "{label} AP rankings", "AP rankings"),
))

NCAAB = SportFeedConfig("ncaab", "NCAA Basketball", "basketball", None, (
    _op("scores", "/scores", "scores", "{label} live scores", "Live scores"),
    _op("scores_by_date", "/scores/{date}", "scores", "{label} box scores for {date}",
        "Box scores by date"),
    _op("play_by_play", "/play-by-play", "play-by-play", "{label} live play-by-play",
        "Live play-by-play"),
    _op("play_by_play_by_date", "/play-by-play/{date}", "play-by-play",
        "{label} play-by-play for {date}", "Play-by-play by date"),
    _op("schedule", "/schedule", "schedule", "{label} schedule", "Schedule",
        options=OptionSet.SCHEDULE),
    _op("standings", "/standings", "standings", "{label} standings", "Standings"),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "{label} team roster for team {teamId}",
        "Team roster"),
    _op("team_player_stats", "/teams/{teamId}/player-stats", "player-stats",
        "{label} player stats for team {teamId}", "Player stats"),
    _op("team_stats", "/teams/{teamId}/team-stats", "team-stats",
        "{label} team stats for team {teamId}", "Team stats"),
    _op("player_image", "/players/{playerId}/image", "player-image",
        "{label} player image for player {playerId}", "Player headshot"),
    _op("ap_rankings", "/rankings/ap", "standings", "{label} AP rankings", "AP rankings"),
))

WNBA = SportFeedConfig("wnba", "WNBA", "basketball", None, (
    _op("scores", "/scores", "scores", "{label} live scores", "Live scores"),
    _op("scores_by_date", "/scores/{date}", "scores", "{label} box scores for {date}",
        "Box scores by date"),
    _op("schedule", "/schedule", "schedule", "{label} schedule", "Schedule",
        options=OptionSet.SCHEDULE),
    _op("standings", "/standings", "standings", "{label} standings", "Standings"),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "{label} team roster for team {teamId}",
        "Team roster"),
    _op("team_player_stats", "/teams/{teamId}/player-stats", "player-stats",
        "{label} player stats for team {teamId}", "Player stats"),
))


# ─────────────────────────────────────────────
# Baseball / Hockey / Combat
# ─────────────────────────────────────────────

MLB = SportFeedConfig("mlb", "MLB", "baseball", "baseball", (
    _op("scores", "/scores", "scores", "{label} live scores", "Live scores",
        segment="mlb-scores"),
    _op("scores_by_date", "/scores/{date}", "scores", "{label} box scores for {date}",
        "Box scores by date", segment=USA, params={"date": "{date}"}),
    _op("play_by_play", "/play-by-play", "play-by-play", "{label} live play-by-play",
        "Live play-by-play", segment="mlb-playbyplay"),
    _op("schedule", "/schedule", "schedule", "{label} schedule",
        "Schedule with optional odds", segment="mlb_shedule", options=OptionSet.SCHEDULE),
    _op("standings", "/standings", "standings", "{label} standings", "Standings",
        segment="mlb_standings"),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "{label} team roster for team {teamId}",
        "Team roster", segment="{teamId}_rosters"),
    _op("team_stats", "/teams/{teamId}/stats", "team-stats", "{label} team stats for team {teamId}",
        "Team stats", segment="{teamId}_stats"),
    _op("team_overall_stats", "/teams/{teamId}/team-stats", "team-stats",
        "{label} team overall stats for team {teamId}", "Team overall stats",
        segment="{teamId}_team_stats"),
    _op("team_batting_stats", "/teams/{teamId}/batting", "team-stats",
        "{label} team batting stats for team {teamId}", "Team batting stats",
        segment="{teamId}_batting_stats"),
    _op("team_pitching_stats", "/teams/{teamId}/pitching", "team-stats",
        "{label} team pitching stats for team {teamId}", "Team pitching stats",
        segment="{teamId}_pitching_stats"),
    _op("team_injuries", "/teams/{teamId}/injuries", "injuries",
        "{label} injury report for team {teamId}", "Injury reports",
        segment="{teamId}_injuries"),
    _op("player_batting", "/stats/player-batting", "player-stats",
        "{label} player batting stats", "League batting stats", segment="mlb_player_batting"),
    _op("player_pitching", "/stats/player-pitching", "player-stats",
        "{label} player pitching stats", "League pitching stats", segment="mlb_player_pitching"),
    _op("player_fielding", "/stats/player-fielding", "player-stats",
        "{label} player fielding stats", "League fielding stats", segment="mlb_player_fielding"),
    _op("team_batting", "/stats/team-batting", "team-stats", "{label} team batting stats",
        "League team batting stats", segment="mlb_team_batting"),
    _op("team_pitching", "/stats/team-pitching", "team-stats", "{label} team pitching stats",
        "League team pitching stats", segment="mlb_team_pitching"),
    _op("team_fielding", "/stats/team-fielding", "team-stats", "{label} team fielding stats",
        "League team fielding stats", segment="mlb_team_fielding"),
    _op("nl_player_batting", "/nl/player-batting", "player-stats", "NL player batting stats",
        segment="nl_player_batting"),
    _op("nl_player_pitching", "/nl/player-pitching", "player-stats", "NL player pitching stats",
        segment="nl_player_pitching"),
    _op("nl_player_fielding", "/nl/player-fielding", "player-stats", "NL player fielding stats",
        segment="nl_player_fielding"),
    _op("nl_team_batting", "/nl/team-batting", "team-stats", "NL team batting stats",
        segment="nl_team_batting"),
    _op("nl_team_pitching", "/nl/team-pitching", "team-stats", "NL team pitching stats",
        segment="nl_team_pitching"),
    _op("nl_team_fielding", "/nl/team-fielding", "team-stats", "NL team fielding stats",
        segment="nl_team_fielding"),
    _op("player_image", "/players/{playerId}/image", "player-image",
        "{label} player image for player {playerId}", "Player headshot",
        segment=USA, params={"playerimage": "{playerId}"}),
    _op("h2h", "/h2h/{teamId1}/{teamId2}", "h2h",
        "{label} H2H comparison: team {teamId1} vs team {teamId2}", "Head-to-head",
        segment=USA, params={"h2h": "{teamId1},{teamId2}"}),
    _op("transactions", "/transactions", "transactions", "{label} transactions",
        "Transactions", segment="mlb_transactions"),
    _op("leaders", "/leaders", "leaders", "{label} league leaders", "League leaders",
        segment="mlb_leaders"),
))

NHL = SportFeedConfig("nhl", "NHL", "hockey", None, (
    _op("scores", "/scores", "scores", "{label} live scores", "Live scores"),
    _op("scores_by_date", "/scores/{date}", "scores", "{label} box scores for {date}",
        "Box scores by date"),
    _op("schedule", "/schedule", "schedule", "{label} schedule", "Schedule",
        options=OptionSet.SCHEDULE),
    _op("standings", "/standings", "standings", "{label} standings", "Standings"),
    _op("team_roster", "/teams/{teamId}/roster", "roster", "{label} team roster for team {teamId}",
        "Team roster"),
    _op("team_player_stats", "/teams/{teamId}/player-stats", "player-stats",
        "{label} player stats for team {teamId}", "Player season stats"),
    _op("team_stats", "/teams/{teamId}/team-stats", "team-stats",
        "{label} team overall stats for team {teamId}", "Team season stats"),
    _op("team_injuries", "/teams/{teamId}/injuries", "injuries",
        "{label} injury report for team {teamId}", "Injury reports"),
    _op("player_image", "/players/{playerId}/image", "player-image",
        "{label} player image for player {playerId}", "Player headshot"),
))

UFC = SportFeedConfig("ufc", "UFC", "combat", "mma", (
    _op("schedule", "/schedule", "schedule", "{label} fight schedule",
        "Fight schedule with optional odds", segment="schedule", options=OptionSet.SCHEDULE),
    _op("live", "/live", "scores", "{label} live fight stats", "Live fight stats",
        segment="live"),
    _op("live_by_date", "/live/{date}", "scores", "{label} fight results for {date}",
        "Historical fight results", segment="live", params={"date": "{date}"}),
    _op("fighters", "/fighters", "fighters", "{label} fighters list", "Fighters list",
        segment="fighters"),
    _op("fighter_profile", "/fighters/{fighterId}", "fighter-profile",
        "{label} fighter profile for fighter {fighterId}", "Fighter profile",
        segment="fighter", params={"profile": "{fighterId}"}),
    _op("odds_markets", "/odds/markets", "odds", "{label} betting markets dictionary",
        "Betting markets"),
    _op("odds_bookmakers", "/odds/bookmakers", "odds", "{label} bookmakers dictionary",
        "Bookmakers list"),
))


# ─────────────────────────────────────────────
# Soccer / Golf / Motorsports / Other
# ─────────────────────────────────────────────

def _soccer_league(prefix: str, name: str) -> tuple[EndpointSpec, ...]:
    return (
        _op(f"{prefix}_fixtures", f"/{prefix}/fixtures", "schedule", f"{name} fixtures",
            options=OptionSet.DATE_RANGE),
        _op(f"{prefix}_scores", f"/{prefix}/scores", "scores", f"{name} live scores"),
        _op(f"{prefix}_scores_by_date", f"/{prefix}/scores/{{date}}", "scores",
            f"{name} scores for {{date}}"),
        _op(f"{prefix}_standings", f"/{prefix}/standings", "standings", f"{name} standings"),
        _op(f"{prefix}_odds", f"/{prefix}/odds", "odds", f"{name} betting odds"),
        _op(f"{prefix}_team", f"/{prefix}/teams/{{teamId}}", "team-stats",
            f"{name} team profile for team {{teamId}}"),
        _op(f"{prefix}_player", f"/{prefix}/players/{{playerId}}", "player-stats",
            f"{name} player profile for player {{playerId}}"),
    )


SOCCER = SportFeedConfig(
    "soccer", "Soccer", "soccer", None,
    _soccer_league("mls", "MLS") + _soccer_league("epl", "EPL"),
)

GOLF = SportFeedConfig("golf", "Golf", "golf", None, (
    _op("live", "/live", "scores", "{label} live leaderboard", "Live leaderboard"),
    _op("live_by_date", "/live/{date}", "scores", "{label} results for {date}", "Results by date"),
    _op("pga_schedule", "/pga/schedule", "schedule", "PGA schedule"),
    _op("pga_players", "/pga/players", "roster", "PGA players list", "PGA players"),
    _op("pga_rankings", "/pga/rankings", "standings", "PGA rankings"),
))


def _nascar_series(prefix: str, name: str) -> tuple[EndpointSpec, ...]:
    return (
        _op(f"{prefix}_results", f"/{prefix}/results", "scores", f"NASCAR {name} results"),
        _op(f"{prefix}_live", f"/{prefix}/live", "scores", f"NASCAR {name} live race"),
        _op(f"{prefix}_standings", f"/{prefix}/standings", "standings", f"NASCAR {name} standings"),
    )


NASCAR = SportFeedConfig(
    "nascar", "NASCAR", "motorsports", None,
    _nascar_series("sprintcup", "Sprint Cup") + _nascar_series("nationwide", "Nationwide"),
)

F1 = SportFeedConfig("f1", "F1", "motorsports", None, (
    _op("results", "/results", "scores", "{label} race results", "Race results"),
    _op("live", "/live", "scores", "{label} live race", "Live race data"),
    _op("drivers", "/drivers", "roster", "{label} drivers", "Drivers standings"),
    _op("teams", "/teams", "standings", "{label} teams/constructors", "Constructors standings"),
))

ESPORTS = SportFeedConfig("esports", "Esports", "esports", None, (
    _op("home", "/home", "scores", "{label} home feed", "All games feed"),
    _op("home_by_date", "/home/{date}", "scores", "{label} results for {date}",
        "Results by date"),
    _op("d1", "/d1", "scores", "{label} Division 1", "Division 1"),
    _op("d2", "/d2", "scores", "{label} Division 2", "Division 2"),
))

HORSE_RACING = SportFeedConfig("horse-racing", "Horse racing", "racing", None, (
    _op("today", "/today", "scores", "{label} today entries/results", "Today entries/results"),
    _op("tomorrow", "/tomorrow", "schedule", "{label} tomorrow entries", "Tomorrow entries"),
))


FEEDS: Mapping[str, SportFeedConfig] = MappingProxyType({
    feed.sport_id: feed
    for feed in (
        NFL, NCAAF, XFL, USFL,
        NBA, NCAAB, WNBA,
        UFC, MLB, NHL,
        SOCCER, GOLF, NASCAR, F1, ESPORTS, HORSE_RACING,
    )
})