#!/usr/bin/env python3
"""
Test suite for TeamMatchingService.

Uses the in-memory data source; no database required.
"""

import unittest

from core.config_loader import CandidateDefaults, RecommendationConfig, TeamMatchingConfig
from core.matching import (
    CandidateProfile, TeamMatchingService, TeamPreferences, TeamProfile, WorkingHours
)
from core.matching.exceptions import TeamNotFoundException, UserNotFoundException
from tests.mocks.matching_mocks import InMemoryMatchingDataSource


def build_data_source(**overrides):
    candidates = {
        "u1": CandidateProfile("u1", ("Python", "React"), "intermediate", "UTC+8"),
        "u2": CandidateProfile("u2", ("Java",), "beginner", "UTC-8"),
        "u3": CandidateProfile(
            "u3", ("Python", "Go"), "advanced", "UTC+8",
            WorkingHours(start="09:00", end="18:00")
        ),
        "l1": CandidateProfile("l1", ("Python",), "expert", "UTC+8"),
    }
    teams = {
        "t1": TeamProfile("t1", max_members=5, leader_id="l1", member_ids=("l1",)),
        "t2": TeamProfile("t2", max_members=5, leader_id="l2", member_ids=("l2", "m1", "m2")),
        "t3": TeamProfile("t3", max_members=3, leader_id="l3", member_ids=("l3", "m3", "m4")),
    }
    team_preferences = {
        "t1": TeamPreferences(required_skills=["python"], preferred_skills=["react"]),
    }
    params = dict(
        candidates=candidates,
        teams=teams,
        team_preferences=team_preferences,
        recruiting_teams={"h1": ["t1", "t2", "t3"]},
        participants={"h1": ["u1", "u2", "u3"]},
    )
    params.update(overrides)
    return InMemoryMatchingDataSource(**params)


class TestScoreMatch(unittest.TestCase):
    """Single-pair scoring."""

    def setUp(self):
        self.source = build_data_source()
        self.service = TeamMatchingService(self.source)

    def test_score_with_team_preferences(self):
        result = self.service.score_match(
            self.source.candidates["u1"],
            self.source.teams["t1"],
            self.source.team_preferences["t1"]
        )

        self.assertAlmostEqual(result.skill_match_score, 0.9)
        self.assertEqual(result.experience_match_score, 1.0)
        self.assertEqual(result.location_match_score, 0.9)
        self.assertEqual(result.availability_score, 0.7)
        self.assertEqual(result.team_size_score, 0.6)
        self.assertAlmostEqual(result.overall_score, 0.85)
        self.assertEqual(result.user_id, "u1")
        self.assertEqual(result.team_id, "t1")
        self.assertEqual(result.matching_skills, ["python", "react"])

    def test_score_is_deterministic(self):
        candidate = self.source.candidates["u3"]
        team = self.source.teams["t1"]
        first = self.service.score_match(candidate, team)
        second = self.service.score_match(candidate, team)

        self.assertEqual(first, second)
        self.assertEqual(candidate.skills, ("Python", "Go"))
        self.assertEqual(team.member_ids, ("l1",))

    def test_missing_preferences_use_defaults(self):
        result = self.service.score_match(self.source.candidates["u1"], self.source.teams["t2"])

        # 0.94 skills (two complementary), team reaches preferred size 4
        self.assertAlmostEqual(result.skill_match_score, 0.94)
        self.assertEqual(result.team_size_score, 1.0)
        self.assertAlmostEqual(result.overall_score, 0.906)

    def test_default_preferences_use_default_working_hours(self):
        candidate = CandidateProfile("u9", working_hours=WorkingHours(start="09:00", end="18:00"))
        team = TeamProfile("t9", max_members=6, member_ids=("a", "b"))

        result = self.service.score_match(candidate, team)

        self.assertAlmostEqual(result.availability_score, 1.0)
        self.assertIn("High working-hours overlap", result.synergy_reasons)

    def test_candidate_without_hours_is_neutral(self):
        result = self.service.score_match(self.source.candidates["u1"], self.source.teams["t2"])
        self.assertEqual(result.availability_score, 0.7)

    def test_team_without_hours_is_neutral(self):
        result = self.service.score_match(
            self.source.candidates["u3"],
            self.source.teams["t2"],
            TeamPreferences(working_hours=None)
        )
        self.assertEqual(result.availability_score, 0.7)

    def test_full_team_scores_zero_team_size(self):
        result = self.service.score_match(self.source.candidates["u1"], self.source.teams["t3"])

        self.assertEqual(result.team_size_score, 0.0)
        self.assertIn("Team size is not ideal", result.weaknesses_analysis)

    def test_unset_candidate_fields_use_configured_defaults(self):
        candidate = CandidateProfile("u9", ("Python",))
        team = self.source.teams["t1"]
        preferences = TeamPreferences(
            min_experience="advanced",
            preferred_timezones=["UTC+8"],
            location_flexible=False
        )

        result = self.service.score_match(candidate, team, preferences)
        self.assertEqual(result.experience_match_score, 0.7)
        self.assertEqual(result.location_match_score, 1.0)

        config = TeamMatchingConfig(
            candidate_defaults=CandidateDefaults(experience_level="expert", timezone="UTC+0")
        )
        result = TeamMatchingService(self.source, config).score_match(candidate, team, preferences)
        self.assertEqual(result.experience_match_score, 1.0)
        self.assertEqual(result.location_match_score, 0.4)

    def test_configured_default_preferences(self):
        config = TeamMatchingConfig(default_preferences={"preferred_team_size": 2})
        service = TeamMatchingService(self.source, config)

        self.assertEqual(service.default_preferences.preferred_team_size, 2)
        result = service.score_match(self.source.candidates["u1"], self.source.teams["t2"])
        self.assertEqual(result.team_size_score, 0.6)


class TestCalculateUserTeamMatch(unittest.TestCase):

    def setUp(self):
        self.source = build_data_source(
            user_preferences={"l2": TeamPreferences(required_skills=["java"])}
        )
        self.service = TeamMatchingService(self.source)

    def test_lookup_and_score(self):
        result = self.service.calculate_user_team_match("u1", "t1", "h1")

        self.assertAlmostEqual(result.overall_score, 0.85)
        self.assertEqual(result.hackathon_id, "h1")

    def test_leader_preferences_fallback(self):
        result = self.service.calculate_user_team_match("u2", "t2", "h1")

        self.assertEqual(result.matching_skills, ["java"])
        self.assertEqual(result.missing_skills, [])

    def test_unknown_user(self):
        with self.assertRaises(UserNotFoundException):
            self.service.calculate_user_team_match("nobody", "t1", "h1")

    def test_unknown_team(self):
        with self.assertRaises(TeamNotFoundException):
            self.service.calculate_user_team_match("u1", "ghost", "h1")


class TestRecommendTeamsForUser(unittest.TestCase):

    def setUp(self):
        self.source = build_data_source()
        self.service = TeamMatchingService(self.source)

    def test_ranked_by_overall_score(self):
        items = self.service.recommend_teams_for_user("u1", "h1")

        self.assertEqual([item.team.team_id for item in items], ["t2", "t1", "t3"])
        scores = [item.overall_score for item in items]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertAlmostEqual(items[2].overall_score, 0.806)
        for item in items:
            self.assertEqual(item.match.user_id, "u1")
            self.assertEqual(item.match.hackathon_id, "h1")
            self.assertIsNone(item.user)

    def test_team_summary_attached(self):
        items = self.service.recommend_teams_for_user("u1", "h1")

        self.assertEqual(items[0].team.name, "Team t2")
        self.assertEqual(items[0].team.current_members, 3)
        self.assertEqual(items[0].match.team_id, "t2")

    def test_limit(self):
        items = self.service.recommend_teams_for_user("u1", "h1", limit=1)
        self.assertEqual([item.team.team_id for item in items], ["t2"])

    def test_limit_zero_still_validates_user(self):
        self.assertEqual(self.service.recommend_teams_for_user("u1", "h1", limit=0), [])
        with self.assertRaises(UserNotFoundException):
            self.service.recommend_teams_for_user("nobody", "h1", limit=0)

    def test_negative_limit_returns_nothing(self):
        self.assertEqual(self.service.recommend_teams_for_user("u1", "h1", limit=-3), [])

    def test_limit_is_capped_by_config(self):
        config = TeamMatchingConfig(recommendations=RecommendationConfig(default_limit=1, max_limit=2))
        service = TeamMatchingService(self.source, config)

        self.assertEqual(len(service.recommend_teams_for_user("u1", "h1")), 1)
        self.assertEqual(len(service.recommend_teams_for_user("u1", "h1", limit=10)), 2)

    def test_unknown_user(self):
        with self.assertRaises(UserNotFoundException):
            self.service.recommend_teams_for_user("nobody", "h1")

    def test_no_recruiting_teams(self):
        self.assertEqual(self.service.recommend_teams_for_user("u1", "h-empty"), [])

    def test_failing_candidates_are_skipped(self):
        source = build_data_source(
            recruiting_teams={"h1": ["t1", "broken", "ghost", "t2"]},
            failing_ids={"broken"}
        )
        items = TeamMatchingService(source).recommend_teams_for_user("u1", "h1")

        self.assertEqual([item.team.team_id for item in items], ["t2", "t1"])

    def test_teams_the_user_belongs_to_are_excluded(self):
        class UnfilteredSource(InMemoryMatchingDataSource):
            def list_recruiting_teams(self, hackathon_id, exclude_user_id):
                return list(self.recruiting_teams.get(hackathon_id, []))

        source = build_data_source()
        source = UnfilteredSource(
            candidates=source.candidates,
            teams=source.teams,
            team_preferences=source.team_preferences,
            recruiting_teams=source.recruiting_teams
        )
        items = TeamMatchingService(source).recommend_teams_for_user("l1", "h1")

        self.assertNotIn("t1", [item.team.team_id for item in items])
        self.assertEqual(len(items), 2)

    def test_missing_summary_falls_back_to_profile(self):
        class NoSummarySource(InMemoryMatchingDataSource):
            def get_team_summary(self, team_id):
                return None

        base = build_data_source()
        source = NoSummarySource(
            candidates=base.candidates,
            teams=base.teams,
            recruiting_teams={"h1": ["t2"]}
        )
        items = TeamMatchingService(source).recommend_teams_for_user("u1", "h1")

        self.assertEqual(items[0].team.name, "t2")
        self.assertEqual(items[0].team.current_members, 3)
        self.assertEqual(items[0].team.max_members, 5)

    def test_thread_pool_matches_sequential(self):
        config = TeamMatchingConfig(recommendations=RecommendationConfig(max_workers=4))
        concurrent = TeamMatchingService(self.source, config).recommend_teams_for_user("u1", "h1")
        sequential = self.service.recommend_teams_for_user("u1", "h1")

        self.assertEqual(
            [(i.team.team_id, i.overall_score) for i in concurrent],
            [(i.team.team_id, i.overall_score) for i in sequential]
        )


class TestRecommendUsersForTeam(unittest.TestCase):

    def setUp(self):
        self.source = build_data_source()
        self.service = TeamMatchingService(self.source)

    def test_ranked_by_overall_score(self):
        items = self.service.recommend_users_for_team("t1", "h1")

        self.assertEqual([item.user.user_id for item in items], ["u1", "u3", "u2"])
        self.assertAlmostEqual(items[0].overall_score, 0.85)
        # u3 has 09:00-18:00 hours, matching the default team bounds
        self.assertAlmostEqual(items[1].overall_score, 0.838)
        self.assertAlmostEqual(items[2].overall_score, 0.494)
        for item in items:
            self.assertEqual(item.match.team_id, "t1")
            self.assertIsNone(item.team)

    def test_user_summary_attached(self):
        items = self.service.recommend_users_for_team("t1", "h1", limit=1)

        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].user.username, "user-u1")
        self.assertEqual(items[0].user.skills, ("Python", "React"))

    def test_unknown_team(self):
        with self.assertRaises(TeamNotFoundException):
            self.service.recommend_users_for_team("ghost", "h1")
        with self.assertRaises(TeamNotFoundException):
            self.service.recommend_users_for_team("ghost", "h1", limit=0)

    def test_members_are_excluded(self):
        source = build_data_source(participants={"h1": ["l1", "u1"]})
        items = TeamMatchingService(source).recommend_users_for_team("t1", "h1")

        self.assertEqual([item.user.user_id for item in items], ["u1"])

    def test_failing_candidates_are_skipped(self):
        source = build_data_source(
            participants={"h1": ["u1", "broken", "nobody", "u2"]},
            failing_ids={"broken"}
        )
        items = TeamMatchingService(source).recommend_users_for_team("t1", "h1")

        self.assertEqual([item.user.user_id for item in items], ["u1", "u2"])

    def test_no_participants(self):
        self.assertEqual(self.service.recommend_users_for_team("t1", "h-empty"), [])

    def test_equal_scores_keep_enumeration_order(self):
        twin = CandidateProfile("u4", ("Python", "React"), "intermediate", "UTC+8")
        candidates = dict(build_data_source().candidates, u4=twin)
        source = build_data_source(candidates=candidates, participants={"h1": ["u4", "u2", "u1"]})

        items = TeamMatchingService(source).recommend_users_for_team("t1", "h1")

        self.assertEqual([item.user.user_id for item in items], ["u4", "u1", "u2"])


if __name__ == '__main__':
    unittest.main()
