"""Tests for ranked interest matching."""

import pytest

from puppymatch.config.settings import settings
from puppymatch.shared.repositories.user_interest_repository import UserInterestRepository
from puppymatch.shared.repositories.user_repository import UserRepository
from puppymatch.shared.services.interest_service import InterestService
from puppymatch.shared.services.match_service import MatchService, clamp_limit


@pytest.fixture
def with_interests(db, make_user):
    async def _with_interests(email, interests, **profile):
        user = await make_user(email, **profile)
        await InterestService(db).replace(user.id, interests)
        return user

    return _with_interests


async def test_ranks_by_overlap_with_sorted_common_tags(db, with_interests):
    a = await with_interests("a@example.com", ["chess", "hiking"])
    b = await with_interests("b@example.com", ["hiking", "baking"])
    c = await with_interests("c@example.com", ["hiking", "chess"])

    matches = await MatchService(db).find_matches(a.id)

    assert [m.user_id for m in matches] == [c.id, b.id]
    assert matches[0].overlap == 2
    assert matches[0].common == ["chess", "hiking"]
    assert matches[1].overlap == 1
    assert matches[1].common == ["hiking"]


async def test_limit_truncates_after_ranking(db, with_interests):
    a = await with_interests("a@example.com", ["chess", "hiking"])
    await with_interests("b@example.com", ["hiking", "baking"])
    c = await with_interests("c@example.com", ["hiking", "chess"])

    matches = await MatchService(db).find_matches(a.id, limit=1)

    assert [m.user_id for m in matches] == [c.id]


async def test_requester_never_matches_self(db, with_interests):
    a = await with_interests("a@example.com", ["chess"])
    await with_interests("b@example.com", ["chess"])

    matches = await MatchService(db).find_matches(a.id)

    assert a.id not in {m.user_id for m in matches}


async def test_empty_requester_set_returns_nothing(db, with_interests, make_user, monkeypatch):
    loner = await make_user("loner@example.com")
    await with_interests("b@example.com", ["chess"])
    overlap_calls = []

    async def spy_find_overlapping_users(self, *args, **kwargs):
        overlap_calls.append(args)
        return []

    monkeypatch.setattr(
        UserInterestRepository, "find_overlapping_users", spy_find_overlapping_users
    )

    assert await MatchService(db).find_matches(loner.id) == []
    assert overlap_calls == []


async def test_users_without_shared_tags_are_excluded(db, with_interests):
    a = await with_interests("a@example.com", ["chess"])
    await with_interests("b@example.com", ["surfing"])

    assert await MatchService(db).find_matches(a.id) == []


async def test_ties_prefer_named_users_in_username_order(db, with_interests):
    a = await with_interests("a@example.com", ["chess"])
    unnamed = await with_interests("u@example.com", ["chess"])
    zed = await with_interests("z@example.com", ["chess"], username="zed")
    amy = await with_interests("m@example.com", ["chess"], username="amy")

    matches = await MatchService(db).find_matches(a.id)

    assert [m.user_id for m in matches] == [amy.id, zed.id, unnamed.id]


async def test_match_carries_public_profile(db, with_interests):
    a = await with_interests("a@example.com", ["chess"])
    await with_interests(
        "b@example.com",
        ["chess"],
        username="bobby",
        telegram_handle="@bobby_tg",
        avatar_url="https://cdn.example.com/b.png",
    )

    [match] = await MatchService(db).find_matches(a.id)

    assert match.username == "bobby"
    assert match.telegram_handle == "@bobby_tg"
    assert match.avatar_url == "https://cdn.example.com/b.png"


async def test_deleted_user_disappears_from_matches(db, with_interests):
    a = await with_interests("a@example.com", ["chess"])
    b = await with_interests("b@example.com", ["chess"])

    assert await UserRepository(db).delete(b.id)

    assert await MatchService(db).find_matches(a.id) == []


async def test_every_match_shares_at_least_one_tag(db, with_interests):
    a = await with_interests("a@example.com", ["chess", "hiking", "go"])
    await with_interests("b@example.com", ["go"])
    await with_interests("c@example.com", ["hiking", "chess", "surfing"])
    await with_interests("d@example.com", ["surfing"])

    matches = await MatchService(db).find_matches(a.id)

    assert len(matches) == 2
    for match in matches:
        assert match.overlap == len(match.common) >= 1
        assert set(match.common) <= {"chess", "hiking", "go"}
        assert match.common == sorted(match.common)


@pytest.mark.parametrize(
    "requested,expected",
    [
        (None, settings.MATCH_DEFAULT_LIMIT),
        (0, 1),
        (-5, 1),
        (1, 1),
        (7, 7),
        (settings.MATCH_MAX_LIMIT, settings.MATCH_MAX_LIMIT),
        (10_000, settings.MATCH_MAX_LIMIT),
    ],
)
def test_clamp_limit(requested, expected):
    assert clamp_limit(requested) == expected
