"""Tests for interest normalization and atomic replace."""

import pytest

from puppymatch.config.settings import settings
from puppymatch.shared.core.exceptions import ValidationError
from puppymatch.shared.services.interest_service import InterestService, normalize_interests


def test_normalize_trims_lowercases_and_dedupes():
    assert normalize_interests(["  Hiking ", "hiking", "HIKING", ""]) == {"hiking"}


def test_normalize_drops_blank_tags():
    assert normalize_interests(["   ", "\t", "chess"]) == {"chess"}


def test_normalize_is_idempotent():
    once = normalize_interests(["Board Games", " CHESS", "chess "])

    assert normalize_interests(once) == once


def test_normalize_rejects_overlong_tag():
    with pytest.raises(ValidationError) as exc_info:
        normalize_interests(["x" * (settings.INTEREST_MAX_LENGTH + 1)])

    assert exc_info.value.details["max_length"] == settings.INTEREST_MAX_LENGTH


def test_normalize_accepts_tag_at_max_length():
    tag = "x" * settings.INTEREST_MAX_LENGTH

    assert normalize_interests([tag]) == {tag}


def test_normalize_counts_after_dedupe():
    # Duplicates collapse before the count limit applies
    raw = ["same"] * (settings.INTEREST_MAX_COUNT + 10)

    assert normalize_interests(raw) == {"same"}


def test_normalize_rejects_too_many_tags():
    raw = [f"tag{i}" for i in range(settings.INTEREST_MAX_COUNT + 1)]

    with pytest.raises(ValidationError) as exc_info:
        normalize_interests(raw)

    assert exc_info.value.details["max_count"] == settings.INTEREST_MAX_COUNT


@pytest.mark.parametrize("tag", ["ch\x00ess", "board\ngames", "tab\x7fbed", "\ud800"])
def test_normalize_rejects_control_characters_and_surrogates(tag):
    with pytest.raises(ValidationError) as exc_info:
        normalize_interests(["chess", tag])

    assert exc_info.value.details == {"position": 1}


async def test_new_user_has_no_interests(db, make_user):
    user = await make_user("new@example.com")

    assert await InterestService(db).get(user.id) == set()


async def test_replace_then_get_returns_normalized_set(db, make_user):
    user = await make_user("reader@example.com")
    service = InterestService(db)

    saved = await service.replace(user.id, ["Chess", " hiking", "CHESS"])

    assert saved == {"chess", "hiking"}
    assert await service.get(user.id) == {"chess", "hiking"}


async def test_replace_leaves_no_residue(db, make_user):
    user = await make_user("swap@example.com")
    service = InterestService(db)

    await service.replace(user.id, ["chess", "hiking", "baking"])
    await service.replace(user.id, ["surfing"])

    assert await service.get(user.id) == {"surfing"}


async def test_replace_with_empty_list_clears(db, make_user):
    user = await make_user("clear@example.com")
    service = InterestService(db)
    await service.replace(user.id, ["chess"])

    assert await service.replace(user.id, []) == set()
    assert await service.get(user.id) == set()


async def test_invalid_replace_keeps_previous_set(db, make_user):
    user = await make_user("keep@example.com")
    service = InterestService(db)
    await service.replace(user.id, ["chess"])

    with pytest.raises(ValidationError):
        await service.replace(user.id, ["ok", "x" * (settings.INTEREST_MAX_LENGTH + 1)])

    assert await service.get(user.id) == {"chess"}


async def test_replace_only_touches_own_set(db, make_user):
    alice = await make_user("alice@example.com")
    bob = await make_user("bob@example.com")
    service = InterestService(db)

    await service.replace(alice.id, ["chess"])
    await service.replace(bob.id, ["hiking"])
    await service.replace(alice.id, ["baking"])

    assert await service.get(bob.id) == {"hiking"}


async def test_nul_tag_keeps_previous_set(db, make_user):
    user = await make_user("nul@example.com")
    service = InterestService(db)
    await service.replace(user.id, ["chess"])

    with pytest.raises(ValidationError):
        await service.replace(user.id, ["hiking", "ch\x00ess"])

    assert await service.get(user.id) == {"chess"}
