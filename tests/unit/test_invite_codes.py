"""Unit tests for invite code generation."""

import string
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from fitchallenge.errors import PersistenceError
from fitchallenge.groups.invite_codes import (
    INVITE_CHARSET,
    INVITE_LENGTH,
    generate_invite_code,
    generate_unique_invite_code,
    is_valid_invite_code,
    normalize_invite_code,
)


class TestInviteCodes:
    """Test invite code generation."""

    def test_code_is_6_chars(self):
        code = generate_invite_code()
        assert len(code) == INVITE_LENGTH
        assert len(code) == 6

    def test_code_is_alphanumeric_uppercase(self):
        for _ in range(200):
            code = generate_invite_code()
            assert all(c in string.ascii_uppercase + string.digits for c in code)
            assert code == code.upper()

    def test_codes_rarely_collide(self):
        codes = {generate_invite_code() for _ in range(1000)}
        # 36^6 possibilities; a handful of repeats in 1000 draws would be suspicious
        assert len(codes) >= 998

    def test_code_charset_is_correct(self):
        assert INVITE_CHARSET == string.ascii_uppercase + string.digits

    def test_generated_codes_validate(self):
        assert is_valid_invite_code(generate_invite_code())

    def test_invalid_codes_rejected(self):
        assert not is_valid_invite_code("ABC12")
        assert not is_valid_invite_code("ABC1234")
        assert not is_valid_invite_code("abc123")
        assert not is_valid_invite_code("AB-123")

    def test_normalize_invite_code_uppercase(self):
        assert normalize_invite_code("abc123") == "ABC123"

    def test_normalize_invite_code_strips_whitespace(self):
        assert normalize_invite_code("  Abc123 ") == "ABC123"

    def test_normalize_invite_code_already_upper(self):
        assert normalize_invite_code("ABC123") == "ABC123"


class TestUniqueInviteCode:
    """generate_unique_invite_code retries on codes already in use."""

    @pytest.mark.asyncio
    async def test_returns_first_free_code(self):
        store = MagicMock()
        store.get_group_by_invite_code = AsyncMock(return_value=None)

        code = await generate_unique_invite_code(store)

        assert is_valid_invite_code(code)
        store.get_group_by_invite_code.assert_awaited_once_with(code)

    @pytest.mark.asyncio
    async def test_retries_after_collision(self):
        store = MagicMock()
        store.get_group_by_invite_code = AsyncMock(side_effect=[object(), object(), None])

        with patch(
            "fitchallenge.groups.invite_codes.generate_invite_code",
            side_effect=["AAAAAA", "BBBBBB", "CCCCCC"],
        ):
            code = await generate_unique_invite_code(store)

        assert code == "CCCCCC"
        assert store.get_group_by_invite_code.await_count == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        store = MagicMock()
        store.get_group_by_invite_code = AsyncMock(return_value=object())

        with pytest.raises(PersistenceError):
            await generate_unique_invite_code(store)
