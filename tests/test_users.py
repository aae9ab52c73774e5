import pytest

from errors import Conflict, InvalidCredentials, NotFound
from models import ProfileUpdate, RegisterRequest
from conftest import ADMIN_EMAIL


def registration(email="a@x.com", password="secret1", **profile):
    return RegisterRequest(email=email, password=password, **profile)


class TestRegistration:

    @pytest.mark.asyncio
    async def test_register_then_login(self, accounts, tokens):
        user, token = await accounts.register(registration(first_name="Ada", last_name="Lovelace"))
        assert user.orders == 0
        assert user.name == "Ada Lovelace"
        assert tokens.verify(token).user_id == user.id

        logged_in, login_token = await accounts.login("a@x.com", "secret1")
        assert logged_in.id == user.id
        assert login_token != token
        assert tokens.verify(login_token).user_id == tokens.verify(token).user_id

    @pytest.mark.asyncio
    async def test_password_stored_hashed(self, accounts, user_store):
        await accounts.register(registration())
        doc = await user_store.find_by_email("a@x.com")
        assert doc["password"] != "secret1"
        assert doc["password"].startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts_and_keeps_first(self, accounts, user_store):
        await accounts.register(registration(first_name="First"))
        before = await user_store.find_by_email("a@x.com")

        with pytest.raises(Conflict):
            await accounts.register(registration(password="another1", first_name="Second"))

        after = await user_store.find_by_email("a@x.com")
        assert after == before

    @pytest.mark.asyncio
    async def test_email_is_case_insensitive(self, accounts):
        await accounts.register(registration(email="Mixed@X.com"))
        with pytest.raises(Conflict):
            await accounts.register(registration(email="mixed@x.com"))
        user, _ = await accounts.login("MIXED@x.com", "secret1")
        assert user.email == "mixed@x.com"

    @pytest.mark.asyncio
    async def test_admin_email_gets_admin_role(self, accounts, tokens):
        user, token = await accounts.register(registration(email=ADMIN_EMAIL))
        assert user.role == "admin"
        assert tokens.verify(token).is_admin


class TestLogin:

    @pytest.mark.asyncio
    async def test_wrong_password(self, accounts):
        await accounts.register(registration())
        with pytest.raises(InvalidCredentials) as exc:
            await accounts.login("a@x.com", "wrong")
        assert exc.value.detail == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_unknown_email_gives_same_error(self, accounts):
        with pytest.raises(InvalidCredentials) as exc:
            await accounts.login("nobody@x.com", "secret1")
        assert exc.value.detail == "Invalid email or password"


class TestProfile:

    @pytest.mark.asyncio
    async def test_get_profile_never_exposes_hash(self, accounts):
        user, _ = await accounts.register(registration())
        profile = await accounts.get_profile(user.id)
        assert "password" not in profile.model_dump(by_alias=True)

    @pytest.mark.asyncio
    async def test_missing_user(self, accounts):
        with pytest.raises(NotFound):
            await accounts.get_profile("65f000000000000000000000")
        with pytest.raises(NotFound):
            await accounts.get_profile("not-an-id")

    @pytest.mark.asyncio
    async def test_update_only_touches_supplied_fields(self, accounts):
        user, _ = await accounts.register(registration(first_name="Ada", city="London"))
        updated = await accounts.update_profile(user.id, ProfileUpdate(city="Paris", profile_image="img/me.png"))
        assert updated.city == "Paris"
        assert updated.first_name == "Ada"
        assert updated.profile_image == "img/me.png"

    @pytest.mark.asyncio
    async def test_patch_cannot_set_orders_or_password(self, accounts, user_store):
        user, _ = await accounts.register(registration())
        patch = ProfileUpdate.model_validate({"orders": 99, "password": "x", "role": "admin", "phone": "1"})
        updated = await accounts.update_profile(user.id, patch)
        assert updated.orders == 0
        assert updated.role == "user"
        await accounts.login("a@x.com", "secret1")


class TestChangePassword:

    @pytest.mark.asyncio
    async def test_change_password(self, accounts):
        user, _ = await accounts.register(registration())
        await accounts.change_password(user.id, "secret1", "newsecret")
        await accounts.login("a@x.com", "newsecret")
        with pytest.raises(InvalidCredentials):
            await accounts.login("a@x.com", "secret1")

    @pytest.mark.asyncio
    async def test_wrong_current_password_keeps_hash(self, accounts, user_store):
        user, _ = await accounts.register(registration())
        before = (await user_store.find_by_email("a@x.com"))["password"]

        with pytest.raises(InvalidCredentials):
            await accounts.change_password(user.id, "wrong", "newsecret")

        assert (await user_store.find_by_email("a@x.com"))["password"] == before

    @pytest.mark.asyncio
    async def test_old_tokens_stay_valid(self, accounts, tokens):
        user, token = await accounts.register(registration())
        await accounts.change_password(user.id, "secret1", "newsecret")
        assert tokens.verify(token).user_id == user.id
