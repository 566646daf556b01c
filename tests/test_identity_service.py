from recipe_web.auth.identity_service import IdentityService


def test_placeholder_user() -> None:
    service = IdentityService()
    user = service.get_current_user()
    assert user.uid == "test"
    assert service.get_current_user() is user


def test_sign_out_resets_user() -> None:
    service = IdentityService()
    first = service.get_current_user()
    service.sign_out()
    assert service.get_current_user() is not first
