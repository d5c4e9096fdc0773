import pytest, pydantic as p
import session_auth.application.models as amod


def test_key_namespaces():
    assert amod.session_key("ABC") == "session:ABC:userID"
    assert amod.user_key("42") == "user:42:session"


def test_settings_defaults():
    settings = amod.SessionSettings()
    assert settings.token_expiration_minutes == 30
    assert settings.ttl_seconds == 1800
    assert settings.token_bytes == 16
    assert settings.cookie_name == "session"


def test_settings_are_frozen_and_validated():
    settings = amod.SessionSettings()
    with pytest.raises(p.ValidationError):
        settings.token_expiration_minutes = 10
    with pytest.raises(p.ValidationError):
        amod.SessionSettings(token_expiration_minutes=0)
    with pytest.raises(p.ValidationError):
        amod.SessionSettings(token_bytes=8)


def test_store_command_constructors():
    assert amod.StoreCommand.set("k", "v") == amod.StoreCommand(command="SET", key="k", value="v")
    assert amod.StoreCommand.set_with_expiration("k", "v", 60).ttl == 60
    assert amod.StoreCommand.delete("k").value is None


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(command="SETEX", key="k", value="v"),
        dict(command="SETEX", key="k", value="v", ttl=0),
        dict(command="SET", key="k"),
        dict(command="INCR", key="k"),
    ],
)
def test_store_command_rejects_bad_arguments(kwargs):
    with pytest.raises(p.ValidationError):
        amod.StoreCommand(**kwargs)
