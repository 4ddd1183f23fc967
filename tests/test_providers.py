import pytest

from lazybox.core.errors import FrozenServiceError
from lazybox.core.provider import ServiceProvider
from lazybox.providers.env import EnvFileProvider, parse_env_file


class DatabaseProvider(ServiceProvider):
    def register(self, container):
        container.set("dsn", "sqlite://")
        container.set("db", lambda c: {"dsn": c.get("dsn")})
        container.set("cursor", container.factory(lambda c: object()))


def test_provider_registers_entries(container):
    assert container.register(DatabaseProvider()) is container
    assert container.get("db") == {"dsn": "sqlite://"}
    assert container.get("cursor") is not container.get("cursor")


def test_overrides_win_over_provider(container):
    container.register(DatabaseProvider(), {"dsn": "postgres://"})
    assert container.get("db") == {"dsn": "postgres://"}


def test_override_of_frozen_id_fails(container):
    container.set("db", lambda c: "resolved")
    container.get("db")
    with pytest.raises(FrozenServiceError):
        container.register(DatabaseProvider())


def test_provider_is_abstract():
    with pytest.raises(TypeError):
        ServiceProvider()


def test_parse_env_file(tmp_path):
    env = tmp_path / "app.env"
    env.write_text(
        "# comment\n"
        "\n"
        "export APP_HOST=\"127.0.0.1\"\n"
        "APP_PORT='8080'\n"
        "OTHER=value=with=equals\n"
        "not a pair\n",
        encoding="utf-8",
    )
    assert parse_env_file(env) == {
        "APP_HOST": "127.0.0.1",
        "APP_PORT": "8080",
        "OTHER": "value=with=equals",
    }


def test_parse_missing_env_file(tmp_path):
    assert parse_env_file(tmp_path / "missing.env") == {}


def test_env_file_provider_prefix(container, tmp_path):
    env = tmp_path / "app.env"
    env.write_text("APP_HOST=localhost\nAPP_PORT=8080\nDEBUG=1\n", encoding="utf-8")
    container.register(EnvFileProvider(env, prefix="APP_"))
    assert sorted(container.keys()) == ["host", "port"]
    assert container.get("port") == "8080"


def test_env_file_provider_keeps_case(container, tmp_path):
    env = tmp_path / "app.env"
    env.write_text("Mixed_Key=x\n", encoding="utf-8")
    container.register(EnvFileProvider(str(env), lowercase=False))
    assert container.get("Mixed_Key") == "x"
