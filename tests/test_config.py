import pytest

from curseforge import ClientOptions, ConfigurationError, UnknownFields, options_from_env
from curseforge.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, api_base_from_env, api_key_from_env


def test_defaults():
    options = ClientOptions()
    assert options.timeout == DEFAULT_TIMEOUT
    assert options.max_connections is None
    assert options.user_agent == DEFAULT_USER_AGENT
    assert options.unknown_fields is UnknownFields.IGNORE


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, UnknownFields.IGNORE),
        ("allow", UnknownFields.ALLOW),
        (" DENY ", UnknownFields.DENY),
        (UnknownFields.ALLOW, UnknownFields.ALLOW),
    ],
)
def test_unknown_fields_parse(value, expected):
    assert UnknownFields.parse(value) is expected


@pytest.mark.parametrize("value", ["strict", 1, ""])
def test_unknown_fields_parse_rejects(value):
    with pytest.raises(ConfigurationError):
        UnknownFields.parse(value)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"timeout": 0},
        {"timeout": -1},
        {"timeout": "soon"},
        {"timeout": None},
        {"max_connections": 0},
        {"max_connections": "many"},
        {"max_connections": 2.5},
        {"user_agent": ""},
        {"unknown_fields": "nope"},
    ],
)
def test_invalid_options(kwargs):
    with pytest.raises(ConfigurationError):
        ClientOptions(**kwargs)


def test_invalid_option_names_the_variable():
    with pytest.raises(ConfigurationError) as info:
        ClientOptions(max_connections="many")
    assert "CURSEFORGE_MAX_CONNECTIONS" in str(info.value)


def test_numeric_strings_are_coerced():
    options = ClientOptions(timeout="2.5", max_connections="4", unknown_fields="Allow")
    assert options.timeout == 2.5
    assert options.max_connections == 4
    assert options.unknown_fields is UnknownFields.ALLOW


def test_options_read_process_environment(monkeypatch):
    monkeypatch.setenv("CURSEFORGE_TIMEOUT", "7")
    monkeypatch.setenv("CURSEFORGE_UNKNOWN_FIELDS", "deny")
    monkeypatch.setenv("CURSEFORGE_USER_AGENT", "")
    options = ClientOptions()
    assert options.timeout == 7.0
    assert options.unknown_fields is UnknownFields.DENY
    assert options.user_agent == DEFAULT_USER_AGENT


def test_keyword_arguments_beat_environment(monkeypatch):
    monkeypatch.setenv("CURSEFORGE_TIMEOUT", "7")
    assert ClientOptions(timeout=1).timeout == 1.0


def test_bad_process_environment(monkeypatch):
    monkeypatch.setenv("CURSEFORGE_MAX_CONNECTIONS", "1.5")
    with pytest.raises(ConfigurationError):
        ClientOptions()


def test_options_from_env():
    options = options_from_env({
        "CURSEFORGE_TIMEOUT": "2.5",
        "CURSEFORGE_MAX_CONNECTIONS": "4",
        "CURSEFORGE_USER_AGENT": "launcher/2",
        "CURSEFORGE_UNKNOWN_FIELDS": "allow",
    })
    assert options.timeout == 2.5
    assert options.max_connections == 4
    assert options.user_agent == "launcher/2"
    assert options.unknown_fields is UnknownFields.ALLOW


def test_options_from_empty_env():
    assert options_from_env({}) == ClientOptions()


def test_options_from_env_bad_number():
    with pytest.raises(ConfigurationError) as info:
        options_from_env({"CURSEFORGE_TIMEOUT": "soon"})
    assert "CURSEFORGE_TIMEOUT" in str(info.value)


def test_api_key_prefers_key_over_token():
    assert api_key_from_env({"CURSEFORGE_API_KEY": "a", "CURSEFORGE_API_TOKEN": "b"}) == "a"
    assert api_key_from_env({"CURSEFORGE_API_TOKEN": "b"}) == "b"
    assert api_key_from_env({"CURSEFORGE_API_KEY": ""}) is None


def test_api_base_from_env():
    assert api_base_from_env({}) is None
    assert api_base_from_env({"CURSEFORGE_API_BASE": "https://proxy.example/v1/"}) == "https://proxy.example/v1/"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("CURSEFORGE_API_KEY", "from-env")
    monkeypatch.setenv("CURSEFORGE_TIMEOUT", "3")
    assert api_key_from_env() == "from-env"
    assert options_from_env().timeout == 3.0
