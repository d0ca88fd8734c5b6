import pytest

from fecom.env import DEFAULT_OUTPUT_FILE, Settings, load_settings
from fecom.errors import ConfigurationError


def test_defaults_when_environment_is_empty():
    settings = load_settings(environ={}, dotenv=False)
    assert settings == Settings()
    assert settings.output_file == DEFAULT_OUTPUT_FILE == "youtube_comments.tsv"
    assert settings.max_span_days == 3
    assert settings.relevance_language == "id"
    assert settings.api_key is None
    assert settings.timezone is None


def test_values_from_environment():
    settings = load_settings(
        environ={
            "YOUTUBE_API_KEY": "abc",
            "FECOM_TIMEZONE": "Asia/Jakarta",
            "FECOM_OUTPUT_FILE": "out.tsv",
            "FECOM_MAX_SPAN_DAYS": "7",
            "FECOM_RELEVANCE_LANGUAGE": "en",
            "FECOM_SKIP_FAILED_VIDEOS": "yes",
            "FECOM_ESCAPE_TSV": "1",
            "FECOM_LOG_LEVEL": "DEBUG",
        },
        dotenv=False,
    )
    assert settings == Settings(
        api_key="abc",
        timezone="Asia/Jakarta",
        output_file="out.tsv",
        max_span_days=7,
        relevance_language="en",
        skip_failed_videos=True,
        escape_tsv=True,
        log_level="DEBUG",
    )


@pytest.mark.parametrize(
    "name,value",
    [
        ("FECOM_MAX_SPAN_DAYS", "three"),
        ("FECOM_MAX_SPAN_DAYS", "0"),
        ("FECOM_SKIP_FAILED_VIDEOS", "maybe"),
        ("FECOM_ESCAPE_TSV", "sometimes"),
    ],
)
def test_invalid_values_raise(name, value):
    with pytest.raises(ConfigurationError):
        load_settings(environ={name: value}, dotenv=False)


def test_dotenv_file_in_working_directory(tmp_path, monkeypatch):
    # setenv first so monkeypatch removes what load_dotenv adds on teardown
    for name in ("YOUTUBE_API_KEY", "FECOM_OUTPUT_FILE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    (tmp_path / ".env").write_text("YOUTUBE_API_KEY=from-dotenv\nFECOM_OUTPUT_FILE=dotenv.tsv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.api_key == "from-dotenv"
    assert settings.output_file == "dotenv.tsv"


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "from-env")
    (tmp_path / ".env").write_text("YOUTUBE_API_KEY=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_settings().api_key == "from-env"
