import pytest
from pydantic import ValidationError

from painel.core.config import Settings


def test_defaults_match_dashboard_canvas():
    settings = Settings(_env_file=None)
    assert (settings.CHART_WIDTH, settings.CHART_HEIGHT, settings.CHART_PADDING) == (1000, 180, 20)


def test_cors_origins_list():
    settings = Settings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test,")
    assert settings.CORS_ORIGINS_LIST == ["http://a.test", "http://b.test"]


def test_timezone_resolves_to_tzinfo():
    settings = Settings(_env_file=None, TIMEZONE="America/Sao_Paulo")
    assert settings.TZINFO is not None
    assert Settings(_env_file=None, TIMEZONE="").TZINFO is None


def test_unknown_timezone_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, TIMEZONE="Mars/Olympus_Mons")


@pytest.mark.parametrize(
    "overrides",
    [
        {"CHART_WIDTH": 0},
        {"CHART_HEIGHT": -10},
        {"CHART_PADDING": -1},
        {"CHART_PADDING": 90},
    ],
)
def test_impossible_canvas_is_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)
