import pytest
from pydantic import ValidationError

from ianazone import OracleConfig
from ianazone.json import dumps as json_dumps
from ianazone.json import loads as json_loads


def test_defaults():
    config = OracleConfig()
    assert config.locale == "en_US"
    assert config.structured is True


def test_serialization():
    """Test oracle config serialization."""
    config = OracleConfig(locale="fr_FR", structured=False)
    config_dict = config.to_dict()
    assert config_dict == {"locale": "fr_FR", "structured": False}
    config2 = OracleConfig.from_dict(json_loads(json_dumps(config_dict)))
    assert config == config2


def test_from_dict_defaults():
    assert OracleConfig.from_dict({}) == OracleConfig()


@pytest.mark.parametrize("locale", ["xx_YY", "not a locale", ""])
def test_invalid_locale(locale):
    with pytest.raises(ValidationError, match="Unknown locale"):
        OracleConfig(locale=locale)


def test_frozen():
    config = OracleConfig()
    with pytest.raises(ValidationError):
        config.locale = "de_DE"  # type: ignore[misc]


def test_repr():
    assert repr(OracleConfig()) == "OracleConfig(locale='en_US', structured=True)"
