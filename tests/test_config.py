import pytest
from vecmath import VecmathConfig, get_config, set_config, configure, reset_config


def test_defaults():
    cfg = get_config()
    assert cfg.strict_bounds is False
    assert cfg.inv_lerp_tolerance == 0.0
    assert cfg.serialization_enabled is True
    assert cfg.float_dtype == 'float32'

def test_configure_replaces_fields():
    previous = configure(strict_bounds=True)
    assert previous.strict_bounds is False
    assert get_config().strict_bounds is True
    assert get_config().float_dtype == 'float32'

def test_set_config_returns_previous():
    custom = VecmathConfig(inv_lerp_tolerance=1e-3)
    previous = set_config(custom)
    assert get_config() is custom
    set_config(previous)
    assert get_config() is previous

def test_reset():
    configure(serialization_enabled=False)
    reset_config()
    assert get_config() == VecmathConfig()

def test_unknown_field():
    with pytest.raises(TypeError):
        configure(no_such_option=1)

def test_validation():
    with pytest.raises(ValueError):
        configure(inv_lerp_tolerance=-1.0)
    with pytest.raises(ValueError):
        configure(float_dtype='int32')
    with pytest.raises(ValueError):
        configure(float_dtype='not-a-dtype')
    # Failed updates leave the active config alone
    assert get_config() == VecmathConfig()
