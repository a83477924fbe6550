from mpox_dashboard import config as cfg


def test_get_env_treats_blank_as_missing(monkeypatch):
    monkeypatch.setenv('MPOX_TEST_VALUE', '   ')
    assert cfg._get_env('MPOX_TEST_VALUE', 'fallback') == 'fallback'


def test_get_int_env(monkeypatch):
    monkeypatch.setenv('MPOX_TEST_PORT', '9000')
    assert cfg._get_int_env('MPOX_TEST_PORT', 8050) == 9000
    monkeypatch.setenv('MPOX_TEST_PORT', 'abc')
    assert cfg._get_int_env('MPOX_TEST_PORT', 8050) == 8050
    monkeypatch.delenv('MPOX_TEST_PORT')
    assert cfg._get_int_env('MPOX_TEST_PORT', 8050) == 8050


def test_get_float_env(monkeypatch):
    monkeypatch.setenv('MPOX_TEST_TIMEOUT', '2.5')
    assert cfg._get_float_env('MPOX_TEST_TIMEOUT', None) == 2.5
    monkeypatch.setenv('MPOX_TEST_TIMEOUT', 'soon')
    assert cfg._get_float_env('MPOX_TEST_TIMEOUT', None) is None


def test_get_bool_env(monkeypatch):
    for raw in ['true', '1', 'on', 'YES']:
        monkeypatch.setenv('MPOX_TEST_DEBUG', raw)
        assert cfg._get_bool_env('MPOX_TEST_DEBUG', False) is True
    monkeypatch.setenv('MPOX_TEST_DEBUG', 'off')
    assert cfg._get_bool_env('MPOX_TEST_DEBUG', True) is False
