import pytest

from cavegen.dungeon import DEFAULT_MARKERS, DOOR, END, KEY, PLAYER, WALL, ConfigurationError, GeneratorConfig, parse_markers


def test_defaults():
    cfg = GeneratorConfig()
    assert cfg.size == (64, 64)
    assert cfg.fill_percent == 45
    assert cfg.smoothing_iterations == 5
    assert cfg.markers == DEFAULT_MARKERS
    assert cfg.seed is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -3},
        {"fill_percent": -1},
        {"fill_percent": 101},
        {"smoothing_iterations": -1},
        {"width": 10.5},
        {"width": True},
        {"markers": ("Z",)},
        {"markers": (WALL,)},
        {"markers": "@K"},
        {"markers": ()},
        {"seed": "abc"},
    ],
)
def test_invalid_configs_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        GeneratorConfig(**kwargs)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        GeneratorConfig(width=0)


def test_empty_markers_allowed_only_when_solid():
    cfg = GeneratorConfig(fill_percent=100, markers=())
    assert cfg.markers == ()


def test_markers_normalised_to_tuple():
    cfg = GeneratorConfig(markers=[PLAYER, KEY])
    assert cfg.markers == (PLAYER, KEY)


def test_resolved_seed_is_not_stored_on_config():
    cfg = GeneratorConfig()
    s = cfg.resolved_seed()
    assert isinstance(s, int) and 0 <= s < 2**31 - 1
    assert cfg.seed is None
    assert GeneratorConfig(seed=42).resolved_seed() == 42


def test_parse_markers_names_and_chars():
    assert parse_markers("player, key,DOOR") == (PLAYER, KEY, DOOR)
    assert parse_markers("@,X") == (PLAYER, END)
    assert parse_markers("player,,key,") == (PLAYER, KEY)
    with pytest.raises(ConfigurationError):
        parse_markers("player,dragon")


def test_from_env_reads_cavegen_variables():
    env = {
        "CAVEGEN_WIDTH": "32",
        "CAVEGEN_HEIGHT": " 20 ",
        "CAVEGEN_FILL_PERCENT": "50",
        "CAVEGEN_SMOOTHING_ITERATIONS": "2",
        "CAVEGEN_SEED": "99",
        "CAVEGEN_MARKERS": "player,door",
    }
    cfg = GeneratorConfig.from_env(env)
    assert cfg.size == (32, 20)
    assert cfg.fill_percent == 50
    assert cfg.smoothing_iterations == 2
    assert cfg.seed == 99
    assert cfg.markers == (PLAYER, DOOR)


def test_from_env_overrides_win_and_none_is_ignored():
    env = {"CAVEGEN_WIDTH": "32", "CAVEGEN_HEIGHT": "20"}
    cfg = GeneratorConfig.from_env(env, width=12, height=None, seed=5)
    assert cfg.size == (12, 20)
    assert cfg.seed == 5


def test_from_env_blank_values_fall_back_to_defaults():
    cfg = GeneratorConfig.from_env({"CAVEGEN_WIDTH": "", "CAVEGEN_MARKERS": "  "})
    assert cfg.width == 64
    assert cfg.markers == DEFAULT_MARKERS


def test_from_env_rejects_non_integer():
    with pytest.raises(ConfigurationError, match="CAVEGEN_FILL_PERCENT"):
        GeneratorConfig.from_env({"CAVEGEN_FILL_PERCENT": "lots"})
