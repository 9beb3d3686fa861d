import pytest

from draughtscan.config import Config, ConfigError, Variant


def test_defaults():
    opts = Config().options
    assert opts.variant is Variant.INTERNATIONAL
    assert opts.dxp_host == "127.0.0.1"
    assert opts.dxp_port == 27531
    assert opts.trans_size == 1 << 24
    assert opts.smp is False
    assert opts.smp_threads == 1
    assert opts.bb is True
    assert opts.bb_size == 6
    assert opts.book is False
    assert opts.dxp_server is True
    assert opts.dxp_moves == 75


@pytest.mark.parametrize(
    "name, board_size, pip_max",
    [("international", 10, 300), ("brazilian", 8, 200)],
)
def test_variant_board_sizes(name, board_size, pip_max):
    cfg = Config()
    cfg.set("variant", name)
    variant = cfg.update().variant
    assert variant.board_size == board_size
    assert variant.pip_max == pip_max


def test_threads_enable_smp():
    cfg = Config()
    cfg.set("threads", "4")
    opts = cfg.update()
    assert opts.smp is True
    assert opts.smp_threads == 4
    assert cfg.options == opts


def test_zero_bb_size_disables_bitbases():
    cfg = Config()
    cfg.set("bb-size", "0")
    assert cfg.update().bb is False


def test_brazilian_variant():
    cfg = Config()
    cfg.set("variant", "brazilian")
    assert cfg.update().variant is Variant.BRAZILIAN


def test_unknown_variant_raises():
    cfg = Config()
    cfg.set("variant", "russian")
    with pytest.raises(ConfigError):
        cfg.update()


def test_unknown_variable_raises():
    with pytest.raises(ConfigError):
        Config().get("no-such-thing")


def test_get_bool_rejects_other_words():
    cfg = Config()
    cfg.set("book", "yes")
    with pytest.raises(ConfigError):
        cfg.get_bool("book")


def test_get_int_rejects_text():
    cfg = Config()
    cfg.set("threads", "many")
    with pytest.raises(ConfigError):
        cfg.get_int("threads")


def test_get_float():
    cfg = Config()
    cfg.set("dxp-time", "2.5")
    assert cfg.get_float("dxp-time") == 2.5


def test_load_file(tmp_path):
    path = tmp_path / "engine.ini"
    path.write_text("book = true\nthreads = 2\n dxp-host = 10.0.0.5\n")
    cfg = Config()
    cfg.load(path)
    assert cfg.get("dxp-host") == "10.0.0.5"
    opts = cfg.update()
    assert opts.book is True
    assert opts.smp_threads == 2


def test_load_bad_separator(tmp_path):
    path = tmp_path / "engine.ini"
    path.write_text("book : true\n")
    with pytest.raises(ConfigError):
        Config().load(path)


def test_load_missing_value(tmp_path):
    path = tmp_path / "engine.ini"
    path.write_text("book =\n")
    with pytest.raises(ConfigError):
        Config().load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        Config().load(tmp_path / "absent.ini")