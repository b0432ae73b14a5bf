import pytest

from xonix.levels import Level, ResourceManager, parse_levels


def test_parse_header_and_levels():
    config = parse_levels("1280 800 3\n80 1\n85 2\n")
    assert (config.width, config.height, config.life) == (1280, 800, 3)
    assert config.levels == [Level(80, 1), Level(85, 2)]


def test_parse_header_only():
    config = parse_levels("640 480 5")
    assert config.levels == []


def test_parse_ignores_unpaired_trailing_value():
    config = parse_levels("10 20 3 70 2 90")
    assert config.levels == [Level(70, 2)]


def test_parse_stops_at_non_integer():
    config = parse_levels("10 20 3 70 2 end 90 4")
    assert config.levels == [Level(70, 2)]


def test_parse_any_whitespace():
    assert parse_levels("1 2 3 4 5") == parse_levels("1\n2\t3\n\n4   5\n")


@pytest.mark.parametrize("text", ["", "10 20", "10 x 3"])
def test_parse_missing_header_raises(text):
    with pytest.raises(ValueError):
        parse_levels(text)


def test_resource_manager_reads_file(tmp_path):
    path = tmp_path / "levels.txt"
    path.write_text("1280 800 3\n80 1\n85 2\n")
    manager = ResourceManager(path)
    assert manager.level_count() == 2
    assert manager.area_to_occupy(1) == 85
    assert manager.enemy_num(0) == 1
    assert (manager.width, manager.height, manager.life) == (1280, 800, 3)


def test_resource_manager_bad_level_index(tmp_path):
    path = tmp_path / "levels.txt"
    path.write_text("1 1 1 50 1")
    manager = ResourceManager(path)
    with pytest.raises(IndexError):
        manager.area_to_occupy(1)
    with pytest.raises(IndexError):
        manager.enemy_num(-1)


def test_resource_manager_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(FileNotFoundError, match="Failed to open file"):
        ResourceManager(missing)