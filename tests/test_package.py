import isee_config
from isee_config import initial, preview


def test_top_level_api_is_lazily_exposed():
    assert callable(isee_config.glue_initials)
    assert callable(isee_config.view_initial_tiles)
    assert isee_config.PanelSequence is initial.PanelSequence


def test_subpackage_all_matches_dir():
    for module in (initial, preview):
        assert set(module.__all__) <= set(dir(module))
