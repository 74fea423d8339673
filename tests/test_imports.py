import importlib

MODULES = [
    "radar_core.model",
    "radar_core.surface",
    "radar_core.geometry",
    "radar_core.path_builder",
    "radar_core.series_renderer",
    "radar_core.web_renderer",
    "radar_core.value_renderer",
    "radar_core.highlight_renderer",
    "radar_core.accessibility",
    "radar_core.renderer",
    "radar_utils.mpl_surface",
    "radar_utils.viz_radar",
]


def test_modules_importable():
    for mod in MODULES:
        importlib.import_module(mod)
