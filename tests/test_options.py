import pytest

from renderer.options import DEFAULT_OPTIONS, MAX_DEPTH_LIMIT, RenderOptions


def test_defaults():
    options = RenderOptions(width=800, height=600)
    assert options.avg_mixer == 0.45
    assert options.diff_threshold == 0.25
    assert options.highlight_diff is False
    assert options.zoom == 1
    assert options.gamma == 1
    assert options.max_depth == 10
    assert options.use_true_lambertian is False
    assert options.diffuse_rays_probes == 10
    assert options.diffuse_second_rays_probes == 1
    assert DEFAULT_OPTIONS == options


def test_replace_returns_a_copy():
    options = RenderOptions(width=4, height=4)
    changed = options.replace(max_depth=3)
    assert changed.max_depth == 3
    assert options.max_depth == 10


@pytest.mark.parametrize("zoom, expected", [(1, (800, 600)), (2, (400, 300)), (3, (266, 200)), (0.5, (1600, 1200))])
def test_scaled_size_is_even(zoom, expected):
    assert RenderOptions(width=800, height=600, zoom=zoom).scaled_size(800, 600) == expected


def test_validate_accepts_defaults():
    assert DEFAULT_OPTIONS.validate() is DEFAULT_OPTIONS
    assert RenderOptions(width=1, height=1, max_depth=0, diffuse_rays_probes=0,
                         diffuse_second_rays_probes=0, avg_mixer=1, diff_threshold=0).validate()


@pytest.mark.parametrize("changes, field", [
    ({"width": 0}, "width"),
    ({"height": -2}, "height"),
    ({"zoom": 0}, "zoom"),
    ({"diff_threshold": -0.1}, "diff_threshold"),
    ({"avg_mixer": 1.5}, "avg_mixer"),
    ({"gamma": 0}, "gamma"),
    ({"max_depth": -1}, "max_depth"),
    ({"max_depth": MAX_DEPTH_LIMIT + 1}, "max_depth"),
    ({"diffuse_rays_probes": -1}, "diffuse_rays_probes"),
    ({"diffuse_second_rays_probes": -1}, "diffuse_second_rays_probes"),
])
def test_validate_rejects_out_of_range(changes, field):
    with pytest.raises(ValueError, match=field):
        DEFAULT_OPTIONS.replace(**changes).validate()
